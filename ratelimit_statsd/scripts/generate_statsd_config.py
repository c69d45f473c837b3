#!/usr/bin/env python3
"""Generate statsd_exporter mappings for a rate limit service from GlobalRateLimit manifests"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

import yaml

from ratelimit_statsd.core.logging import setup_logger
from ratelimit_statsd.domain.exceptions import DomainError, ManifestError
from ratelimit_statsd.domain.rate_limit import GlobalRateLimit
from ratelimit_statsd.infrastructure.mappers import GlobalRateLimitMapper, MetricMapperMapper
from ratelimit_statsd.services.statsd import StatsdConfigMapBuilder, StatsdMappingGenerator
from ratelimit_statsd.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratelimit-statsd",
        description="Generate the statsd_exporter mapping configuration for a rate limit service.",
    )
    parser.add_argument("manifests", nargs="+", type=Path, help="YAML files with GlobalRateLimit resources")
    parser.add_argument("--service", help="Rate limit service name (default: SERVICE_NAME setting)")
    parser.add_argument("--domain", help="Rate limit domain (default: RATE_LIMIT_DOMAIN setting or spec.domain)")
    parser.add_argument("--namespace", help="ConfigMap namespace (default: K8S_NAMESPACE setting)")
    parser.add_argument("--config-map", action="store_true", help="Print a ConfigMap manifest instead of raw mappings")
    parser.add_argument("--config", default="config.toml", help="Settings TOML file")
    parser.add_argument("--log-level", help="Override LOG_LEVEL setting")
    return parser


def load_rate_limits(paths: Iterable[Path]) -> List[GlobalRateLimit]:
    rate_limits: List[GlobalRateLimit] = []
    for path in paths:
        try:
            with open(path, "r", encoding="utf-8") as f:
                documents = list(yaml.safe_load_all(f))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ManifestError(f"Cannot read manifest {path}: {e}") from e
        rate_limits.extend(GlobalRateLimitMapper.from_documents(documents))
    return rate_limits


def resolve_domain(explicit: str | None, rate_limits: Sequence[GlobalRateLimit]) -> str:
    if explicit:
        return explicit

    domains = {rl.domain for rl in rate_limits if rl.domain}
    match len(domains):
        case 1:
            return domains.pop()
        case 0:
            raise ManifestError("No rate limit domain given and none set in manifests")
        case _:
            raise ManifestError(f"Manifests disagree on rate limit domain: {', '.join(sorted(domains))}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(config_path=args.config)
    logger = setup_logger(args.log_level or settings.LOG_LEVEL)

    service_name = args.service or settings.SERVICE_NAME
    try:
        rate_limits = load_rate_limits(args.manifests)
        domain = resolve_domain(args.domain or settings.RATE_LIMIT_DOMAIN, rate_limits)
        mapper = StatsdMappingGenerator(logger).generate(service_name, domain, rate_limits)
    except DomainError as e:
        logger.error("Failed to generate statsd mapping configuration", error=e.message)
        return 1

    config = MetricMapperMapper.to_yaml(mapper)
    if args.config_map:
        builder = StatsdConfigMapBuilder(
            service_name,
            namespace=args.namespace or settings.K8S_NAMESPACE,
            name_suffix=settings.STATSD_CONFIG_MAP_SUFFIX,
            data_key=settings.STATSD_MAPPING_CONF_KEY,
            managed_by=settings.MANAGED_BY,
        )
        sys.stdout.write(yaml.safe_dump(builder.build_manifest(config), sort_keys=False, width=4096))
    else:
        sys.stdout.write(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
