from typing import Iterable, List

import structlog

from ratelimit_statsd.core.logging import get_logger
from ratelimit_statsd.domain.enums import EventKind, MatchType, ObserverType
from ratelimit_statsd.domain.exceptions import MissingRequiredFieldError
from ratelimit_statsd.domain.rate_limit import GlobalRateLimit
from ratelimit_statsd.domain.statsd import MetricMapper, MetricMapping
from ratelimit_statsd.services.statsd.defaults import default_metric_mappings
from ratelimit_statsd.services.statsd.matcher import encode_matcher
from ratelimit_statsd.services.statsd.pattern import compile_match, merge_labels

STAT_PREFIX = "ratelimit.service.rate_limit"
MAPPING_NAME_PREFIX = "ratelimit_service_rate_limit"


def build_stat_path(domain: str, descriptor: str, event: EventKind) -> str:
    return f"{STAT_PREFIX}.{domain}.{descriptor}.{event}"


def new_metric_mappings(service_name: str, domain: str, rate_limit: GlobalRateLimit) -> List[MetricMapping]:
    """Mappings for every event kind of one identified rate limit, in event order."""
    if rate_limit.identifier is None:
        raise MissingRequiredFieldError(f"GlobalRateLimit '{rate_limit.name}'", "identifier")
    if rate_limit.route is None:
        raise MissingRequiredFieldError(f"GlobalRateLimit '{rate_limit.name}'", "route")

    descriptor = encode_matcher(rate_limit.matcher, rate_limit.detailed_metric)
    match_type = MatchType.REGEX if rate_limit.detailed_metric else MatchType.PLAIN
    static_labels = {
        "identifier": rate_limit.identifier,
        "rate_limit_service_name": service_name,
        "global_rate_limit_name": rate_limit.name,
        "route": rate_limit.route,
    }

    mappings: List[MetricMapping] = []
    for event in EventKind:
        match, dynamic_labels = compile_match(
            build_stat_path(domain, descriptor, event), rate_limit.detailed_metric
        )
        mappings.append(
            MetricMapping(
                name=f"{MAPPING_NAME_PREFIX}_{event}",
                match=match,
                match_type=match_type,
                timer_type=ObserverType.HISTOGRAM,
                labels=merge_labels(static_labels, dynamic_labels),
            )
        )
    return mappings


class StatsdMappingGenerator:
    """Builds the statsd_exporter mapping configuration for a rate limit service."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def generate(
        self,
        service_name: str,
        domain: str,
        rate_limits: Iterable[GlobalRateLimit],
    ) -> MetricMapper:
        mapper = MetricMapper()
        skipped = 0

        for rate_limit in rate_limits:
            if rate_limit.identifier is None:
                skipped += 1
                self._logger.debug("Skipping rate limit without identifier", global_rate_limit=rate_limit.name)
                continue
            mapper.mappings.extend(new_metric_mappings(service_name, domain, rate_limit))

        mapper.mappings.extend(default_metric_mappings())

        self._logger.info(
            "Generated statsd mapping configuration",
            rate_limit_service=service_name,
            domain=domain,
            mappings=len(mapper.mappings),
            skipped=skipped,
        )
        return mapper


def new_statsd_config(
    service_name: str,
    domain: str,
    rate_limits: Iterable[GlobalRateLimit],
    logger: structlog.stdlib.BoundLogger | None = None,
) -> MetricMapper:
    generator = StatsdMappingGenerator(logger or get_logger(__name__))
    return generator.generate(service_name, domain, rate_limits)
