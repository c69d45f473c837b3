from typing import Any, Dict, List, Optional

from ratelimit_statsd.domain.exceptions import MalformedActionError, ManifestError
from ratelimit_statsd.domain.rate_limit import (
    GenericKeyAction,
    GlobalRateLimit,
    HeaderValueMatchAction,
    RateLimitAction,
    RemoteAddressAction,
    RequestHeadersAction,
)

GLOBAL_RATE_LIMIT_KIND = "GlobalRateLimit"
ACTION_FIELDS = ("request_headers", "remote_address", "generic_key", "header_value_match")


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ManifestError(f"GlobalRateLimit {key} must be a mapping, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], key: str, name: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ManifestError(f"GlobalRateLimit '{name}': {key} must be a string, got {value!r}")
    return value


class RateLimitActionMapper:
    @staticmethod
    def from_dict(data: Dict[str, Any]) -> RateLimitAction:
        if not isinstance(data, dict):
            raise MalformedActionError(f"Matcher entry must be a mapping, got {type(data).__name__}")

        populated = [name for name in ACTION_FIELDS if data.get(name) is not None]
        if len(populated) != 1:
            raise MalformedActionError(
                f"Matcher entry must set exactly one of {', '.join(ACTION_FIELDS)}; got {populated or 'none'}"
            )

        kind = populated[0]
        body = data[kind]
        if not isinstance(body, dict):
            raise MalformedActionError(f"Matcher entry '{kind}' must be a mapping")
        for field in ("descriptor_key", "descriptor_value"):
            if body.get(field) is not None and not isinstance(body[field], str):
                raise MalformedActionError(f"Matcher entry '{kind}': {field} must be a string, got {body[field]!r}")
        try:
            match kind:
                case "request_headers":
                    return RequestHeadersAction(
                        descriptor_key=body["descriptor_key"],
                        header_name=body.get("header_name", ""),
                        skip_if_absent=body.get("skip_if_absent", False),
                    )
                case "remote_address":
                    return RemoteAddressAction()
                case "generic_key":
                    return GenericKeyAction(
                        descriptor_value=body["descriptor_value"],
                        descriptor_key=body.get("descriptor_key"),
                    )
                case _:
                    return HeaderValueMatchAction(
                        descriptor_value=body["descriptor_value"],
                        expect_match=body.get("expect_match", True),
                    )
        except KeyError as e:
            raise MalformedActionError(f"Matcher entry '{kind}' is missing field {e}") from e


class GlobalRateLimitMapper:
    @staticmethod
    def from_dict(data: Dict[str, Any]) -> GlobalRateLimit:
        """Read a ``GlobalRateLimit`` custom resource document."""
        kind = data.get("kind", GLOBAL_RATE_LIMIT_KIND)
        if kind != GLOBAL_RATE_LIMIT_KIND:
            raise ManifestError(f"Expected kind {GLOBAL_RATE_LIMIT_KIND}, got {kind}")

        metadata = _section(data, "metadata")
        name = metadata.get("name")
        if not name or not isinstance(name, str):
            raise ManifestError("GlobalRateLimit is missing metadata.name")

        spec = _section(data, "spec")
        selector = _section(spec, "selector")

        detailed_metric = spec.get("detailed_metric", False)
        if not isinstance(detailed_metric, bool):
            raise ManifestError(
                f"GlobalRateLimit '{name}': spec.detailed_metric must be a boolean, got {detailed_metric!r}"
            )

        matcher = spec.get("matcher") or []
        if not isinstance(matcher, list):
            raise ManifestError(f"GlobalRateLimit '{name}': spec.matcher must be a list")

        return GlobalRateLimit(
            name=name,
            namespace=_optional_str(metadata, "namespace", name) or "default",
            identifier=_optional_str(spec, "identifier", name),
            matcher=tuple(RateLimitActionMapper.from_dict(entry) for entry in matcher),
            route=_optional_str(selector, "route", name),
            domain=_optional_str(spec, "domain", name),
            detailed_metric=detailed_metric,
        )

    @staticmethod
    def from_documents(documents: List[Any]) -> List[GlobalRateLimit]:
        """Read every GlobalRateLimit out of a multi-document manifest, skipping other kinds."""
        rate_limits: List[GlobalRateLimit] = []
        for document in documents:
            if not document:
                continue
            if not isinstance(document, dict):
                raise ManifestError(f"Manifest document must be a mapping, got {type(document).__name__}")
            if document.get("kind", GLOBAL_RATE_LIMIT_KIND) != GLOBAL_RATE_LIMIT_KIND:
                continue
            rate_limits.append(GlobalRateLimitMapper.from_dict(document))
        return rate_limits
