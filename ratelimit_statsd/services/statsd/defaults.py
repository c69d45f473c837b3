from typing import List, Tuple

from ratelimit_statsd.domain.enums import MetricType, ObserverType
from ratelimit_statsd.domain.statsd import MetricMapping

# Service level stats emitted by the rate limit service regardless of which
# descriptors are configured.
DEFAULT_METRIC_MAPPINGS: Tuple[MetricMapping, ...] = (
    MetricMapping(
        name="ratelimit_service_should_rate_limit_error",
        match="ratelimit.service.call.should_rate_limit.*",
        match_metric_type=MetricType.COUNTER,
        labels={"err_type": "$1"},
    ),
    MetricMapping(
        name="ratelimit_service_total_requests",
        match="ratelimit_server.*.total_requests",
        match_metric_type=MetricType.COUNTER,
        labels={"grpc_method": "$1"},
    ),
    MetricMapping(
        name="ratelimit_service_response_time_seconds",
        match="ratelimit_server.*.response_time",
        timer_type=ObserverType.HISTOGRAM,
        labels={"grpc_method": "$1"},
    ),
    MetricMapping(
        name="ratelimit_service_config_load_success",
        match="ratelimit.service.config_load_success",
    ),
    MetricMapping(
        name="ratelimit_service_config_load_error",
        match="ratelimit.service.config_load_error",
    ),
    MetricMapping(
        name="ratelimit_service_global_shadow_mode",
        match="ratelimit.service.global_shadow_mode",
    ),
)


def default_metric_mappings() -> List[MetricMapping]:
    """The default mappings as a new list; the entries themselves are immutable."""
    return list(DEFAULT_METRIC_MAPPINGS)
