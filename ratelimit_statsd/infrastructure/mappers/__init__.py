from .global_rate_limit_mapper import GlobalRateLimitMapper, RateLimitActionMapper
from .statsd_mapper import MetricMapperMapper, MetricMappingMapper

__all__ = [
    "GlobalRateLimitMapper",
    "MetricMapperMapper",
    "MetricMappingMapper",
    "RateLimitActionMapper",
]
