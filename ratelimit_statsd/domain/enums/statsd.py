from ratelimit_statsd.core.utils import StringEnum


class MatchType(StringEnum):
    """How statsd_exporter interprets a mapping's ``match`` field."""

    PLAIN = ""
    REGEX = "regex"


class MetricType(StringEnum):
    """Statsd metric type a mapping is restricted to (``match_metric_type``)."""

    UNSET = ""
    COUNTER = "counter"


class ObserverType(StringEnum):
    """Prometheus type used for statsd timers (``timer_type``)."""

    UNSET = ""
    HISTOGRAM = "histogram"


class EventKind(StringEnum):
    """Per-descriptor outcomes emitted by the rate limit service, in output order."""

    NEAR_LIMIT = "near_limit"
    OVER_LIMIT = "over_limit"
    OVER_LIMIT_WITH_LOCAL_CACHE = "over_limit_with_local_cache"
    TOTAL_HITS = "total_hits"
    WITHIN_LIMIT = "within_limit"
    SHADOW_MODE = "shadow_mode"
