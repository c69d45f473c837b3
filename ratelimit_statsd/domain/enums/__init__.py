from ratelimit_statsd.domain.enums.statsd import EventKind, MatchType, MetricType, ObserverType

__all__ = [
    "EventKind",
    "MatchType",
    "MetricType",
    "ObserverType",
]
