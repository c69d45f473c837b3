from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping

from ratelimit_statsd.domain.enums import MatchType, MetricType, ObserverType


@dataclass(frozen=True)
class MetricMapping:
    """One statsd_exporter mapping rule.

    ``match`` is either a literal dot path or, for ``MatchType.REGEX``, a
    quoted regular expression whose capture groups feed ``$N`` label values.
    Instances are immutable; ``labels`` is a read-only view over a private copy.
    """

    name: str
    match: str
    match_type: MatchType = MatchType.PLAIN
    timer_type: ObserverType = ObserverType.UNSET
    match_metric_type: MetricType = MetricType.UNSET
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))


@dataclass
class MetricMapper:
    mappings: List[MetricMapping] = field(default_factory=list)
