from typing import Any, Dict

import yaml

from ratelimit_statsd.domain.statsd import MetricMapper, MetricMapping


class MetricMappingMapper:
    @staticmethod
    def to_dict(mapping: MetricMapping) -> Dict[str, Any]:
        # Unset fields are left out, statsd_exporter falls back to its own defaults.
        data: Dict[str, Any] = {"name": mapping.name, "match": mapping.match}
        if mapping.match_type:
            data["match_type"] = mapping.match_type.value
        if mapping.timer_type:
            data["timer_type"] = mapping.timer_type.value
        if mapping.match_metric_type:
            data["match_metric_type"] = mapping.match_metric_type.value
        if mapping.labels:
            data["labels"] = dict(mapping.labels)
        return data


class MetricMapperMapper:
    @staticmethod
    def to_dict(mapper: MetricMapper) -> Dict[str, Any]:
        return {"mappings": [MetricMappingMapper.to_dict(mapping) for mapping in mapper.mappings]}

    @staticmethod
    def to_yaml(mapper: MetricMapper) -> str:
        """Render the mapping configuration as statsd_exporter YAML."""
        return yaml.safe_dump(
            MetricMapperMapper.to_dict(mapper),
            sort_keys=False,
            default_flow_style=False,
            width=4096,
        )
