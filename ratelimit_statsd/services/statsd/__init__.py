from .config_map_builder import StatsdConfigMapBuilder
from .defaults import DEFAULT_METRIC_MAPPINGS, default_metric_mappings
from .mapping import StatsdMappingGenerator, new_metric_mappings, new_statsd_config
from .matcher import encode_action, encode_matcher
from .pattern import compile_match, merge_labels

__all__ = [
    "DEFAULT_METRIC_MAPPINGS",
    "StatsdConfigMapBuilder",
    "StatsdMappingGenerator",
    "compile_match",
    "default_metric_mappings",
    "encode_action",
    "encode_matcher",
    "merge_labels",
    "new_metric_mappings",
    "new_statsd_config",
]
