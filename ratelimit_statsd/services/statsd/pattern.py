from typing import Dict, Mapping, Tuple

# The match string is embedded in YAML text verbatim, so the regex escape for a
# literal dot is itself escaped.
ESCAPED_DOT = "\\\\."
CAPTURE_SUFFIX = "_?(.*)"
LITERAL_SEGMENTS = 4


def normalize_segment(segment: str) -> str:
    return segment.replace("-", "_")


def compile_match(match_string: str, detailed_metric: bool) -> Tuple[str, Dict[str, str]]:
    """Build the statsd_exporter match value for a canonical stat path.

    Without ``detailed_metric`` the path is matched literally. Otherwise the
    ``ratelimit.service.rate_limit.<domain>`` prefix stays literal, every
    descriptor segment after it becomes a capture group, and the trailing
    event segment is matched literally. Each capture group N yields two
    labels, ``<segment>`` and ``key<N>``, both set to ``$N``.
    """
    if not detailed_metric:
        return match_string, {}

    parts = match_string.split(".")
    prefix = ESCAPED_DOT.join(parts[:LITERAL_SEGMENTS])
    remaining = [normalize_segment(part) for part in parts[LITERAL_SEGMENTS:]]

    labels: Dict[str, str] = {}
    pattern = prefix
    group = 0
    for index, part in enumerate(remaining):
        if index == len(remaining) - 1:
            pattern += f"{ESCAPED_DOT}{part}"
            continue

        group += 1
        pattern += f"{ESCAPED_DOT}{part}{CAPTURE_SUFFIX}"
        labels[part] = f"${group}"
        labels[f"key{group}"] = f"${group}"

    return f'"{pattern}"', labels


def merge_labels(base: Mapping[str, str], overrides: Mapping[str, str]) -> Dict[str, str]:
    """Return a new label set; keys present in both take the ``overrides`` value."""
    merged = dict(base)
    merged.update(overrides)
    return merged
