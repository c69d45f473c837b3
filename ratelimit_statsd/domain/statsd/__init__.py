from .models import MetricMapper, MetricMapping

__all__ = [
    "MetricMapper",
    "MetricMapping",
]
