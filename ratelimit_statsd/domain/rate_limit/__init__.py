from .rate_limit_models import (
    GenericKeyAction,
    GlobalRateLimit,
    HeaderValueMatchAction,
    RateLimitAction,
    RemoteAddressAction,
    RequestHeadersAction,
)

__all__ = [
    "GenericKeyAction",
    "GlobalRateLimit",
    "HeaderValueMatchAction",
    "RateLimitAction",
    "RemoteAddressAction",
    "RequestHeadersAction",
]
