from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class RequestHeadersAction:
    """Descriptor entry keyed by the value of a request header."""

    descriptor_key: str
    header_name: str = ""
    skip_if_absent: bool = False


@dataclass(frozen=True)
class RemoteAddressAction:
    """Descriptor entry keyed by the downstream client address."""


@dataclass(frozen=True)
class GenericKeyAction:
    descriptor_value: str
    descriptor_key: Optional[str] = None


@dataclass(frozen=True)
class HeaderValueMatchAction:
    descriptor_value: str
    expect_match: bool = True


RateLimitAction = Union[RequestHeadersAction, RemoteAddressAction, GenericKeyAction, HeaderValueMatchAction]


@dataclass(frozen=True)
class GlobalRateLimit:
    """A named global rate limit rule.

    ``identifier`` is what makes the rule addressable in metric output; rules
    without one are ignored by mapping generation. ``route`` is only required
    once an identifier is set.
    """

    name: str
    matcher: tuple[RateLimitAction, ...] = field(default_factory=tuple)
    identifier: Optional[str] = None
    route: Optional[str] = None
    domain: Optional[str] = None
    detailed_metric: bool = False
    namespace: str = "default"
