from typing import Sequence

from ratelimit_statsd.domain.exceptions import MalformedActionError
from ratelimit_statsd.domain.rate_limit import (
    GenericKeyAction,
    HeaderValueMatchAction,
    RateLimitAction,
    RemoteAddressAction,
    RequestHeadersAction,
)

REMOTE_ADDRESS_TOKEN = "remote_address"
GENERIC_KEY_TOKEN = "generic_key"
HEADER_MATCH_TOKEN = "header_match"


def encode_action(action: RateLimitAction) -> str:
    """Stat name segment the rate limit service emits for a single action."""
    match action:
        case RequestHeadersAction(descriptor_key=key):
            return key
        case RemoteAddressAction():
            return REMOTE_ADDRESS_TOKEN
        case GenericKeyAction(descriptor_key=None, descriptor_value=value):
            return f"{GENERIC_KEY_TOKEN}_{value}"
        case GenericKeyAction(descriptor_key=key, descriptor_value=value):
            return f"{key}_{value}"
        case HeaderValueMatchAction(descriptor_value=value):
            return f"{HEADER_MATCH_TOKEN}_{value}"
        case _:
            raise MalformedActionError(f"Unsupported matcher action: {action!r}")


def encode_matcher(actions: Sequence[RateLimitAction], detailed_metric: bool = False) -> str:
    """Join the per-action segments of a descriptor into its dot path.

    ``detailed_metric`` does not change the token; it only affects how the
    path is turned into a match pattern later on.
    """
    return ".".join(encode_action(action) for action in actions)
