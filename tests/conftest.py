import pytest
import structlog

from ratelimit_statsd.domain.rate_limit import GenericKeyAction, GlobalRateLimit


@pytest.fixture
def test_logger() -> structlog.stdlib.BoundLogger:
    logger: structlog.stdlib.BoundLogger = structlog.get_logger("test.ratelimit_statsd")
    return logger


@pytest.fixture
def foo_rate_limit() -> GlobalRateLimit:
    return GlobalRateLimit(
        name="foo-limit",
        identifier="foo",
        domain="foo",
        route="bar",
        matcher=(GenericKeyAction(descriptor_value="v1"),),
    )
