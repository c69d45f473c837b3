from typing import Any, Dict

import pytest

from ratelimit_statsd.domain.exceptions import MalformedActionError, ManifestError
from ratelimit_statsd.domain.rate_limit import (
    GenericKeyAction,
    GlobalRateLimit,
    HeaderValueMatchAction,
    RemoteAddressAction,
    RequestHeadersAction,
)
from ratelimit_statsd.infrastructure.mappers import GlobalRateLimitMapper, RateLimitActionMapper

pytestmark = pytest.mark.unit


def _manifest(**spec: Any) -> Dict[str, Any]:
    return {
        "apiVersion": "ratelimit.zufardhiyaulhaq.com/v1alpha1",
        "kind": "GlobalRateLimit",
        "metadata": {"name": "login-limit", "namespace": "istio-system"},
        "spec": spec,
    }


class TestRateLimitActionMapper:

    def test_request_headers(self) -> None:
        action = RateLimitActionMapper.from_dict(
            {"request_headers": {"header_name": ":path", "descriptor_key": "path"}}
        )
        assert action == RequestHeadersAction(descriptor_key="path", header_name=":path")

    def test_remote_address(self) -> None:
        assert RateLimitActionMapper.from_dict({"remote_address": {}}) == RemoteAddressAction()

    def test_generic_key_with_and_without_key(self) -> None:
        assert RateLimitActionMapper.from_dict({"generic_key": {"descriptor_value": "v1"}}) == GenericKeyAction(
            descriptor_value="v1"
        )
        assert RateLimitActionMapper.from_dict(
            {"generic_key": {"descriptor_value": "v1", "descriptor_key": "tier"}}
        ) == GenericKeyAction(descriptor_value="v1", descriptor_key="tier")

    def test_header_value_match(self) -> None:
        action = RateLimitActionMapper.from_dict(
            {"header_value_match": {"descriptor_value": "post", "expect_match": False}}
        )
        assert action == HeaderValueMatchAction(descriptor_value="post", expect_match=False)

    @pytest.mark.parametrize(
        "entry",
        [
            {},
            {"remote_address": None},
            {"remote_address": {}, "generic_key": {"descriptor_value": "v1"}},
            {"source_cluster": {}},
        ],
    )
    def test_not_exactly_one_variant(self, entry: Dict[str, Any]) -> None:
        with pytest.raises(MalformedActionError, match="exactly one"):
            RateLimitActionMapper.from_dict(entry)

    def test_missing_variant_field(self) -> None:
        with pytest.raises(MalformedActionError, match="descriptor_value"):
            RateLimitActionMapper.from_dict({"generic_key": {"descriptor_key": "k"}})

    def test_variant_body_must_be_mapping(self) -> None:
        with pytest.raises(MalformedActionError, match="must be a mapping"):
            RateLimitActionMapper.from_dict({"request_headers": "path"})

    def test_entry_must_be_mapping(self) -> None:
        with pytest.raises(MalformedActionError):
            RateLimitActionMapper.from_dict(["remote_address"])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "entry",
        [
            {"generic_key": {"descriptor_value": 1}},
            {"generic_key": {"descriptor_value": "v1", "descriptor_key": False}},
            {"request_headers": {"descriptor_key": ["path"]}},
            {"header_value_match": {"descriptor_value": 2.5}},
        ],
    )
    def test_descriptor_fields_must_be_strings(self, entry: Dict[str, Any]) -> None:
        with pytest.raises(MalformedActionError, match="must be a string"):
            RateLimitActionMapper.from_dict(entry)


class TestGlobalRateLimitMapper:

    def test_from_dict_full(self) -> None:
        manifest = _manifest(
            identifier="login",
            domain="public",
            detailed_metric=True,
            selector={"route": "login-route", "vhost": "example.com:80"},
            matcher=[
                {"remote_address": {}},
                {"generic_key": {"descriptor_value": "login"}},
            ],
        )

        rate_limit = GlobalRateLimitMapper.from_dict(manifest)

        assert rate_limit == GlobalRateLimit(
            name="login-limit",
            namespace="istio-system",
            identifier="login",
            domain="public",
            route="login-route",
            detailed_metric=True,
            matcher=(RemoteAddressAction(), GenericKeyAction(descriptor_value="login")),
        )

    def test_from_dict_minimal(self) -> None:
        rate_limit = GlobalRateLimitMapper.from_dict({"metadata": {"name": "bare"}})

        assert rate_limit.identifier is None
        assert rate_limit.route is None
        assert rate_limit.matcher == ()
        assert rate_limit.detailed_metric is False
        assert rate_limit.namespace == "default"

    def test_wrong_kind(self) -> None:
        with pytest.raises(ManifestError, match="GlobalRateLimitConfig"):
            GlobalRateLimitMapper.from_dict({"kind": "GlobalRateLimitConfig", "metadata": {"name": "x"}})

    def test_missing_name(self) -> None:
        with pytest.raises(ManifestError, match="metadata.name"):
            GlobalRateLimitMapper.from_dict(_manifest() | {"metadata": {}})

    def test_from_documents_skips_other_kinds_and_empty(self) -> None:
        documents = [
            None,
            {"kind": "GlobalRateLimitConfig", "metadata": {"name": "cfg"}},
            _manifest(identifier="a", selector={"route": "r"}),
        ]

        rate_limits = GlobalRateLimitMapper.from_documents(documents)

        assert [rl.name for rl in rate_limits] == ["login-limit"]

    def test_from_documents_rejects_scalars(self) -> None:
        with pytest.raises(ManifestError):
            GlobalRateLimitMapper.from_documents(["not a manifest"])

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_detailed_metric_must_be_boolean(self, value: Any) -> None:
        manifest = _manifest(identifier="a", detailed_metric=value, selector={"route": "r"})

        with pytest.raises(ManifestError, match="detailed_metric must be a boolean"):
            GlobalRateLimitMapper.from_dict(manifest)

    @pytest.mark.parametrize(
        "spec",
        [
            {"identifier": 123, "selector": {"route": "r"}},
            {"identifier": "a", "selector": {"route": 5}},
            {"identifier": "a", "domain": ["d"], "selector": {"route": "r"}},
        ],
    )
    def test_string_fields_must_be_strings(self, spec: Dict[str, Any]) -> None:
        with pytest.raises(ManifestError, match="must be a string"):
            GlobalRateLimitMapper.from_dict(_manifest(**spec))

    def test_namespace_must_be_string(self) -> None:
        with pytest.raises(ManifestError, match="namespace must be a string"):
            GlobalRateLimitMapper.from_dict({"metadata": {"name": "x", "namespace": 7}})

    @pytest.mark.parametrize(
        "manifest",
        [
            {"metadata": "login-limit"},
            {"metadata": {"name": "x"}, "spec": ["identifier"]},
            {"metadata": {"name": "x"}, "spec": {"selector": "login-route"}},
        ],
    )
    def test_sections_must_be_mappings(self, manifest: Dict[str, Any]) -> None:
        with pytest.raises(ManifestError, match="must be a mapping"):
            GlobalRateLimitMapper.from_dict(manifest)

    def test_matcher_must_be_list(self) -> None:
        with pytest.raises(ManifestError, match="matcher must be a list"):
            GlobalRateLimitMapper.from_dict(_manifest(matcher={"remote_address": {}}))
