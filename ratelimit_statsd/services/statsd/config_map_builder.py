from typing import Any, Dict

from kubernetes import client as k8s_client

STATSD_CONFIG_MAP_SUFFIX = "-statsd-config"
STATSD_MAPPING_CONF_KEY = "statsd.mappingConf"
MANAGED_BY = "istio-ratelimit-operator"


class StatsdConfigMapBuilder:
    """Builds the ConfigMap that ships a mapping configuration to statsd_exporter"""

    def __init__(
            self,
            service_name: str,
            namespace: str = "default",
            name_suffix: str = STATSD_CONFIG_MAP_SUFFIX,
            data_key: str = STATSD_MAPPING_CONF_KEY,
            managed_by: str = MANAGED_BY,
    ):
        self.service_name = service_name
        self.namespace = namespace
        self.name_suffix = name_suffix
        self.data_key = data_key
        self.managed_by = managed_by

    @property
    def name(self) -> str:
        return f"{self.service_name}{self.name_suffix}"

    def build_labels(self) -> Dict[str, str]:
        return {
            "app.kubernetes.io/name": self.name,
            "app.kubernetes.io/managed-by": self.managed_by,
            "app.kubernetes.io/created-by": self.service_name,
        }

    def build(self, config: str) -> k8s_client.V1ConfigMap:
        return k8s_client.V1ConfigMap(
            api_version="v1",
            kind="ConfigMap",
            metadata=k8s_client.V1ObjectMeta(
                name=self.name,
                namespace=self.namespace,
                labels=self.build_labels(),
            ),
            data={self.data_key: config},
        )

    def build_manifest(self, config: str) -> Dict[str, Any]:
        """ConfigMap as a plain manifest dict with API field names (camelCase)."""
        with k8s_client.ApiClient() as api_client:
            manifest: Dict[str, Any] = api_client.sanitize_for_serialization(self.build(config))
        return manifest
