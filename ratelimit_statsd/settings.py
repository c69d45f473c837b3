import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Settings loaded from TOML configuration files.

    Load order (each layer overrides the previous):
        1. config_path    : base settings
        2. secrets_path   : local overrides, not committed
        3. override_path  : per-invocation overrides

    Missing files are skipped, so the defaults below apply when nothing is
    configured.
    """

    model_config = ConfigDict(extra="forbid")

    def __init__(
        self,
        config_path: str = "config.toml",
        override_path: str | None = None,
        secrets_path: str = "secrets.toml",
    ) -> None:
        data: dict = {}
        for path in (config_path, secrets_path, override_path):
            if path and Path(path).is_file():
                with open(path, "rb") as f:
                    data |= tomllib.load(f)
        super().__init__(**data)

    PROJECT_NAME: str = "ratelimit-statsd"

    # Rate limit service whose stats are being mapped
    SERVICE_NAME: str = "ratelimit"
    RATE_LIMIT_DOMAIN: str | None = None

    # Kubernetes namespace for the generated ConfigMap
    K8S_NAMESPACE: str = "default"

    STATSD_CONFIG_MAP_SUFFIX: str = "-statsd-config"
    STATSD_MAPPING_CONF_KEY: str = "statsd.mappingConf"
    MANAGED_BY: str = "istio-ratelimit-operator"

    TESTING: bool = False

    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")


def get_settings(config_path: str = "config.toml") -> Settings:
    return Settings(config_path=config_path)
