"""Typed configuration loaded from environment variables at startup."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger: logging.Logger = logging.getLogger(__name__)


class CloudProvider(StrEnum):
    """Supported cloud provider deployment targets."""

    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"


class RemovalPolicy(StrEnum):
    """What happens to stateful resources when the stack is torn down."""

    DESTROY = "destroy"
    RETAIN = "retain"


class StackConfig(BaseSettings):
    """Fully validated infrastructure stack configuration.

    All values are sourced from environment variables at startup.
    Raises ``ValidationError`` on invalid values.
    """

    model_config = SettingsConfigDict(
        env_prefix="CACHEDEMO_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cloud_provider: CloudProvider = CloudProvider.AWS
    environment: Literal["prod", "staging", "dev"] = "prod"
    user_data_path: str = "userdata.sh"
    vpc_cidr: str = "10.0.0.0/16"
    availability_zones: list[str] = []
    max_azs: int = 2
    app_port: int = 8008
    db_instance_class: str = "db.t3.medium"
    db_name: str = "webapp"
    cache_node_type: str = "cache.t3.small"
    web_instance_type: str = "t3.small"
    ami_id: str = ""
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY

    @classmethod
    def load(cls) -> StackConfig:
        """Load and validate configuration from the environment.

        Logs each resolved setting at DEBUG level.
        Raises ``pydantic.ValidationError`` on invalid values.
        """
        config = cls()
        logger.debug(
            "stack_config_loaded",
            extra={
                "cloud_provider": config.cloud_provider.value,
                "environment": config.environment,
                "availability_zones": config.availability_zones,
                "max_azs": config.max_azs,
                "removal_policy": config.removal_policy.value,
                "ami_pinned": bool(config.ami_id),
            },
        )
        return config

    def resource_tags(self) -> dict[str, str]:
        """Return the tags applied to every taggable resource in the stack."""
        return {"Project": "cachedemo", "Environment": self.environment}
