"""Provider-agnostic database component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class DatabaseOutputs:
    """Resolved connection outputs from a provisioned database component."""

    def __init__(
        self,
        secret_name: pulumi.Output[str],
        secret_arn: pulumi.Output[str],
        endpoint: pulumi.Output[str],
        port: pulumi.Output[int],
        database_name: pulumi.Output[str],
    ) -> None:
        """Initialise database outputs.

        Args:
            secret_name: Name of the secret holding the generated credentials.
            secret_arn: ARN of the same secret.
            endpoint: Hostname the database listens on.
            port: TCP port of the database.
            database_name: Name of the initial database.
        """
        self.secret_name: pulumi.Output[str] = secret_name
        self.secret_arn: pulumi.Output[str] = secret_arn
        self.endpoint: pulumi.Output[str] = endpoint
        self.port: pulumi.Output[int] = port
        self.database_name: pulumi.Output[str] = database_name


class CacheDemoDatabase(Protocol):
    @property
    def outputs(self) -> DatabaseOutputs: ...
