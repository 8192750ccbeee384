"""Provider-agnostic instance identity component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class IdentityOutputs:
    """Resolved outputs from a provisioned instance identity."""

    def __init__(
        self,
        role_name: pulumi.Output[str],
        role_arn: pulumi.Output[str],
        instance_profile_name: pulumi.Output[str],
    ) -> None:
        """Initialise identity outputs.

        Args:
            role_name: Name of the role assumed by the web server.
            role_arn: ARN of the same role.
            instance_profile_name: Profile that binds the role to an instance.
        """
        self.role_name: pulumi.Output[str] = role_name
        self.role_arn: pulumi.Output[str] = role_arn
        self.instance_profile_name: pulumi.Output[str] = instance_profile_name


class CacheDemoIdentity(Protocol):
    """Provider-agnostic interface for the web server identity."""

    @property
    def outputs(self) -> IdentityOutputs:
        """Return the resolved identity outputs."""
        ...
