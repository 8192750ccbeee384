"""Provider-agnostic virtual machine compute component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class ComputeOutputs:
    """Resolved outputs from a provisioned web server instance."""

    def __init__(
        self,
        public_ip: pulumi.Output[str],
        public_dns: pulumi.Output[str],
        image_id: pulumi.Output[str] | None = None,
    ) -> None:
        """Initialise compute outputs.

        Args:
            public_ip: Public IPv4 address of the web server.
            public_dns: Public DNS hostname of the web server.
            image_id: Machine image the instance was launched from, when known.
        """
        self.public_ip: pulumi.Output[str] = public_ip
        self.public_dns: pulumi.Output[str] = public_dns
        self.image_id: pulumi.Output[str] | None = image_id


class CacheDemoCompute(Protocol):
    """Provider-agnostic interface for the web server compute component."""

    @property
    def outputs(self) -> ComputeOutputs:
        """Return the resolved compute outputs."""
        ...
