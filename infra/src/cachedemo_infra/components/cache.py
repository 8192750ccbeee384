"""Provider-agnostic cache cluster component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class CacheOutputs:
    """Resolved outputs from a provisioned cache cluster."""

    def __init__(
        self,
        endpoint: pulumi.Output[str],
        port: pulumi.Output[int],
    ) -> None:
        self.endpoint: pulumi.Output[str] = endpoint
        self.port: pulumi.Output[int] = port


class CacheDemoCache(Protocol):
    @property
    def outputs(self) -> CacheOutputs: ...
