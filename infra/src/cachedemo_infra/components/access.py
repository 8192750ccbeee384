"""Provider-agnostic access-control group component interface."""

from __future__ import annotations

import logging
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class AccessGroupOutputs:
    """Identifiers of the web, database and cache access-control groups."""

    def __init__(
        self,
        web_group_id: pulumi.Output[str],
        database_group_id: pulumi.Output[str],
        cache_group_id: pulumi.Output[str],
    ) -> None:
        self.web_group_id: pulumi.Output[str] = web_group_id
        self.database_group_id: pulumi.Output[str] = database_group_id
        self.cache_group_id: pulumi.Output[str] = cache_group_id


class CacheDemoAccessGroups(Protocol):
    """Provider-agnostic interface for the access-control groups."""

    @property
    def outputs(self) -> AccessGroupOutputs:
        """Return the resolved group identifiers."""
        ...
