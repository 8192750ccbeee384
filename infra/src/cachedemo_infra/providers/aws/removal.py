"""Translation of a ``RemovalPolicy`` into Pulumi resource options."""

from __future__ import annotations

import pulumi

from cachedemo_infra.config import RemovalPolicy


def removal_options(
    policy: RemovalPolicy, parent: pulumi.Resource | None
) -> pulumi.ResourceOptions:
    """Return options for a stateful child of ``parent`` under ``policy``.

    ``DESTROY`` leaves the resource deletable with the stack. ``RETAIN`` keeps
    it in the cloud account when Pulumi deletes it.
    """
    return pulumi.ResourceOptions(
        parent=parent,
        retain_on_delete=policy == RemovalPolicy.RETAIN,
    )
