"""AWS ElastiCache Redis implementation of CacheDemoCache."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pulumi
import pulumi_aws as aws

from cachedemo_infra.components.cache import CacheOutputs
from cachedemo_infra.config import RemovalPolicy
from cachedemo_infra.providers.aws.access import REDIS_PORT
from cachedemo_infra.providers.aws.removal import removal_options

logger: logging.Logger = logging.getLogger(__name__)


class AwsCacheArgs:
    """Arguments for the AWS ElastiCache component.

    Args:
        subnet_ids: Private subnet IDs grouped for the cache cluster.
        security_group_id: Access group the cache node is placed in.
        node_type: ElastiCache node type.
        removal_policy: Whether teardown destroys or retains the cluster.
        tags: Tags applied to the cluster and its subnet group.
    """

    def __init__(
        self,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        node_type: pulumi.Input[str] = "cache.t3.small",
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.subnet_ids: list[pulumi.Input[str]] = subnet_ids
        self.security_group_id: pulumi.Input[str] = security_group_id
        self.node_type: pulumi.Input[str] = node_type
        self.removal_policy: RemovalPolicy = removal_policy
        self.tags: dict[str, str] = tags or {}


def _first_node_address(nodes: Sequence[Any]) -> str:
    # Node entries are dict-like both as raw values and as ClusterCacheNode output types.
    return nodes[0]["address"]


class AwsCache(pulumi.ComponentResource):
    """Single-node Redis cluster placed through a subnet group over the private subnets.

    A single node has no replica and therefore no automatic failover.
    """

    def __init__(
        self,
        name: str,
        args: AwsCacheArgs,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("cachedemo:aws:Cache", name, {}, opts)

        logger.debug(
            "provisioning_aws_cache",
            extra={"name": name, "node_type": args.node_type},
        )

        self.subnet_group: aws.elasticache.SubnetGroup = aws.elasticache.SubnetGroup(
            f"{name}-subnet-group",
            aws.elasticache.SubnetGroupArgs(
                subnet_ids=args.subnet_ids,
                description="subnet group for redis",
                tags=args.tags,
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        cluster = aws.elasticache.Cluster(
            f"{name}-redis",
            aws.elasticache.ClusterArgs(
                engine="redis",
                node_type=args.node_type,
                num_cache_nodes=1,
                port=REDIS_PORT,
                subnet_group_name=self.subnet_group.name,
                security_group_ids=[args.security_group_id],
                tags=args.tags,
            ),
            opts=removal_options(args.removal_policy, self),
        )

        self._outputs: CacheOutputs = CacheOutputs(
            endpoint=cluster.cache_nodes.apply(_first_node_address),
            port=pulumi.Output.from_input(REDIS_PORT),
        )

        self.register_outputs(
            {
                "endpoint": self._outputs.endpoint,
                "port": self._outputs.port,
            }
        )

    @property
    def outputs(self) -> CacheOutputs:
        """Return the resolved cache outputs."""
        return self._outputs
