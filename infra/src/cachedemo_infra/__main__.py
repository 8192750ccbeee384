"""Pulumi stack entry point for the cache demo topology."""

from __future__ import annotations

import logging

import pulumi
import structlog

from cachedemo_infra.bootstrap import load_user_data
from cachedemo_infra.config import CloudProvider, StackConfig
from cachedemo_infra.providers.aws.access import AwsAccessGroups, AwsAccessGroupsArgs
from cachedemo_infra.providers.aws.cache import AwsCache, AwsCacheArgs
from cachedemo_infra.providers.aws.compute import AwsCompute, AwsComputeArgs
from cachedemo_infra.providers.aws.database import AwsDatabase, AwsDatabaseArgs
from cachedemo_infra.providers.aws.identity import AwsIdentity
from cachedemo_infra.providers.aws.network import AwsNetwork, AwsNetworkArgs

logger: logging.Logger = logging.getLogger(__name__)


class CacheDemoStack:
    """Declares the web server, MySQL and Redis topology as one resource graph."""

    def __init__(self, config: StackConfig, name: str = "cachedemo") -> None:
        """Initialise the stack with resolved configuration.

        Args:
            config: Validated stack configuration.
            name: Prefix for every logical resource name.
        """
        self._config: StackConfig = config
        self._name: str = name

    def run(self) -> dict[str, pulumi.Output[str]]:
        """Declare the full topology and export its outputs.

        The bootstrap script is read before anything is declared, so a missing
        script leaves the graph empty.

        Returns:
            The exported outputs keyed by export name.
        """
        logger.info(
            "stack_run_started",
            extra={"cloud_provider": self._config.cloud_provider.value, "name": self._name},
        )
        user_data = load_user_data(self._config.user_data_path)
        if self._config.cloud_provider != CloudProvider.AWS:
            raise NotImplementedError(
                f"Provider '{self._config.cloud_provider}' not yet implemented."
            )
        exports = self._run_aws(user_data)
        for key, value in exports.items():
            pulumi.export(key, value)
        return exports

    def _run_aws(self, user_data: str) -> dict[str, pulumi.Output[str]]:
        config = self._config
        name = self._name
        tags = config.resource_tags()

        network = AwsNetwork(
            f"{name}-network",
            AwsNetworkArgs(
                cidr_block=config.vpc_cidr,
                availability_zones=list(config.availability_zones),
                max_azs=config.max_azs,
                tags=tags,
            ),
        )
        groups = AwsAccessGroups(
            f"{name}-access",
            AwsAccessGroupsArgs(vpc_id=network.outputs.vpc_id, app_port=config.app_port, tags=tags),
        )
        identity = AwsIdentity(f"{name}-identity", tags=tags)
        database = AwsDatabase(
            f"{name}-db",
            AwsDatabaseArgs(
                subnet_ids=list(network.outputs.private_subnet_ids),
                security_group_id=groups.outputs.database_group_id,
                instance_class=config.db_instance_class,
                db_name=config.db_name,
                removal_policy=config.removal_policy,
                tags=tags,
            ),
        )
        cache = AwsCache(
            f"{name}-cache",
            AwsCacheArgs(
                subnet_ids=list(network.outputs.private_subnet_ids),
                security_group_id=groups.outputs.cache_group_id,
                node_type=config.cache_node_type,
                removal_policy=config.removal_policy,
                tags=tags,
            ),
        )
        compute = AwsCompute(
            f"{name}-web",
            AwsComputeArgs(
                subnet_id=network.outputs.public_subnet_ids[0],
                security_group_id=groups.outputs.web_group_id,
                instance_profile_name=identity.outputs.instance_profile_name,
                user_data=user_data,
                instance_type=config.web_instance_type,
                ami_id=config.ami_id,
                tags=tags,
            ),
        )

        return {
            "secret_name": database.outputs.secret_name,
            "mysql_endpoint": database.outputs.endpoint,
            "redis_endpoint": cache.outputs.endpoint,
            "webserver_public_ip": compute.outputs.public_ip,
            "webserver_public_url": compute.outputs.public_dns,
        }


if __name__ == "__main__":
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
    CacheDemoStack(config=StackConfig.load()).run()
