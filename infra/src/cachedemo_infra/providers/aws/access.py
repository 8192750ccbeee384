"""AWS security group implementation of CacheDemoAccessGroups."""

from __future__ import annotations

import logging

import pulumi
import pulumi_aws as aws

from cachedemo_infra.components.access import AccessGroupOutputs

logger: logging.Logger = logging.getLogger(__name__)

MYSQL_PORT = 3306
REDIS_PORT = 6379


class AwsAccessGroupsArgs:
    """Arguments for the AWS access-control groups.

    Args:
        vpc_id: ID of the VPC the groups belong to.
        app_port: TCP port the web server application listens on.
        tags: Tags applied to each security group.
    """

    def __init__(
        self,
        vpc_id: pulumi.Input[str],
        app_port: int = 8008,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.vpc_id: pulumi.Input[str] = vpc_id
        self.app_port: int = app_port
        self.tags: dict[str, str] = tags or {}


class AwsAccessGroups(pulumi.ComponentResource):
    """Web, database and cache security groups with their ingress rules.

    Every group allows all outbound traffic. Inbound flows are opened one
    ``SecurityGroupRule`` at a time: internet to web on the application
    port, web to database on 3306, web to cache on 6379.
    """

    def __init__(
        self,
        name: str,
        args: AwsAccessGroupsArgs,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("cachedemo:aws:AccessGroups", name, {}, opts)

        logger.debug("provisioning_aws_access_groups", extra={"name": name, "app_port": args.app_port})

        web_sg = self._group(name, "web-sec-group", args)
        db_sg = self._group(name, "db-sec-group", args)
        redis_sg = self._group(name, "redis-sec-group", args)

        self.ingress_rules: list[aws.ec2.SecurityGroupRule] = [
            aws.ec2.SecurityGroupRule(
                f"{name}-web-app-ingress",
                aws.ec2.SecurityGroupRuleArgs(
                    type="ingress",
                    security_group_id=web_sg.id,
                    protocol="tcp",
                    from_port=args.app_port,
                    to_port=args.app_port,
                    cidr_blocks=["0.0.0.0/0"],
                    description="flask application",
                ),
                opts=pulumi.ResourceOptions(parent=self),
            ),
            aws.ec2.SecurityGroupRule(
                f"{name}-db-mysql-ingress",
                aws.ec2.SecurityGroupRuleArgs(
                    type="ingress",
                    security_group_id=db_sg.id,
                    protocol="tcp",
                    from_port=MYSQL_PORT,
                    to_port=MYSQL_PORT,
                    source_security_group_id=web_sg.id,
                    description="Allow MySQL connection",
                ),
                opts=pulumi.ResourceOptions(parent=self),
            ),
            aws.ec2.SecurityGroupRule(
                f"{name}-redis-ingress",
                aws.ec2.SecurityGroupRuleArgs(
                    type="ingress",
                    security_group_id=redis_sg.id,
                    protocol="tcp",
                    from_port=REDIS_PORT,
                    to_port=REDIS_PORT,
                    source_security_group_id=web_sg.id,
                    description="Allow Redis connection",
                ),
                opts=pulumi.ResourceOptions(parent=self),
            ),
        ]

        self._outputs: AccessGroupOutputs = AccessGroupOutputs(
            web_group_id=web_sg.id,
            database_group_id=db_sg.id,
            cache_group_id=redis_sg.id,
        )

        self.register_outputs(
            {
                "web_group_id": self._outputs.web_group_id,
                "database_group_id": self._outputs.database_group_id,
                "cache_group_id": self._outputs.cache_group_id,
            }
        )

    def _group(
        self, name: str, group_name: str, args: AwsAccessGroupsArgs
    ) -> aws.ec2.SecurityGroup:
        return aws.ec2.SecurityGroup(
            f"{name}-{group_name}",
            aws.ec2.SecurityGroupArgs(
                name=group_name,
                vpc_id=args.vpc_id,
                egress=[
                    aws.ec2.SecurityGroupEgressArgs(
                        protocol="-1", from_port=0, to_port=0, cidr_blocks=["0.0.0.0/0"]
                    )
                ],
                tags={**args.tags, "Name": group_name},
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

    @property
    def outputs(self) -> AccessGroupOutputs:
        """Return the resolved group identifiers."""
        return self._outputs
