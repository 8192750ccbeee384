"""AWS RDS MySQL implementation of CacheDemoDatabase."""

from __future__ import annotations

import json
import logging

import pulumi
import pulumi_aws as aws
import pulumi_random as random

from cachedemo_infra.components.database import DatabaseOutputs
from cachedemo_infra.config import RemovalPolicy
from cachedemo_infra.providers.aws.access import MYSQL_PORT
from cachedemo_infra.providers.aws.removal import removal_options

logger: logging.Logger = logging.getLogger(__name__)

_ENGINE_VERSION = "8.0.28"
_MASTER_USERNAME = "admin"


def connection_document(host: str, identifier: str, password: str, db_name: str) -> str:
    """Return the JSON credentials document stored in the database secret.

    Carries everything a client needs to connect, in the layout RDS uses for
    secrets attached to an instance.
    """
    return json.dumps(
        {
            "engine": "mysql",
            "host": host,
            "port": MYSQL_PORT,
            "dbname": db_name,
            "dbInstanceIdentifier": identifier,
            "username": _MASTER_USERNAME,
            "password": password,
        }
    )


class AwsDatabaseArgs:
    """Arguments for the AWS RDS database component.

    Args:
        subnet_ids: Private subnet IDs for the DB subnet group.
        security_group_id: Access group the instance is placed in.
        instance_class: RDS instance class.
        db_name: Name of the initial database.
        removal_policy: Whether teardown destroys or retains the instance.
        tags: Tags applied to the instance, its subnet group and its secret.
    """

    def __init__(
        self,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        instance_class: pulumi.Input[str] = "db.t3.medium",
        db_name: str = "webapp",
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Initialise RDS database arguments."""
        self.subnet_ids: list[pulumi.Input[str]] = subnet_ids
        self.security_group_id: pulumi.Input[str] = security_group_id
        self.instance_class: pulumi.Input[str] = instance_class
        self.db_name: str = db_name
        self.removal_policy: RemovalPolicy = removal_policy
        self.tags: dict[str, str] = tags or {}


class AwsDatabase(pulumi.ComponentResource):
    """AWS RDS MySQL component satisfying ``CacheDemoDatabase``.

    Provisions an encrypted MySQL instance in the private subnets, a DB subnet
    group, and a Secrets Manager secret holding the generated credentials.
    """

    def __init__(
        self,
        name: str,
        args: AwsDatabaseArgs,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """Initialise and provision the AWS database component.

        Args:
            name: Logical Pulumi resource name.
            args: Validated AWS-specific database arguments.
            opts: Optional Pulumi resource options.
        """
        super().__init__("cachedemo:aws:Database", name, {}, opts)

        logger.debug(
            "provisioning_aws_database",
            extra={"name": name, "removal_policy": args.removal_policy.value},
        )

        destroy = args.removal_policy == RemovalPolicy.DESTROY

        subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnets",
            aws.rds.SubnetGroupArgs(subnet_ids=args.subnet_ids, tags=args.tags),
            opts=pulumi.ResourceOptions(parent=self),
        )

        db_password = random.RandomPassword(
            f"{name}-db-password-gen",
            random.RandomPasswordArgs(length=32, special=False),
            opts=pulumi.ResourceOptions(parent=self),
        )

        credentials_secret = aws.secretsmanager.Secret(
            f"{name}-db-credentials",
            aws.secretsmanager.SecretArgs(
                recovery_window_in_days=0 if destroy else 30,
                tags=args.tags,
            ),
            opts=removal_options(args.removal_policy, self),
        )

        instance = aws.rds.Instance(
            f"{name}-rds",
            aws.rds.InstanceArgs(
                engine="mysql",
                engine_version=_ENGINE_VERSION,
                instance_class=args.instance_class,
                allocated_storage=20,
                storage_encrypted=True,
                iam_database_authentication_enabled=True,
                db_name=args.db_name,
                port=MYSQL_PORT,
                username=_MASTER_USERNAME,
                password=db_password.result,
                db_subnet_group_name=subnet_group.name,
                vpc_security_group_ids=[args.security_group_id],
                publicly_accessible=False,
                deletion_protection=not destroy,
                skip_final_snapshot=destroy,
                final_snapshot_identifier=None if destroy else f"{name}-final",
                tags=args.tags,
            ),
            opts=removal_options(args.removal_policy, self),
        )

        db_name = args.db_name
        aws.secretsmanager.SecretVersion(
            f"{name}-db-credentials-version",
            aws.secretsmanager.SecretVersionArgs(
                secret_id=credentials_secret.id,
                secret_string=pulumi.Output.all(
                    instance.address, instance.identifier, db_password.result
                ).apply(
                    lambda values: connection_document(
                        host=values[0],
                        identifier=values[1],
                        password=values[2],
                        db_name=db_name,
                    )
                ),
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self._outputs: DatabaseOutputs = DatabaseOutputs(
            secret_name=credentials_secret.name,
            secret_arn=credentials_secret.arn,
            endpoint=instance.address,
            port=pulumi.Output.from_input(MYSQL_PORT),
            database_name=pulumi.Output.from_input(args.db_name),
        )

        self.register_outputs(
            {
                "secret_name": self._outputs.secret_name,
                "secret_arn": self._outputs.secret_arn,
                "endpoint": self._outputs.endpoint,
                "port": self._outputs.port,
                "database_name": self._outputs.database_name,
            }
        )

    @property
    def outputs(self) -> DatabaseOutputs:
        """Return the resolved database connection outputs."""
        return self._outputs
