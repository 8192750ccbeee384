"""AWS IAM role and instance profile for the web server."""

from __future__ import annotations

import json
import logging

import pulumi
import pulumi_aws as aws

from cachedemo_infra.components.identity import IdentityOutputs

logger: logging.Logger = logging.getLogger(__name__)

_MANAGED_POLICY_ARNS: dict[str, str] = {
    "ssm-core": "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore",
    "cfn-read": "arn:aws:iam::aws:policy/AWSCloudFormationReadOnlyAccess",
}


class AwsIdentity(pulumi.ComponentResource):
    """EC2-assumable role satisfying ``CacheDemoIdentity``.

    The inline ``secret-read-only`` policy allows fetching a secret value whose
    name is already known. It grants no permission to list secrets.
    """

    def __init__(
        self,
        name: str,
        tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("cachedemo:aws:Identity", name, {}, opts)

        logger.debug("provisioning_aws_identity", extra={"name": name})

        role = aws.iam.Role(
            f"{name}-role",
            aws.iam.RoleArgs(
                assume_role_policy=json.dumps(
                    {
                        "Version": "2012-10-17",
                        "Statement": [
                            {
                                "Effect": "Allow",
                                "Principal": {"Service": "ec2.amazonaws.com"},
                                "Action": "sts:AssumeRole",
                            }
                        ],
                    }
                ),
                tags=tags or {},
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        for suffix, policy_arn in _MANAGED_POLICY_ARNS.items():
            aws.iam.RolePolicyAttachment(
                f"{name}-{suffix}",
                aws.iam.RolePolicyAttachmentArgs(role=role.name, policy_arn=policy_arn),
                opts=pulumi.ResourceOptions(parent=self),
            )

        aws.iam.RolePolicy(
            f"{name}-secret-read-only",
            aws.iam.RolePolicyArgs(
                name="secret-read-only",
                role=role.name,
                policy=json.dumps(
                    {
                        "Version": "2012-10-17",
                        "Statement": [
                            {
                                "Effect": "Allow",
                                "Action": ["secretsmanager:GetSecretValue"],
                                "Resource": "arn:aws:secretsmanager:*",
                            }
                        ],
                    }
                ),
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        profile = aws.iam.InstanceProfile(
            f"{name}-profile",
            aws.iam.InstanceProfileArgs(role=role.name, tags=tags or {}),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self._outputs: IdentityOutputs = IdentityOutputs(
            role_name=role.name,
            role_arn=role.arn,
            instance_profile_name=profile.name,
        )
        self.register_outputs({
            "role_name": self._outputs.role_name,
            "role_arn": self._outputs.role_arn,
            "instance_profile_name": self._outputs.instance_profile_name,
        })

    @property
    def outputs(self) -> IdentityOutputs:
        """Return the resolved identity outputs."""
        return self._outputs
