"""AWS EC2 web server implementation of CacheDemoCompute."""

from __future__ import annotations

import logging

import pulumi
import pulumi_aws as aws

from cachedemo_infra.components.compute import ComputeOutputs

logger: logging.Logger = logging.getLogger(__name__)

# Amazon Linux 2, standard edition, HVM, general purpose (gp2) storage.
AMAZON_LINUX_2_PARAMETER = "/aws/service/ami-amazon-linux-latest/amzn2-ami-hvm-x86_64-gp2"


def latest_amazon_linux_2() -> pulumi.Output[str]:
    """Resolve the current Amazon Linux 2 image id at deploy time."""
    return aws.ssm.get_parameter_output(name=AMAZON_LINUX_2_PARAMETER).value


class AwsComputeArgs:
    """Arguments for the AWS EC2 web server component."""

    def __init__(
        self,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        user_data: str,
        instance_type: pulumi.Input[str] = "t3.small",
        ami_id: str = "",
        tags: dict[str, str] | None = None,
    ) -> None:
        self.subnet_id: pulumi.Input[str] = subnet_id
        self.security_group_id: pulumi.Input[str] = security_group_id
        self.instance_profile_name: pulumi.Input[str] = instance_profile_name
        self.user_data: str = user_data
        self.instance_type: pulumi.Input[str] = instance_type
        self.ami_id: str = ami_id
        self.tags: dict[str, str] = tags or {}


class AwsCompute(pulumi.ComponentResource):
    """Public-facing EC2 web server satisfying ``CacheDemoCompute``.

    The instance runs in a public subnet, carries the web access group and the
    given instance profile, and is bootstrapped with ``user_data`` verbatim.
    Unless ``ami_id`` pins an image, the latest Amazon Linux 2 image is used.
    """

    def __init__(
        self,
        name: str,
        args: AwsComputeArgs,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("cachedemo:aws:Compute", name, {}, opts)

        logger.debug(
            "provisioning_aws_compute",
            extra={"name": name, "instance_type": args.instance_type, "ami_pinned": bool(args.ami_id)},
        )

        image_id: pulumi.Output[str] = (
            pulumi.Output.from_input(args.ami_id) if args.ami_id else latest_amazon_linux_2()
        )

        instance = aws.ec2.Instance(
            f"{name}-webserver",
            aws.ec2.InstanceArgs(
                ami=image_id,
                instance_type=args.instance_type,
                subnet_id=args.subnet_id,
                vpc_security_group_ids=[args.security_group_id],
                iam_instance_profile=args.instance_profile_name,
                user_data=args.user_data,
                tags={**args.tags, "Name": f"{name}-webserver"},
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self._outputs: ComputeOutputs = ComputeOutputs(
            public_ip=instance.public_ip,
            public_dns=instance.public_dns,
            image_id=image_id,
        )

        self.register_outputs(
            {
                "public_ip": self._outputs.public_ip,
                "public_dns": self._outputs.public_dns,
                "image_id": self._outputs.image_id,
            }
        )

    @property
    def outputs(self) -> ComputeOutputs:
        """Return the resolved compute outputs."""
        return self._outputs
