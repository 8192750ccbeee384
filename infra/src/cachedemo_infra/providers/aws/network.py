"""AWS VPC implementation of CacheDemoNetwork."""

from __future__ import annotations

import ipaddress
import logging

import pulumi
import pulumi_aws as aws

from cachedemo_infra.components.network import NetworkOutputs

logger: logging.Logger = logging.getLogger(__name__)


class AwsNetworkArgs:
    """Arguments for the AWS network component.

    Args:
        cidr_block: Address block of the VPC.
        availability_zones: Zones to replicate the public and private tiers across.
            When empty, the first ``max_azs`` available zones of the region are used.
        max_azs: Zone count used when no zones are given.
        tags: Tags applied to every taggable network resource.
    """

    def __init__(
        self,
        cidr_block: str = "10.0.0.0/16",
        availability_zones: list[str] | None = None,
        max_azs: int = 2,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.cidr_block: str = cidr_block
        self.availability_zones: list[str] = availability_zones or []
        self.max_azs: int = max_azs
        self.tags: dict[str, str] = tags or {}


def region_zones(max_azs: int) -> list[str]:
    """Return the first ``max_azs`` available zones of the provider region."""
    return list(aws.get_availability_zones(state="available").names[:max_azs])


def subnet_cidrs(cidr_block: str, zone_count: int) -> tuple[list[str], list[str]]:
    """Split ``cidr_block`` into /24 public and private ranges, one of each per zone.

    Public ranges come first, followed by the private ones.
    """
    blocks = ipaddress.ip_network(cidr_block).subnets(new_prefix=24)
    carved = [str(next(blocks)) for _ in range(zone_count * 2)]
    return carved[:zone_count], carved[zone_count:]


class AwsNetwork(pulumi.ComponentResource):
    """AWS VPC + subnets + IGW + NAT Gateway satisfying ``CacheDemoNetwork``.

    Provisions one public and one private /24 subnet per availability zone,
    one IGW, a single NAT Gateway in the first public subnet, and the public
    and private route tables.
    """

    def __init__(
        self,
        name: str,
        args: AwsNetworkArgs | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("cachedemo:aws:Network", name, {}, opts)

        args = args or AwsNetworkArgs()
        zones = args.availability_zones or region_zones(args.max_azs)
        public_cidrs, private_cidrs = subnet_cidrs(args.cidr_block, len(zones))

        logger.debug(
            "provisioning_aws_network",
            extra={"name": name, "cidr_block": args.cidr_block, "zones": zones},
        )

        vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            aws.ec2.VpcArgs(
                cidr_block=args.cidr_block,
                enable_dns_support=True,
                enable_dns_hostnames=True,
                tags=args.tags,
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        public_subnets = [
            aws.ec2.Subnet(
                f"{name}-pub-{zone}",
                aws.ec2.SubnetArgs(
                    vpc_id=vpc.id,
                    cidr_block=cidr,
                    availability_zone=zone,
                    map_public_ip_on_launch=True,
                    tags=args.tags,
                ),
                opts=pulumi.ResourceOptions(parent=self),
            )
            for zone, cidr in zip(zones, public_cidrs)
        ]

        private_subnets = [
            aws.ec2.Subnet(
                f"{name}-priv-{zone}",
                aws.ec2.SubnetArgs(
                    vpc_id=vpc.id,
                    cidr_block=cidr,
                    availability_zone=zone,
                    tags=args.tags,
                ),
                opts=pulumi.ResourceOptions(parent=self),
            )
            for zone, cidr in zip(zones, private_cidrs)
        ]

        igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            aws.ec2.InternetGatewayArgs(vpc_id=vpc.id, tags=args.tags),
            opts=pulumi.ResourceOptions(parent=self),
        )

        eip = aws.ec2.Eip(
            f"{name}-nat-eip",
            aws.ec2.EipArgs(domain="vpc", tags=args.tags),
            opts=pulumi.ResourceOptions(parent=self),
        )

        nat = aws.ec2.NatGateway(
            f"{name}-nat",
            aws.ec2.NatGatewayArgs(
                subnet_id=public_subnets[0].id,
                allocation_id=eip.id,
                tags=args.tags,
            ),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[igw]),
        )

        pub_rt = aws.ec2.RouteTable(
            f"{name}-pub-rt",
            aws.ec2.RouteTableArgs(
                vpc_id=vpc.id,
                routes=[
                    aws.ec2.RouteTableRouteArgs(
                        cidr_block="0.0.0.0/0",
                        gateway_id=igw.id,
                    )
                ],
                tags=args.tags,
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        for zone, subnet in zip(zones, public_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-pub-rta-{zone}",
                aws.ec2.RouteTableAssociationArgs(subnet_id=subnet.id, route_table_id=pub_rt.id),
                opts=pulumi.ResourceOptions(parent=self),
            )

        priv_rt = aws.ec2.RouteTable(
            f"{name}-priv-rt",
            aws.ec2.RouteTableArgs(
                vpc_id=vpc.id,
                routes=[
                    aws.ec2.RouteTableRouteArgs(
                        cidr_block="0.0.0.0/0",
                        nat_gateway_id=nat.id,
                    )
                ],
                tags=args.tags,
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        for zone, subnet in zip(zones, private_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-priv-rta-{zone}",
                aws.ec2.RouteTableAssociationArgs(subnet_id=subnet.id, route_table_id=priv_rt.id),
                opts=pulumi.ResourceOptions(parent=self),
            )

        self._outputs: NetworkOutputs = NetworkOutputs(
            vpc_id=vpc.id,
            public_subnet_ids=[subnet.id for subnet in public_subnets],
            private_subnet_ids=[subnet.id for subnet in private_subnets],
        )

        self.register_outputs(
            {
                "vpc_id": self._outputs.vpc_id,
                "public_subnet_ids": self._outputs.public_subnet_ids,
                "private_subnet_ids": self._outputs.private_subnet_ids,
            }
        )

    @property
    def outputs(self) -> NetworkOutputs:
        """Return the resolved network outputs."""
        return self._outputs
