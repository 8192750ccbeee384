"""Unit tests for the AWS network component using Pulumi mocks."""
from __future__ import annotations

import pulumi

from cachedemo_infra.providers.aws.network import AwsNetwork, AwsNetworkArgs, subnet_cidrs

SUBNET = "aws:ec2/subnet:Subnet"


def test_subnet_cidrs_public_then_private() -> None:
    public, private = subnet_cidrs("10.0.0.0/16", 2)
    assert public == ["10.0.0.0/24", "10.0.1.0/24"]
    assert private == ["10.0.2.0/24", "10.0.3.0/24"]


def test_subnet_cidrs_three_zones() -> None:
    public, private = subnet_cidrs("172.16.0.0/16", 3)
    assert len(public) == len(private) == 3
    assert not set(public) & set(private)


@pulumi.runtime.test
def test_network_subnet_count_per_tier(recorder) -> None:
    net = AwsNetwork("net-count")
    assert len(net.outputs.public_subnet_ids) == 2
    assert len(net.outputs.private_subnet_ids) == 2


@pulumi.runtime.test
def test_network_follows_configured_zones(recorder) -> None:
    zones = ["eu-west-1a", "eu-west-1b", "eu-west-1c"]
    net = AwsNetwork("net-zones", AwsNetworkArgs(availability_zones=zones))
    assert len(net.outputs.public_subnet_ids) == 3
    assert len(net.outputs.private_subnet_ids) == 3


def test_network_subnet_tiers(recorder) -> None:
    @pulumi.runtime.test
    def declare() -> None:
        AwsNetwork("net-tiers")

    declare()

    subnets = {r.name: r.inputs for r in recorder.of_type(SUBNET, "net-tiers")}
    assert len(subnets) == 4
    for zone in ("us-west-2a", "us-west-2b"):
        public = subnets[f"net-tiers-pub-{zone}"]
        private = subnets[f"net-tiers-priv-{zone}"]
        assert public["mapPublicIpOnLaunch"] is True
        assert not private.get("mapPublicIpOnLaunch")
        assert public["availabilityZone"] == private["availabilityZone"] == zone


def test_network_single_nat_routes_private_tier(recorder) -> None:
    @pulumi.runtime.test
    def declare() -> None:
        AwsNetwork("net-nat")

    declare()

    nats = recorder.of_type("aws:ec2/natGateway:NatGateway", "net-nat")
    assert len(nats) == 1
    assert nats[0].inputs["subnetId"] == "net-nat-pub-us-west-2a-id"

    priv_rt = recorder.named("net-nat-priv-rt")
    assert priv_rt.inputs["routes"][0]["natGatewayId"] == "net-nat-nat-id"
    pub_rt = recorder.named("net-nat-pub-rt")
    assert pub_rt.inputs["routes"][0]["gatewayId"] == "net-nat-igw-id"

    associations = recorder.of_type(
        "aws:ec2/routeTableAssociation:RouteTableAssociation", "net-nat"
    )
    assert len(associations) == 4


@pulumi.runtime.test
def test_network_vpc_id_is_set(recorder) -> None:
    net = AwsNetwork("net-vpc")

    def check(vpc_id: str) -> None:
        assert vpc_id == "net-vpc-vpc-id"

    return net.outputs.vpc_id.apply(check)


def test_network_defaults_to_region_zones(recorder) -> None:
    @pulumi.runtime.test
    def declare() -> None:
        AwsNetwork("net-region", AwsNetworkArgs(max_azs=3))

    declare()

    zones = sorted(r.inputs["availabilityZone"] for r in recorder.of_type(SUBNET, "net-region"))
    assert zones == sorted(["us-west-2a", "us-west-2b", "us-west-2c"] * 2)
    assert any(
        c.token == "aws:index/getAvailabilityZones:getAvailabilityZones" for c in recorder.calls
    )


def test_network_explicit_zones_skip_lookup(recorder) -> None:
    @pulumi.runtime.test
    def declare() -> None:
        AwsNetwork("net-pinned", AwsNetworkArgs(availability_zones=["eu-west-1a"]))

    declare()

    (public,) = [
        r for r in recorder.of_type(SUBNET, "net-pinned") if r.inputs.get("mapPublicIpOnLaunch")
    ]
    assert public.inputs["availabilityZone"] == "eu-west-1a"
    assert not [
        c for c in recorder.calls
        if c.token == "aws:index/getAvailabilityZones:getAvailabilityZones"
    ]


def test_network_resources_tagged(recorder) -> None:
    tags = {"Project": "cachedemo", "Environment": "staging"}

    @pulumi.runtime.test
    def declare() -> None:
        AwsNetwork("net-tags", AwsNetworkArgs(tags=tags))

    declare()

    assert recorder.named("net-tags-vpc").inputs["tags"] == tags
    assert recorder.named("net-tags-nat").inputs["tags"] == tags
    for subnet in recorder.of_type(SUBNET, "net-tags"):
        assert subnet.inputs["tags"] == tags
