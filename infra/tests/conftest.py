"""Shared Pulumi mocks that record every declared resource."""
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pulumi
import pytest
from pulumi.runtime import Mocks

LATEST_AMI = "ami-0latest00000000"
REGION_ZONES = ["us-west-2a", "us-west-2b", "us-west-2c"]
_SECRET_SIG = "4dabf18193072939515e22adb298388d"


class RecordingMocks(Mocks):
    """Echo inputs as outputs, fill in provider-computed attributes, and keep a log."""

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []
        self.calls: list[pulumi.runtime.MockCallArgs] = []

    def new_resource(
        self, args: pulumi.runtime.MockResourceArgs
    ) -> tuple[str, dict[str, object]]:
        self.resources.append(args)
        outputs: dict[str, object] = dict(args.inputs)
        outputs.setdefault("name", args.name)
        outputs.setdefault("arn", f"arn:aws:mock:us-west-2:123456789012:{args.name}")
        if args.typ == "random:index/randomPassword:RandomPassword":
            outputs["result"] = "mock-password"
        if args.typ == "aws:rds/instance:Instance":
            outputs["address"] = f"{args.name}.abc123.us-west-2.rds.amazonaws.com"
            outputs.setdefault("identifier", args.name)
        if args.typ == "aws:elasticache/cluster:Cluster":
            outputs["cacheNodes"] = [
                {
                    "id": "0001",
                    "address": f"{args.name}.abc123.0001.usw2.cache.amazonaws.com",
                    "port": 6379,
                    "availabilityZone": "us-west-2a",
                }
            ]
        if args.typ == "aws:ec2/instance:Instance":
            outputs["publicIp"] = "203.0.113.10"
            outputs["publicDns"] = "ec2-203-0-113-10.us-west-2.compute.amazonaws.com"
        return (f"{args.name}-id", outputs)

    def call(
        self, args: pulumi.runtime.MockCallArgs
    ) -> tuple[dict[str, object], list[tuple[str, str]]]:
        self.calls.append(args)
        if args.token == "aws:ssm/getParameter:getParameter":
            return (
                {
                    "id": args.args["name"],
                    "name": args.args["name"],
                    "type": "String",
                    "value": LATEST_AMI,
                    "insecureValue": LATEST_AMI,
                    "version": 1,
                },
                [],
            )
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return (
                {
                    "id": "us-west-2",
                    "names": REGION_ZONES,
                    "zoneIds": ["usw2-az1", "usw2-az2", "usw2-az3"],
                    "groupNames": ["us-west-2"],
                },
                [],
            )
        return ({}, [])

    def of_type(self, typ: str, prefix: str) -> list[pulumi.runtime.MockResourceArgs]:
        """Return resources of ``typ`` declared under the ``prefix`` name."""
        return [r for r in self.resources if r.typ == typ and r.name.startswith(f"{prefix}-")]

    @staticmethod
    def plain(value: object) -> object:
        """Unwrap a recorded input that was marked secret."""
        if isinstance(value, dict) and _SECRET_SIG in value:
            return value["value"]
        return value

    def named(self, name: str) -> pulumi.runtime.MockResourceArgs:
        matches = [r for r in self.resources if r.name == name]
        assert len(matches) == 1, f"expected one resource named {name!r}, got {len(matches)}"
        return matches[0]


@pytest.fixture
def recorder() -> Iterator[RecordingMocks]:
    mocks = RecordingMocks()
    pulumi.runtime.set_mocks(mocks, preview=False)
    yield mocks


@pytest.fixture
def user_data_file(tmp_path: Path) -> Path:
    script = tmp_path / "userdata.sh"
    script.write_text("#!/bin/bash\necho hello > /tmp/hello\n", encoding="utf-8")
    return script
