"""
Shared fixtures: fake AWS credentials for moto and a temporary report directory.
"""

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from settings import CommonConfig, EBSUnusedConfig, EIPUnusedConfig, NATUnusedConfig

REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keeps tests off real accounts."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture(autouse=True)
def output_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(CommonConfig, "CREDENTIALS_FILE", tmp_path / "missing-credentials")
    monkeypatch.setattr(CommonConfig, "OUTPUT_CSV_DIR", tmp_path)
    monkeypatch.setattr(CommonConfig, "WRITE_TO_GOOGLE_SHEET", False)
    monkeypatch.setattr(EIPUnusedConfig, "OUTPUT_CSV", tmp_path / "eip_unused.csv")
    monkeypatch.setattr(NATUnusedConfig, "OUTPUT_CSV", tmp_path / "nat_unused.csv")
    monkeypatch.setattr(EBSUnusedConfig, "OUTPUT_CSV", tmp_path / "ebs_unused.csv")
    return tmp_path


@pytest.fixture
def moto_session():
    with mock_aws():
        yield boto3.Session(region_name=REGION)


@pytest.fixture
def moto_ec2(moto_session):
    return moto_session.client("ec2")


@pytest.fixture
def instance_id(moto_ec2):
    image_id = moto_ec2.describe_images()["Images"][0]["ImageId"]
    response = moto_ec2.run_instances(
        ImageId=image_id,
        MinCount=1,
        MaxCount=1,
        Placement={"AvailabilityZone": f"{REGION}a"},
    )
    return response["Instances"][0]["InstanceId"]


def paginated(client, *pages):
    """Makes client.get_paginator(...).paginate() yield the given pages."""
    client.get_paginator.return_value.paginate.return_value = list(pages)
    return client


def client_error(code="UnauthorizedOperation", operation="DescribeAddresses"):
    return ClientError({"Error": {"Code": code, "Message": "AWS Error"}}, operation)
