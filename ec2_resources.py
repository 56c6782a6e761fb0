from datetime import datetime
from dataclasses import dataclass

# ----------------------
# Custom Imports
# ----------------------
import utils
from utils import logger


# -------------------------------------------
# Records
# -------------------------------------------
@dataclass
class ElasticIPAddress:
    allocation_id: str
    public_ip: str
    association_id: str = ""
    instance_id: str = ""
    network_interface_id: str = ""
    domain: str = ""
    name: str = ""

    @property
    def id(self) -> str:
        return self.allocation_id

    @classmethod
    def from_response(cls, data: dict) -> "ElasticIPAddress":
        return cls(
            allocation_id=data.get("AllocationId", ""),
            public_ip=data.get("PublicIp", ""),
            association_id=data.get("AssociationId", ""),
            instance_id=data.get("InstanceId", ""),
            network_interface_id=data.get("NetworkInterfaceId", ""),
            domain=data.get("Domain", ""),
            name=utils.get_name_tag(data.get("Tags")),
        )

    def to_row(self) -> list:
        return [self.public_ip, self.allocation_id, self.name, self.domain]


@dataclass
class NATGateway:
    nat_gateway_id: str
    vpc_id: str = ""
    subnet_id: str = ""
    state: str = ""
    create_time: datetime | None = None

    @property
    def id(self) -> str:
        return self.nat_gateway_id

    @classmethod
    def from_response(cls, data: dict) -> "NATGateway":
        return cls(
            nat_gateway_id=data["NatGatewayId"],
            vpc_id=data.get("VpcId", ""),
            subnet_id=data.get("SubnetId", ""),
            state=data.get("State", ""),
            create_time=data.get("CreateTime"),
        )

    def to_row(self) -> list:
        return [
            self.nat_gateway_id,
            self.vpc_id,
            self.state,
            self.subnet_id or "N/A",
            utils.format_timestamp(self.create_time),
        ]


@dataclass
class EBSVolume:
    volume_id: str
    size_gb: int = 0
    volume_type: str = ""
    state: str = ""
    create_time: datetime | None = None
    name: str = ""

    @property
    def id(self) -> str:
        return self.volume_id

    @classmethod
    def from_response(cls, data: dict) -> "EBSVolume":
        return cls(
            volume_id=data["VolumeId"],
            size_gb=data.get("Size", 0),
            volume_type=data.get("VolumeType", ""),
            state=data.get("State", ""),
            create_time=data.get("CreateTime"),
            name=utils.get_name_tag(data.get("Tags")),
        )

    def to_row(self) -> list:
        return [
            self.volume_id,
            self.name,
            self.size_gb,
            self.volume_type,
            self.state,
            utils.format_timestamp(self.create_time),
        ]


# -------------------------------------------
# EC2 Unused Resources
# -------------------------------------------
class EC2UnusedResources:
    """
    Lists EC2-side resources that are billed but not used.

    Every check is one list call (paginated where boto3 offers a paginator)
    followed by a filter. Errors raised by the client are not caught.
    """

    VOLUME_IN_USE_STATE = "in-use"
    NAT_GONE_STATES = ("deleting", "deleted")

    def __init__(self, client=None, boto3_session=None):
        if client is None:
            session = boto3_session or utils.create_boto3_session()
            client = session.client("ec2")
        self.client = client

    # ----------------------
    # Elastic IPs
    # ----------------------
    def get_unused_elastic_ip_addresses(self) -> list[ElasticIPAddress]:
        """Addresses without an association."""
        # DescribeAddresses has no paginator, it returns everything at once.
        response = self.client.describe_addresses()

        unused = []
        for data in response.get("Addresses", []):
            if data.get("AssociationId"):
                continue
            unused.append(ElasticIPAddress.from_response(data))

        logger.info(f"Found {len(unused)} unassociated Elastic IPs.")
        return unused

    # ----------------------
    # NAT Gateways
    # ----------------------
    def _is_nat_gateway_routed(self, nat_gateway_id: str) -> bool:
        response = self.client.describe_route_tables(
            Filters=[{"Name": "route.nat-gateway-id", "Values": [nat_gateway_id]}]
        )
        return len(response.get("RouteTables", [])) > 0

    def get_unused_nat_gateways(self) -> list[NATGateway]:
        """NAT gateways that no route table sends traffic to."""
        paginator = self.client.get_paginator("describe_nat_gateways")

        unused = []
        for page in paginator.paginate():
            for data in page.get("NatGateways", []):
                if data.get("State") in self.NAT_GONE_STATES:
                    continue
                if self._is_nat_gateway_routed(data["NatGatewayId"]):
                    continue
                unused.append(NATGateway.from_response(data))

        logger.info(f"Found {len(unused)} NAT Gateways without routes.")
        return unused

    # ----------------------
    # EBS Volumes
    # ----------------------
    def get_unused_ebs_volumes(self) -> list[EBSVolume]:
        """Volumes whose state is anything other than in-use."""
        paginator = self.client.get_paginator("describe_volumes")

        unused = []
        for page in paginator.paginate():
            for data in page.get("Volumes", []):
                if data.get("State") == self.VOLUME_IN_USE_STATE:
                    continue
                unused.append(EBSVolume.from_response(data))

        logger.info(f"Found {len(unused)} EBS volumes not in use.")
        return unused
