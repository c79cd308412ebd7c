"""Simple EC2 Manager for password extraction."""

from typing import Any, Dict, Optional

import boto3
from botocore.config import Config

from aws_password_extractor.core.constants import EC2_SERVICE
from aws_password_extractor.utils.logger import get_logger


class EC2Manager:
    """Thin wrapper over the EC2 calls the extractor needs.

    Errors from boto3 are not caught here; they are fatal for the run and
    propagate to the output generator.
    """

    def __init__(
        self,
        session: boto3.Session,
        region: str,
        client_config: Optional[Config] = None,
    ):
        """Initialize EC2Manager."""
        self.session = session
        self.region = region
        if client_config is not None:
            self.ec2_client = session.client(EC2_SERVICE, region_name=region, config=client_config)
        else:
            self.ec2_client = session.client(EC2_SERVICE, region_name=region)
        self.logger = get_logger(__name__)

    def describe_instances_page(
        self, max_results: int, next_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Fetch one page of DescribeInstances."""
        params: Dict[str, Any] = {"MaxResults": max_results}
        if next_token:
            params["NextToken"] = next_token

        self.logger.debug(
            "Executing DescribeInstances",
            extra={"region": self.region, "max_results": max_results, "has_token": bool(next_token)},
        )
        return self.ec2_client.describe_instances(**params)

    def get_password_data(self, instance_id: str) -> str:
        """Fetch the encrypted password blob, empty when none is available."""
        self.logger.debug("Requesting encrypted password data", extra={"instance_id": instance_id})
        response = self.ec2_client.get_password_data(InstanceId=instance_id)
        return (response.get("PasswordData") or "").strip()


def create_ec2_manager(
    session: boto3.Session, region: str, client_config: Optional[Config] = None
) -> EC2Manager:
    """Create EC2Manager instance."""
    return EC2Manager(session, region, client_config)
