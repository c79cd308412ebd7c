"""Tests for aws_password_extractor.core.aws.ec2."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from aws_password_extractor.core.aws.ec2 import EC2Manager, create_ec2_manager
from aws_password_extractor.utils.session import build_client_config


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(name="boto3.Session")


@pytest.fixture
def ec2_client(session) -> MagicMock:
    return session.client.return_value


class TestEC2Manager:
    def test_client_bound_to_region_and_config(self, session):
        config = build_client_config()

        create_ec2_manager(session, "eu-west-2", config)

        session.client.assert_called_once_with("ec2", region_name="eu-west-2", config=config)

    def test_first_page_has_no_token(self, session, ec2_client):
        EC2Manager(session, "eu-west-2").describe_instances_page(10)

        ec2_client.describe_instances.assert_called_once_with(MaxResults=10)

    def test_later_page_passes_token(self, session, ec2_client):
        EC2Manager(session, "eu-west-2").describe_instances_page(10, "abc")

        ec2_client.describe_instances.assert_called_once_with(MaxResults=10, NextToken="abc")

    def test_password_data_is_stripped(self, session, ec2_client):
        ec2_client.get_password_data.return_value = {"InstanceId": "i-1", "PasswordData": "\r\nBLOB==\r\n"}

        assert EC2Manager(session, "eu-west-2").get_password_data("i-1") == "BLOB=="
        ec2_client.get_password_data.assert_called_once_with(InstanceId="i-1")

    def test_missing_password_data(self, session, ec2_client):
        ec2_client.get_password_data.return_value = {"InstanceId": "i-1", "PasswordData": ""}

        assert EC2Manager(session, "eu-west-2").get_password_data("i-1") == ""

    def test_client_errors_propagate(self, session, ec2_client):
        ec2_client.describe_instances.side_effect = ClientError(
            {"Error": {"Code": "UnauthorizedOperation", "Message": "no"}}, "DescribeInstances"
        )

        with pytest.raises(ClientError):
            EC2Manager(session, "eu-west-2").describe_instances_page(10)
