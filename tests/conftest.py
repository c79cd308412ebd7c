"""Pytest configuration and shared fixtures for the extractor tests.

Provides RSA key material, encrypted password blobs shaped like EC2's
GetPasswordData output, and boto3 doubles.
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from aws_password_extractor.utils.logger import PACKAGE_LOGGER


# ============================================================================
# Key Material Fixtures
# ============================================================================

def _pem(private_key: rsa.RSAPrivateKey) -> str:
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


def encrypt_password(private_key: rsa.RSAPrivateKey, password: str) -> str:
    """Encrypt like EC2 does: RSA PKCS#1 v1.5, base64 encoded."""
    ciphertext = private_key.public_key().encrypt(password.encode("utf-8"), padding.PKCS1v15())
    return base64.b64encode(ciphertext).decode("ascii")


@pytest.fixture(scope="session")
def rsa_keys() -> List[rsa.RSAPrivateKey]:
    """Three distinct RSA private keys."""
    return [rsa.generate_private_key(public_exponent=65537, key_size=2048) for _ in range(3)]


@pytest.fixture(scope="session")
def pem_keys(rsa_keys) -> List[str]:
    """The RSA keys as PEM text, as they would be read from key files."""
    return [_pem(key) for key in rsa_keys]


# ============================================================================
# AWS Doubles
# ============================================================================

def make_instance(
    instance_id: str,
    name: Optional[str] = None,
    private_ip: Optional[str] = "10.0.0.5",
) -> Dict[str, Any]:
    """Minimal DescribeInstances instance record."""
    instance: Dict[str, Any] = {"InstanceId": instance_id, "Tags": []}
    if name is not None:
        instance["Tags"].append({"Key": "Name", "Value": name})
    instance["Tags"].append({"Key": "Environment", "Value": "test"})
    if private_ip is not None:
        instance["PrivateIpAddress"] = private_ip
    return instance


def make_page(reservations: List[List[Dict[str, Any]]], next_token: Optional[str] = None) -> Dict[str, Any]:
    """DescribeInstances response made of reservation groups."""
    page: Dict[str, Any] = {
        "Reservations": [{"Instances": instances} for instances in reservations]
    }
    if next_token is not None:
        page["NextToken"] = next_token
    return page


@pytest.fixture
def mock_ec2_manager() -> MagicMock:
    """EC2Manager double with no instances and no password data."""
    manager = MagicMock()
    manager.describe_instances_page.return_value = make_page([])
    manager.get_password_data.return_value = ""
    return manager


@pytest.fixture
def mock_session_factory() -> MagicMock:
    """Stand-in for boto3.Session that records how sessions are built."""
    factory = MagicMock(name="boto3.Session")
    return factory


# ============================================================================
# Logging
# ============================================================================

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels a CLI test may have installed."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
