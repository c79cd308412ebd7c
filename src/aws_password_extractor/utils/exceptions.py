"""Exception classes and validation utilities for password extraction.

This module contains the error taxonomy and the validation rules
shared by the loader, scanner and output generator.
"""

import re
from typing import Optional

import boto3


class ExtractorError(Exception):
    """Base class for all password extractor errors."""

    pass


class ConfigurationError(ExtractorError):
    """Invalid or contradictory input combination."""

    pass


class AuthenticationError(ExtractorError):
    """Role assumption or credential construction failed."""

    pass


class DataShapeError(ExtractorError):
    """An instance is missing data the report depends on."""

    pass


class EnumerationLimitError(ExtractorError):
    """Instance pagination exceeded its page cap or deadline."""

    pass


ROLE_ARN_PATTERN = re.compile(r"^arn:aws[a-zA-Z-]*:iam::\d{12}:role/.+$")


class ValidationRules:
    """Validation utilities for extractor inputs."""

    _known_regions: Optional[frozenset] = None

    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        return value is None or value == ""

    @classmethod
    def validate_credential_pair(
        cls, access_key_id: Optional[str], secret_access_key: Optional[str]
    ) -> bool:
        """Both or neither of the key pair fields must be supplied."""
        return cls.is_blank(access_key_id) == cls.is_blank(secret_access_key)

    @classmethod
    def validate_key_source(
        cls, key_file: Optional[str], key_directory: Optional[str]
    ) -> bool:
        """Exactly one of key file and key directory must be supplied."""
        return cls.is_blank(key_file) != cls.is_blank(key_directory)

    @staticmethod
    def validate_role_arn(role_arn: str) -> bool:
        """Validate IAM role ARN format."""
        return bool(ROLE_ARN_PATTERN.match(role_arn))

    @classmethod
    def known_regions(cls) -> frozenset:
        """All EC2 regions in botocore's bundled endpoint data."""
        if cls._known_regions is None:
            session = boto3.Session()
            regions = set()
            for partition in session.get_available_partitions():
                regions.update(
                    session.get_available_regions("ec2", partition_name=partition)
                )
            cls._known_regions = frozenset(regions)
        return cls._known_regions

    @classmethod
    def validate_region(cls, region: Optional[str]) -> bool:
        """Check the region against local endpoint data, no network call."""
        if cls.is_blank(region):
            return False
        return region in cls.known_regions()
