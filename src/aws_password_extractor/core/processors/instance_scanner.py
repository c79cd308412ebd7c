#!/usr/bin/env python3
"""Instance scanner: credentials, enumeration, keys and passwords in one pass."""

from dataclasses import replace
from typing import Callable, List, Optional

from botocore.config import Config

from aws_password_extractor.core.aws.ec2 import EC2Manager, create_ec2_manager
from aws_password_extractor.core.models.credentials import CredentialSpec
from aws_password_extractor.core.models.instance import InstanceDetail
from aws_password_extractor.core.processors.instance_enumerator import InstanceEnumerator
from aws_password_extractor.core.processors.key_loader import KeyMaterialLoader
from aws_password_extractor.core.processors.password_recoverer import PasswordRecoverer
from aws_password_extractor.utils.exceptions import ConfigurationError, ValidationRules
from aws_password_extractor.utils.filesystem import PathLike
from aws_password_extractor.utils.logger import get_logger
from aws_password_extractor.utils.session import (
    CredentialResolver,
    build_client_config,
    create_session,
)


class InstanceScanner:
    """Builds the InstanceDetail list for every instance in a region.

    Collaborators are injected so the cloud API and the filesystem can be
    replaced in tests. Any failure for a single instance fails the run.
    """

    def __init__(
        self,
        credential_resolver: Optional[CredentialResolver] = None,
        enumerator: Optional[InstanceEnumerator] = None,
        recoverer: Optional[PasswordRecoverer] = None,
        key_loader: Optional[KeyMaterialLoader] = None,
        ec2_manager_factory: Callable[..., EC2Manager] = create_ec2_manager,
        client_config: Optional[Config] = None,
        region_validator: Callable[[str], bool] = ValidationRules.validate_region,
    ):
        self.client_config = client_config or build_client_config()
        self.credential_resolver = credential_resolver or CredentialResolver(
            client_config=self.client_config
        )
        self.enumerator = enumerator or InstanceEnumerator()
        self.recoverer = recoverer or PasswordRecoverer()
        self.key_loader = key_loader or KeyMaterialLoader()
        self.ec2_manager_factory = ec2_manager_factory
        self.region_validator = region_validator
        self.logger = get_logger(__name__)

    def extract_details(
        self,
        explicit_keys: Optional[CredentialSpec],
        region: str,
        key_file: Optional[PathLike] = None,
        key_directory: Optional[PathLike] = None,
        role_arn: Optional[str] = None,
    ) -> List[InstanceDetail]:
        """Extract name, private address and password for every instance."""
        if not self.region_validator(region):
            raise ConfigurationError(
                f"The specified AWS region '{region}' is unknown. Please specify "
                f"a valid region, for example: 'eu-west-2'."
            )
        self.logger.info("Region parsed", extra={"region": region})

        credential = self.credential_resolver.resolve(explicit_keys, role_arn, region)
        session = create_session(
            credential, region, session_factory=self.credential_resolver.session_factory
        )
        ec2_manager = self.ec2_manager_factory(session, region, self.client_config)
        self.logger.info(
            "EC2 client created",
            extra={"region": region, "credential_source": credential.source.value},
        )

        instances = self.enumerator.enumerate(ec2_manager)
        if not instances:
            return []

        keys = self.key_loader.load(key_file, key_directory)
        self.logger.info("Password encryption keys read", extra={"key_count": len(keys)})

        details = []
        for instance in instances:
            instance_id = instance.get("InstanceId", "")
            # Name and address are checked before any decrypt work
            detail = InstanceDetail.from_aws_instance(instance)
            password = self.recoverer.recover(ec2_manager, instance_id, keys)
            detail = replace(detail, password=password)
            self.logger.info("Instance detail constructed: %s", detail)
            details.append(detail)

        self.logger.info(
            "Password extraction complete", extra={"instances": len(details)}
        )
        return details
