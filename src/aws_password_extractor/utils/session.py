#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

Resolves the credential used for the EC2 client: explicit keys, the ambient
boto3 credential chain, and optional role assumption on top of either.
"""

from typing import Callable, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from aws_password_extractor.core.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    STS_SERVICE,
)
from aws_password_extractor.core.models.credentials import (
    CompiledCredential,
    CredentialSource,
    CredentialSpec,
)
from aws_password_extractor.utils.exceptions import AuthenticationError
from aws_password_extractor.utils.logger import get_logger

logger = get_logger(__name__)


def build_client_config(
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
) -> Config:
    """botocore client config: bounded per-call time and a single attempt."""
    return Config(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def role_session_name_from_arn(role_arn: str) -> str:
    """Use the latter part of the ARN as the session name."""
    return role_arn.rsplit("/", 1)[-1]


def create_session(
    credential: CompiledCredential,
    region: Optional[str] = None,
    session_factory: Callable[..., boto3.Session] = boto3.Session,
) -> boto3.Session:
    """Create a boto3 Session from a compiled credential."""
    return session_factory(region_name=region, **credential.session_kwargs())


class CredentialResolver:
    """Turns explicit keys and an optional role ARN into a usable credential."""

    def __init__(
        self,
        session_factory: Callable[..., boto3.Session] = boto3.Session,
        client_config: Optional[Config] = None,
    ):
        self.session_factory = session_factory
        self.client_config = client_config or build_client_config()

    def resolve(
        self,
        explicit_keys: Optional[CredentialSpec] = None,
        role_arn: Optional[str] = None,
        region: Optional[str] = None,
    ) -> CompiledCredential:
        """Resolve the credential for this run.

        Without a role ARN no network call is made. With one, a single
        STS AssumeRole call is made using the base credential against the
        STS endpoint of ``region``.
        """
        if explicit_keys is not None:
            logger.info(
                "Explicit credentials provided",
                extra={"access_key_id": explicit_keys.access_key_id},
            )
            base = CompiledCredential.explicit(explicit_keys)
        else:
            logger.info("No explicit credentials provided, using the credential chain")
            base = CompiledCredential.ambient()

        if not role_arn:
            logger.debug("No role ARN provided", extra={"source": base.source.value})
            return base

        return self.assume_role(base, role_arn, region)

    def assume_role(
        self, base: CompiledCredential, role_arn: str, region: Optional[str] = None
    ) -> CompiledCredential:
        """Exchange ``base`` for temporary credentials scoped to ``role_arn``."""
        role_session_name = role_session_name_from_arn(role_arn)
        logger.debug(
            "Assuming role",
            extra={"role_arn": role_arn, "session_name": role_session_name, "region": region},
        )

        try:
            sts_client = create_session(base, region, session_factory=self.session_factory).client(
                STS_SERVICE, config=self.client_config
            )
            response = sts_client.assume_role(
                RoleArn=role_arn, RoleSessionName=role_session_name
            )
            credentials = response["Credentials"]
            compiled = CompiledCredential(
                source=CredentialSource.ASSUMED_ROLE,
                access_key_id=credentials["AccessKeyId"],
                secret_access_key=credentials["SecretAccessKey"],
                session_token=credentials["SessionToken"],
                role_session_name=role_session_name,
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise AuthenticationError(
                f"Failed to assume role {role_arn}: {error_code} - {e}"
            ) from e
        except BotoCoreError as e:
            raise AuthenticationError(f"Failed to assume role {role_arn}: {e}") from e
        except (KeyError, TypeError) as e:
            raise AuthenticationError(
                f"Unexpected AssumeRole response for {role_arn}: missing {e}"
            ) from e

        logger.info(
            "Role credentials returned",
            extra={"access_key_id": compiled.access_key_id, "session_name": role_session_name},
        )
        return compiled
