"""Credential models for building the EC2 client."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from aws_password_extractor.utils.exceptions import ConfigurationError, ValidationRules


class CredentialSource(Enum):
    """Where the compiled credential came from."""
    AMBIENT = "ambient"
    EXPLICIT = "explicit"
    ASSUMED_ROLE = "assumed_role"


@dataclass(frozen=True)
class CredentialSpec:
    """An explicit access key pair supplied by the operator."""
    access_key_id: str
    secret_access_key: str = field(repr=False)

    def __post_init__(self):
        if not self.access_key_id or not self.secret_access_key:
            raise ConfigurationError(
                "Both an access key ID and a secret access key must be provided"
            )

    @classmethod
    def from_values(
        cls, access_key_id: Optional[str], secret_access_key: Optional[str]
    ) -> Optional["CredentialSpec"]:
        """Build a spec from raw option values.

        Returns None when neither value is given and raises
        ConfigurationError when only one is.
        """
        if not ValidationRules.validate_credential_pair(access_key_id, secret_access_key):
            raise ConfigurationError(
                "--access-key-id and --secret-access-key must be supplied together"
            )
        if ValidationRules.is_blank(access_key_id):
            return None
        return cls(access_key_id, secret_access_key)


@dataclass(frozen=True)
class CompiledCredential:
    """Ready-to-use authentication material for the EC2 client."""
    source: CredentialSource
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = field(default=None, repr=False)
    session_token: Optional[str] = field(default=None, repr=False)
    role_session_name: Optional[str] = None

    @property
    def is_ambient(self) -> bool:
        return self.source is CredentialSource.AMBIENT

    @classmethod
    def ambient(cls) -> "CompiledCredential":
        return cls(source=CredentialSource.AMBIENT)

    @classmethod
    def explicit(cls, spec: CredentialSpec) -> "CompiledCredential":
        return cls(
            source=CredentialSource.EXPLICIT,
            access_key_id=spec.access_key_id,
            secret_access_key=spec.secret_access_key,
        )

    def session_kwargs(self) -> dict:
        """Keyword arguments for boto3.Session; empty for the ambient chain."""
        if self.is_ambient:
            return {}
        kwargs = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs
