"""Core Password Extraction Module."""

from .aws import EC2Manager, create_ec2_manager
from .models import (
    CompiledCredential,
    CredentialSource,
    CredentialSpec,
    DecryptionFailure,
    DecryptionResult,
    ExtractionRequest,
    InstanceDetail,
)

__all__ = [
    # AWS Managers
    "EC2Manager",
    "create_ec2_manager",
    # Models
    "CompiledCredential",
    "CredentialSpec",
    "DecryptionFailure",
    "DecryptionResult",
    "ExtractionRequest",
    "InstanceDetail",
    # Enums
    "CredentialSource",
]
