"""Simple data models for password extraction."""

# Instance models
from .instance import (
    InstanceDetail,
    get_name_tag,
    get_private_ip,
)

# Credential models
from .credentials import (
    CompiledCredential,
    CredentialSource,
    CredentialSpec,
)

# Decryption models
from .password import (
    DecryptionFailure,
    DecryptionResult,
)

from .request import ExtractionRequest

__all__ = [
    # Instance models
    "InstanceDetail",
    "get_name_tag",
    "get_private_ip",
    # Credential models
    "CompiledCredential",
    "CredentialSource",
    "CredentialSpec",
    # Decryption models
    "DecryptionFailure",
    "DecryptionResult",
    # Requests
    "ExtractionRequest",
]
