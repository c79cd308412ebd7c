"""Per-key decryption outcome."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class DecryptionFailure:
    """Why one key could not decrypt one password blob."""
    reason: str
    error_type: str = ""


@dataclass(frozen=True)
class DecryptionResult:
    """Either a plaintext password or the failure that prevented it."""
    password: Optional[str] = field(default=None, repr=False)
    failure: Optional[DecryptionFailure] = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None and self.password is not None

    @classmethod
    def success(cls, password: str) -> "DecryptionResult":
        return cls(password=password)

    @classmethod
    def failed(cls, error: Exception) -> "DecryptionResult":
        return cls(failure=DecryptionFailure(reason=str(error), error_type=type(error).__name__))
