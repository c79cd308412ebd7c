"""Parameter bundle handed from the CLI to the output generator."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ExtractionRequest:
    """Everything one extraction run needs."""
    region: str
    output_file: str
    key_file: Optional[str] = None
    key_directory: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = field(default=None, repr=False)
    role_arn: Optional[str] = None
