"""Core processors for password extraction."""

from .instance_enumerator import InstanceEnumerator
from .instance_scanner import InstanceScanner
from .key_loader import KeyMaterialLoader
from .password_recoverer import PasswordRecoverer
from .report_generator import TextReportGenerator

__all__ = [
    "InstanceEnumerator",
    "InstanceScanner",
    "KeyMaterialLoader",
    "PasswordRecoverer",
    "TextReportGenerator",
]
