"""Password extractor jobs package."""

from .base import BaseJob
from .output_file_generator import OutputFileGenerator

__all__ = [
    "BaseJob",
    "OutputFileGenerator",
]
