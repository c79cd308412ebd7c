#!/usr/bin/env python3
"""Loads password decryption keys from a file or a directory."""

from typing import List, Optional

from aws_password_extractor.utils.exceptions import ConfigurationError, ValidationRules
from aws_password_extractor.utils.filesystem import FileSystemProvider, PathLike
from aws_password_extractor.utils.logger import get_logger


class KeyMaterialLoader:
    """Resolves the key source into an ordered list of key blobs."""

    def __init__(self, file_system: Optional[FileSystemProvider] = None):
        self.file_system = file_system or FileSystemProvider()
        self.logger = get_logger(__name__)

    def load(
        self,
        key_file: Optional[PathLike] = None,
        key_directory: Optional[PathLike] = None,
    ) -> List[str]:
        """Return the key blobs in attempt order.

        Directory entries are sorted by file name so the attempt order does
        not depend on the filesystem.
        """
        key_file = str(key_file) if key_file else None
        key_directory = str(key_directory) if key_directory else None

        if not ValidationRules.validate_key_source(key_file, key_directory):
            raise ConfigurationError(
                "Exactly one of a password encryption key file or a key file "
                "directory must be supplied"
            )

        if key_file:
            if not self.file_system.is_file(key_file):
                raise ConfigurationError(f"Password encryption key file not found: {key_file}")
            self.logger.debug("Reading password encryption key", extra={"path": key_file})
            try:
                return [self.file_system.read_text(key_file)]
            except UnicodeDecodeError as e:
                raise ConfigurationError(
                    f"Password encryption key file is not a text key: {key_file}"
                ) from e

        if not self.file_system.is_dir(key_directory):
            raise ConfigurationError(
                f"Password encryption key directory not found: {key_directory}"
            )

        paths = sorted(self.file_system.list_files(key_directory), key=lambda p: p.name)
        if not paths:
            raise ConfigurationError(
                f"Password encryption key directory is empty: {key_directory}"
            )

        keys = []
        for path in paths:
            self.logger.debug("Reading password encryption key", extra={"path": str(path)})
            try:
                keys.append(self.file_system.read_text(path))
            except UnicodeDecodeError as e:
                self.logger.warning(
                    "Skipping key file that is not text",
                    extra={"path": str(path), "reason": str(e)},
                )

        if not keys:
            raise ConfigurationError(
                f"Password encryption key directory holds no readable keys: {key_directory}"
            )

        self.logger.info(
            "Password encryption keys loaded",
            extra={"directory": key_directory, "key_count": len(keys)},
        )
        return keys
