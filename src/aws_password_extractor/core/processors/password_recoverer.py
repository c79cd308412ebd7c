#!/usr/bin/env python3
"""Recovers an instance's initial administrator password."""

from typing import Callable, List, Optional

from aws_password_extractor.core.aws.ec2 import EC2Manager
from aws_password_extractor.core.models.password import DecryptionResult
from aws_password_extractor.utils.crypto import decrypt_password
from aws_password_extractor.utils.logger import get_logger

Decryptor = Callable[[str, str], DecryptionResult]


class PasswordRecoverer:
    """Tries each key in order and keeps the first one that decrypts."""

    def __init__(self, decryptor: Decryptor = decrypt_password):
        self.decryptor = decryptor
        self.logger = get_logger(__name__)

    def recover(
        self, ec2_manager: EC2Manager, instance_id: str, keys: List[str]
    ) -> Optional[str]:
        """Return the plaintext password, or None if no key decrypts it."""
        password_data = ec2_manager.get_password_data(instance_id)
        if not password_data:
            self.logger.warning(
                "No password data available", extra={"instance_id": instance_id}
            )
            return None

        for index, key in enumerate(keys, start=1):
            result = self.decryptor(password_data, key)
            if result.succeeded:
                self.logger.info(
                    "Password decrypted",
                    extra={"instance_id": instance_id, "key_index": index},
                )
                return result.password

            self.logger.warning(
                "Key could not decrypt password, trying next key",
                extra={
                    "instance_id": instance_id,
                    "key_index": index,
                    "reason": result.failure.reason if result.failure else "empty result",
                },
            )

        self.logger.error(
            "Could not decrypt password with any key",
            extra={"instance_id": instance_id, "keys_tried": len(keys)},
        )
        return None
