"""
utils/crypto.py

Decryption of EC2 Windows password data.

EC2 returns the initial administrator password base64 encoded and encrypted
with the RSA public half of the launch key pair (PKCS#1 v1.5 padding).
"""

import base64
import binascii

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from aws_password_extractor.core.models.password import DecryptionResult


def decrypt_password(password_data: str, private_key: str) -> DecryptionResult:
    """Decrypt ``password_data`` with one PEM private key.

    Never raises for a bad key or ciphertext; the failure is carried in the
    returned result so callers can move on to the next key.
    """
    try:
        key = serialization.load_pem_private_key(private_key.encode("utf-8"), password=None)
        if not isinstance(key, rsa.RSAPrivateKey):
            raise ValueError(f"Expected an RSA private key, got {type(key).__name__}")

        ciphertext = base64.b64decode("".join(password_data.split()), validate=True)
        plaintext = key.decrypt(ciphertext, padding.PKCS1v15()).decode("utf-8")
        # A wrong key can still yield bytes when the backend does implicit rejection
        if not plaintext or not plaintext.isprintable():
            raise ValueError("Decrypted password is not printable text")
        return DecryptionResult.success(plaintext)
    except (ValueError, TypeError, UnsupportedAlgorithm, binascii.Error) as e:
        return DecryptionResult.failed(e)
