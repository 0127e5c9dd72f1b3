"""Symmetric encryption of credential secrets at rest.

Secrets are encrypted with Fernet (AES-128-CBC + HMAC-SHA256). Every token
carries its own random IV, so encrypting the same plaintext twice yields
different ciphertexts. The Fernet key is derived from the process-wide
passphrase (``DEVMAN_SECRET_SALT``) with PBKDF2-HMAC-SHA256; changing the
passphrase makes all previously stored ciphertext unreadable.
"""

from __future__ import annotations

import base64
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from devman.core.config import settings
from devman.core.logging import get_logger
from devman.core.metrics import record_secret_operation
from devman.domain.exceptions import DecryptionError

logger = get_logger(__name__)

# Fixed KDF salt: the key must be reproducible from the passphrase alone.
KDF_SALT = b"devman.secret-cipher.v1"
KDF_ITERATIONS = 200_000


def derive_key(passphrase: str) -> bytes:
    """Derive a urlsafe-base64 Fernet key from ``passphrase``."""
    if not passphrase:
        raise ValueError("Secret passphrase must not be empty")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=KDF_SALT,
        iterations=KDF_ITERATIONS,
    )
    return base64.urlsafe_b64encode(kdf.derive(passphrase.encode("utf-8")))


class SecretCipher:
    """Encrypts and decrypts single UTF-8 strings with a passphrase-derived key.

    Instances hold no mutable state after construction and may be shared
    between threads.
    """

    def __init__(self, passphrase: str) -> None:
        self._fernet = Fernet(derive_key(passphrase))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt ``plaintext`` and return the token as text."""
        token = self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")
        record_secret_operation("encrypt", success=True)
        return token

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a token produced by :meth:`encrypt`.

        Raises:
            DecryptionError: the token is malformed, truncated, was produced
                with another passphrase, or does not hold valid UTF-8.
        """
        try:
            plaintext = self._fernet.decrypt(ciphertext.encode("utf-8")).decode("utf-8")
        except (InvalidToken, UnicodeError) as exc:
            record_secret_operation("decrypt", success=False)
            logger.error("Failed to decrypt secret - invalid token or key mismatch")
            raise DecryptionError() from exc
        record_secret_operation("decrypt", success=True)
        return plaintext


@lru_cache(maxsize=1)
def get_cipher() -> SecretCipher:
    """Return the process-wide cipher built from settings."""
    return SecretCipher(settings.secret_salt)
