"""Credential verification: the store keeps tokens, never raw secrets."""

import hashlib
import hmac
import os
from abc import ABC, abstractmethod

PBKDF2_SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 120_000


class CredentialVerifier(ABC):
    """Abstract interface for turning secrets into tokens and checking them."""

    @abstractmethod
    def hash(self, secret: str) -> str:
        """Return an opaque verification token for the secret."""

    @abstractmethod
    def verify(self, secret: str, token: str) -> bool:
        """Return True if the secret matches the token."""


class Pbkdf2Verifier(CredentialVerifier):
    """Salted PBKDF2-HMAC-SHA256 tokens.

    Token format: ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS, salt_bytes: int = 16):
        if iterations < 1:
            raise ValueError(f"iterations must be positive, got {iterations}")
        self._iterations = iterations
        self._salt_bytes = salt_bytes

    def _digest(self, secret: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", secret.encode("utf-8"), salt, iterations)

    def hash(self, secret: str) -> str:
        salt = os.urandom(self._salt_bytes)
        digest = self._digest(secret, salt, self._iterations)
        return f"{PBKDF2_SCHEME}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, secret: str, token: str) -> bool:
        try:
            scheme, iterations, salt_hex, digest_hex = token.split("$")
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if scheme != PBKDF2_SCHEME or rounds < 1:
            return False
        return hmac.compare_digest(self._digest(secret, salt, rounds), expected)
