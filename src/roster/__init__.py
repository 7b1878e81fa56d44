"""Roster: user record loading, lookup and authentication. Factory and public API."""

from roster.credentials import CredentialVerifier, Pbkdf2Verifier
from roster.source import (
    DEFAULT_LOCATION,
    FileTextSource,
    HttpTextSource,
    MockTextSource,
    SourceError,
    TextSource,
)
from roster.store import UserStore, parse_records
from roster.tokenizer import tokenize
from roster.validation import is_valid_email


def create_source(location: str, timeout: float = 10, max_retries: int = 1) -> TextSource:
    """Create a TextSource suited to a location.

    Supported forms:
    - http://host/path or https://host/path
    - anything else is treated as a filesystem path
    """
    if location.startswith(("http://", "https://")):
        return HttpTextSource(timeout=timeout, max_retries=max_retries)
    return FileTextSource()


__all__ = [
    "DEFAULT_LOCATION",
    "CredentialVerifier",
    "FileTextSource",
    "HttpTextSource",
    "MockTextSource",
    "Pbkdf2Verifier",
    "SourceError",
    "TextSource",
    "UserStore",
    "create_source",
    "is_valid_email",
    "parse_records",
    "tokenize",
]
