"""Source-text providers: give me the text, or tell me you failed."""

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "../data/users.csv"


class SourceError(RuntimeError):
    """Raised when source text cannot be retrieved, whatever the transport."""


class TextSource(ABC):
    """Abstract interface for retrieving raw delimited text."""

    @abstractmethod
    def fetch_text(self, location: str) -> str:
        """Return the full text found at location.

        Raises:
            SourceError: on any retrieval failure.
        """


class HttpTextSource(TextSource):
    """Fetch text over HTTP(S), with optional exponential backoff retry.

    Relative locations are joined onto base_url. A charset named in the
    Content-Type header wins; otherwise the body is decoded with encoding.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10,
        max_retries: int = 1,
        base_delay: float = 1.0,
        encoding: str = "utf-8",
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self._base_delay = base_delay
        self._encoding = encoding

    def _url(self, location: str) -> str:
        if location.startswith(("http://", "https://")) or not self._base_url:
            return location
        return f"{self._base_url.rstrip('/')}/{location.lstrip('/')}"

    def _decode(self, resp: requests.Response, url: str) -> str:
        if "charset=" in resp.headers.get("Content-Type", "").lower():
            return resp.text
        try:
            return resp.content.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise SourceError(f"Could not decode {url} as {self._encoding}: {e}") from e

    def fetch_text(self, location: str) -> str:
        url = self._url(location)

        for attempt in range(self._max_retries):
            try:
                resp = requests.get(url, timeout=self._timeout)
                resp.raise_for_status()
                return self._decode(resp, url)
            except requests.RequestException as e:
                if attempt < self._max_retries - 1:
                    delay = self._base_delay * (2**attempt)
                    logger.warning(
                        "Attempt %d to fetch %s failed: %s. Retrying in %.1fs...",
                        attempt + 1,
                        url,
                        e,
                        delay,
                    )
                    time.sleep(delay)
                else:
                    raise SourceError(f"Could not fetch {url}: {e}") from e


class FileTextSource(TextSource):
    """Read text from the local filesystem; relative paths resolve against root."""

    def __init__(self, root: str | Path | None = None, encoding: str = "utf-8"):
        self._root = Path(root) if root is not None else None
        self._encoding = encoding

    def fetch_text(self, location: str) -> str:
        path = Path(location)
        if self._root is not None and not path.is_absolute():
            path = self._root / path
        try:
            return path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError(f"Could not read {path}: {e}") from e


class MockTextSource(TextSource):
    """Returns fixed text, or simulates a failure when text is None."""

    def __init__(self, text: str | None = None):
        self.text = text
        self.requested: list[str] = []

    def fetch_text(self, location: str) -> str:
        self.requested.append(location)
        if self.text is None:
            raise SourceError(f"Simulated failure fetching {location}")
        return self.text
