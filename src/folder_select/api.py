"""Folder response client with optional caching."""

import hashlib
import json
from pathlib import Path
from typing import Any

import requests
from loguru import logger

from folder_select.config import API_CACHE_PREFIX, REQUEST_TIMEOUT
from folder_select.errors import MalformedResponse, TransportFailure


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class FolderApi:
    """Fetches the folders/items response from a URL or a local JSON file."""

    def __init__(
        self,
        source: str,
        *,
        from_cache: bool = False,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.source = source
        self.from_cache = from_cache
        self.timeout = timeout
        self.sess = requests.Session()

        self.api_cache_prefix: str | None = API_CACHE_PREFIX
        if not self.from_cache or not _is_url(source):
            self.api_cache_prefix = None

        logger.debug(
            "API ready: source {!r}, from_cache {!r}, api_cache_prefix {!r}",
            self.source,
            self.from_cache,
            self.api_cache_prefix,
        )

        if self.api_cache_prefix:
            Path(self.api_cache_prefix).parent.mkdir(parents=True, exist_ok=True)

    def _cache_name(self) -> str:
        name = self.source.split("://", 1)[-1]
        if len(name) > 64:
            name = hashlib.sha1(name.encode("utf-8")).hexdigest()
        return f"{self.api_cache_prefix}{name.replace('/', '--')}"

    def fetch(self) -> dict[str, Any]:
        """Fetch the response, return decoded json.

        Raises:
            TransportFailure: The request or file read failed.
            MalformedResponse: The body is not valid JSON.
        """
        if not _is_url(self.source):
            return self._read_file(Path(self.source))

        cache_name: str | None = None
        if self.api_cache_prefix:
            cache_name = self._cache_name()
            if Path(cache_name).exists():
                logger.debug("Filled from cache: {!r}", cache_name)
                return self._read_file(Path(cache_name))

        logger.debug("Making request: {!r}", self.source)
        try:
            r = self.sess.get(self.source, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            msg = f"Fetching {self.source!r} failed: {e}"
            raise TransportFailure(msg) from e

        try:
            rv: dict[str, Any] = r.json()
        except ValueError as e:
            msg = f"Response from {self.source!r} is not valid JSON: {e}"
            raise MalformedResponse(msg) from e

        if cache_name:
            with open(cache_name, "w", encoding="utf-8") as f:
                f.write(r.text)

        return rv

    def _read_file(self, path: Path) -> dict[str, Any]:
        try:
            raw = path.read_bytes()
        except OSError as e:
            msg = f"Cannot read response file {str(path)!r}: {e}"
            raise TransportFailure(msg) from e
        try:
            return json.loads(raw.decode("utf-8"))  # type: ignore[no-any-return]
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            msg = f"Response file {str(path)!r} is not valid UTF-8 JSON: {e}"
            raise MalformedResponse(msg) from e
