"""In-memory holder of the loaded API document.

The document is treated as immutable once loaded; a reload builds a new
one and swaps it in with a single assignment.
"""

import logging
from pathlib import Path
from typing import Iterator

import requests

from swagger_search.errors import DocumentLoadError
from swagger_search.parser.detect import detect_dialect, parse_document

logger = logging.getLogger(__name__)

# Path-item keys that sit next to the HTTP methods but are not operations.
PATH_LEVEL_KEYS = {"parameters", "summary", "description"}


def iter_operations(doc: dict | None) -> Iterator[tuple[str, str, dict]]:
    """Yield (path, method, operation) in document order."""
    if not doc:
        return
    for path, path_item in (doc.get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in path_item.items():
            if method in PATH_LEVEL_KEYS or not isinstance(operation, dict):
                continue
            yield path, method, operation


def get_operation(doc: dict | None, path: str, method: str) -> dict | None:
    """Look up one operation; the path is exact, the method case-insensitive."""
    if not doc:
        return None
    path_item = (doc.get("paths") or {}).get(path)
    if not isinstance(path_item, dict):
        return None
    operation = path_item.get(method.lower())
    if not isinstance(operation, dict):
        return None
    return operation


def fetch_document(source: str, timeout: float = 30.0) -> dict:
    """Read an API document from an http(s) URL or a local file path."""
    if source.startswith(("http://", "https://")):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DocumentLoadError(f"Failed to fetch Swagger documentation from {source}: {e}") from e
        text = response.text
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentLoadError(f"Failed to read Swagger documentation from {source}: {e}") from e

    try:
        return parse_document(text)
    except DocumentLoadError as e:
        raise DocumentLoadError(f"Failed to parse Swagger documentation from {source}: {e}") from e


class DocumentStore:
    """Holds the current document snapshot, or None before the first load."""

    def __init__(self, doc: dict | None = None):
        self._doc = doc

    @property
    def document(self) -> dict | None:
        return self._doc

    @property
    def loaded(self) -> bool:
        return self._doc is not None

    def replace(self, doc: dict) -> None:
        self._doc = doc

    def load(self, source: str, timeout: float = 30.0) -> dict:
        """Fetch and parse ``source`` and make it the current document.

        On failure the previous snapshot stays in place and the error is
        logged and re-raised.
        """
        try:
            doc = fetch_document(source, timeout=timeout)
        except DocumentLoadError:
            logger.exception("Error loading Swagger doc from %s", source)
            raise

        self.replace(doc)
        info = doc.get("info") or {}
        logger.info(
            "Loaded %s %s (%s, %d operations) from %s",
            info.get("title", "untitled API"),
            info.get("version", ""),
            detect_dialect(doc),
            sum(1 for _ in iter_operations(doc)),
            source,
        )
        return doc

    def operations(self) -> Iterator[tuple[str, str, dict]]:
        return iter_operations(self._doc)

    def get_operation(self, path: str, method: str) -> dict | None:
        return get_operation(self._doc, path, method)
