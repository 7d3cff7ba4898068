"""Keyword search over the operations of an API document."""

import re

from swagger_search.parser.base import SearchResult
from swagger_search.store import iter_operations

TOKEN_SPLIT = re.compile(r"[\s\-_]+")


def searchable_text(path: str, operation: dict) -> str:
    """Lowercased path, summary, description, operationId and tags."""
    summary = operation.get("summary") or ""
    description = operation.get("description") or ""
    operation_id = operation.get("operationId") or ""
    tags = " ".join(str(tag) for tag in operation.get("tags") or [])
    return f"{path} {summary} {description} {operation_id} {tags}".lower()


def matches(keyword: str, text: str) -> bool:
    """Substring match, or all-tokens match when the keyword has whitespace."""
    keyword = keyword.lower()
    if any(ch.isspace() for ch in keyword):
        tokens = [t for t in TOKEN_SPLIT.split(keyword) if t]
        return all(token in text for token in tokens)
    return keyword in text


def search(doc: dict | None, keyword: str) -> list[SearchResult]:
    """Find operations whose text contains the keyword, in document order."""
    results = []
    for path, method, operation in iter_operations(doc):
        if matches(keyword, searchable_text(path, operation)):
            results.append(
                SearchResult(
                    path=path,
                    method=method,
                    summary=operation.get("summary") or "",
                    description=operation.get("description") or "",
                )
            )
    return results
