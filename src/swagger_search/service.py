"""Search-then-expand queries over the currently loaded document."""

from typing import Any

from swagger_search.config import DEFAULT_LIMIT
from swagger_search.parser.base import EndpointDetail, SearchResult
from swagger_search.parser.swagger import expand_endpoint
from swagger_search.resolver import resolve_schema
from swagger_search.search import search
from swagger_search.store import DocumentStore


def search_with_details(
    doc: dict | None,
    keyword: str,
    limit: int | None = DEFAULT_LIMIT,
    default_limit: int = DEFAULT_LIMIT,
) -> list[EndpointDetail]:
    """Expand the first ``limit`` search hits, in search order.

    A missing or non-positive limit falls back to ``default_limit``.
    """
    if not limit or limit <= 0:
        limit = default_limit

    details = []
    for result in search(doc, keyword)[:limit]:
        detail = expand_endpoint(doc, result.path, result.method)
        if detail is not None:
            details.append(detail)
    return details


class SwaggerIndex:
    """Query operations bound to a DocumentStore.

    Each call reads the store's document once, so a reload in between
    calls never mixes two snapshots within one answer.
    """

    def __init__(self, store: DocumentStore, default_limit: int = DEFAULT_LIMIT):
        self.store = store
        self.default_limit = default_limit

    def search(self, keyword: str) -> list[SearchResult]:
        return search(self.store.document, keyword)

    def search_with_details(self, keyword: str, limit: int | None = None) -> list[EndpointDetail]:
        return search_with_details(self.store.document, keyword, limit, default_limit=self.default_limit)

    def get_endpoint_details(self, path: str, method: str) -> EndpointDetail | None:
        return expand_endpoint(self.store.document, path, method)

    def resolve_schema(self, schema: Any, depth: int = 0) -> Any:
        return resolve_schema(schema, self.store.document, depth)
