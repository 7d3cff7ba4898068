"""Caller-facing models for search hits and expanded endpoints.

The resolver and search work on the raw document (plain dicts);
these models are only built at the detail-expansion boundary and
serialize with the document's own camelCase keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """A lightweight search hit: where the operation lives and what it says."""

    path: str
    method: str  # as stored in the document, lowercase
    summary: Any = ""
    description: Any = ""


class ParamDetail(BaseModel):
    """A single normalized parameter (query, path, header, or cookie)."""

    model_config = ConfigDict(populate_by_name=True)

    name: Any = ""
    location: str | None = Field(default=None, alias="in")
    required: bool = False
    description: Any = ""
    param_type: Any = Field(default="unknown", alias="type")  # OpenAPI 3.1 allows a list of types
    schema_: Any = Field(default=None, alias="schema")  # passed through unresolved


class RequestBodyDetail(BaseModel):
    """The representative (first) media type of a request body."""

    model_config = ConfigDict(populate_by_name=True)

    required: bool = False
    description: Any = ""
    content_type: str | None = Field(default=None, alias="contentType")
    schema_: Any = Field(default=None, alias="schema")


class ResponseDetail(BaseModel):
    """One status-code entry; only the keys its dialect provides are set."""

    model_config = ConfigDict(populate_by_name=True)

    description: Any = None
    content_type: str | None = Field(default=None, alias="contentType")
    schema_: Any = Field(default=None, alias="schema")


class EndpointDetail(BaseModel):
    """A fully expanded endpoint with response schemas resolved."""

    model_config = ConfigDict(populate_by_name=True)

    path: str
    method: str  # GET / POST / PUT / DELETE / PATCH
    summary: Any = ""
    description: Any = ""
    operation_id: Any = Field(default="", alias="operationId")
    tags: list[Any] = []
    parameters: list[ParamDetail] = []
    request_body: RequestBodyDetail | None = Field(default=None, alias="requestBody")
    responses: dict[str, ResponseDetail] = {}

    def to_dict(self) -> dict:
        """JSON-safe dump with document-style keys, keeping each response's own shape."""
        data = self.model_dump(mode="json", by_alias=True, exclude={"responses"})
        data["responses"] = {
            code: resp.model_dump(mode="json", by_alias=True, exclude_unset=True)
            for code, resp in self.responses.items()
        }
        return data
