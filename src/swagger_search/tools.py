"""LLM tool catalog for the index, with argument validation and rendering.

Each tool's arguments are a pydantic model; the JSON Schema a tool host
advertises is generated from that model, and bad arguments are rejected
here before any search or resolution runs.
"""

import json
from typing import Any

from pydantic import BaseModel, Field, StrictStr, ValidationError

from swagger_search.config import DEFAULT_LIMIT
from swagger_search.errors import InvalidToolArguments, UnknownToolError
from swagger_search.service import SwaggerIndex


class SearchWithDetailsArgs(BaseModel):
    keyword: StrictStr = Field(
        description='The keyword to search for (e.g., "user", "order", "getHotDisplayList")'
    )
    limit: int = Field(default=DEFAULT_LIMIT, description="Maximum number of results to return (default: 5)")


class SearchArgs(BaseModel):
    keyword: StrictStr = Field(
        description='The keyword to search for (e.g., "user", "order", "getHotDisplayList")'
    )


class EndpointDetailsArgs(BaseModel):
    path: StrictStr = Field(description='The API path (e.g., "/bi/getHotDisplayList")')
    method: StrictStr = Field(description='The HTTP method (e.g., "get", "post")')


class ToolResult(BaseModel):
    text: str
    is_error: bool = False


TOOLS: dict[str, tuple[str, type[BaseModel]]] = {
    "search_api_with_details": (
        "Search for API endpoints using a keyword and get FULL DETAILS (parameters, request body, "
        "response schema) for all matching endpoints in ONE call. This is the RECOMMENDED tool for "
        "most queries about internal API documentation. Use this instead of search_api + "
        "get_api_details to save time.",
        SearchWithDetailsArgs,
    ),
    "search_api": (
        "Search for API endpoints using a keyword. Returns ONLY a list of matching paths and methods "
        "WITHOUT details. Use search_api_with_details instead if you need full information.",
        SearchArgs,
    ),
    "get_api_details": (
        "Get detailed information about a SPECIFIC API endpoint when you already know the exact path "
        "and method. If you are searching by keyword, use search_api_with_details instead.",
        EndpointDetailsArgs,
    ),
}


def list_tools() -> list[dict]:
    """Return the tool catalog as name / description / inputSchema dicts."""
    return [
        {"name": name, "description": description, "inputSchema": model.model_json_schema()}
        for name, (description, model) in TOOLS.items()
    ]


def call_tool(index: SwaggerIndex, name: str, arguments: dict | None) -> ToolResult:
    """Validate ``arguments`` for tool ``name`` and run it against ``index``."""
    if name not in TOOLS:
        raise UnknownToolError(name)
    _, model = TOOLS[name]
    args = _validate(name, model, arguments or {})

    if isinstance(args, SearchWithDetailsArgs):
        details = index.search_with_details(args.keyword, args.limit)
        if not details:
            return ToolResult(text=f'No API endpoints found matching keyword: "{args.keyword}"')
        return ToolResult(text=_render([d.to_dict() for d in details]))

    if isinstance(args, SearchArgs):
        results = index.search(args.keyword)
        return ToolResult(text=_render([r.model_dump(mode="json") for r in results]))

    detail = index.get_endpoint_details(args.path, args.method)
    if detail is None:
        return ToolResult(text=f"Endpoint not found: {args.method.upper()} {args.path}", is_error=True)
    return ToolResult(text=_render(detail.to_dict()))


def _validate(name: str, model: type[BaseModel], arguments: Any) -> BaseModel:
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        problems = [f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()]
        raise InvalidToolArguments(name, problems) from e


def _render(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
