"""OpenAPI / Swagger endpoint expansion.

Turns one operation of an OpenAPI 3.x or Swagger 2.0 document into an
EndpointDetail. Response schemas are resolved; parameter and request
body schemas are passed through as written.
"""

from swagger_search.parser.base import EndpointDetail, ParamDetail, RequestBodyDetail, ResponseDetail
from swagger_search.resolver import resolve_schema
from swagger_search.store import get_operation


def expand_endpoint(doc: dict | None, path: str, method: str) -> EndpointDetail | None:
    """Expand the operation at ``path``/``method``, or None if there is none."""
    operation = get_operation(doc, path, method)
    if operation is None:
        return None

    return EndpointDetail(
        path=path,
        method=method.upper(),
        summary=operation.get("summary") or "",
        description=operation.get("description") or "",
        operation_id=operation.get("operationId") or "",
        tags=operation.get("tags") or [],
        parameters=_parse_parameters(operation.get("parameters") or []),
        request_body=_parse_request_body(operation.get("requestBody")),
        responses=_parse_responses(doc, operation.get("responses") or {}),
    )


def _parse_parameters(params: list[dict]) -> list[ParamDetail]:
    result = []
    for p in params:
        schema = p.get("schema")
        schema_type = schema.get("type") if isinstance(schema, dict) else None
        result.append(
            ParamDetail(
                name=p.get("name", ""),
                location=p.get("in"),
                required=p.get("required") or False,
                description=p.get("description") or "",
                param_type=p.get("type") or schema_type or "unknown",
                schema_=schema,
            )
        )
    return result


def _parse_request_body(body: dict | None) -> RequestBodyDetail | None:
    if body is None:
        return None
    content = body.get("content") or {}
    # Only the first declared media type is surfaced
    content_type = next(iter(content), None)
    media = content.get(content_type) or {}
    return RequestBodyDetail(
        required=body.get("required") or False,
        description=body.get("description") or "",
        content_type=content_type,
        schema_=media.get("schema"),
    )


def _parse_responses(doc: dict | None, responses: dict) -> dict[str, ResponseDetail]:
    result = {}
    for status_code, resp in responses.items():
        resp = resp or {}
        if isinstance(resp.get("content"), dict):
            # OpenAPI 3.x
            content = resp["content"]
            content_type = next(iter(content), None)
            schema = (content.get(content_type) or {}).get("schema")
            result[str(status_code)] = ResponseDetail(
                description=resp.get("description"),
                content_type=content_type,
                schema_=resolve_schema(schema, doc) if schema is not None else None,
            )
        elif resp.get("schema") is not None:
            # Swagger 2.0
            result[str(status_code)] = ResponseDetail(
                description=resp.get("description"),
                schema_=resolve_schema(resp["schema"], doc),
            )
        else:
            result[str(status_code)] = ResponseDetail(description=resp.get("description"))
    return result
