"""Parse raw API documentation text and detect its dialect."""

import json

import yaml

from swagger_search.errors import DocumentLoadError


def parse_document(text: str) -> dict:
    """Parse a JSON or YAML API document into a mapping.

    Raises DocumentLoadError if the text is neither, or is not a mapping.
    """
    data = None

    # YAML is a superset of JSON, so try it first
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        # Try JSON specifically (tabs and some escapes trip the YAML parser)
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise DocumentLoadError(f"Document is neither valid YAML nor JSON: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError("Document root must be a mapping")
    return data


def detect_dialect(doc: dict) -> str:
    """Return 'openapi' (3.x), 'swagger' (2.0), or 'unknown'."""
    if "openapi" in doc:
        return "openapi"
    if "swagger" in doc:
        return "swagger"
    return "unknown"
