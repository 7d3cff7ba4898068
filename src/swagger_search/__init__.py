"""Keyword search and schema resolution over OpenAPI/Swagger documents."""

__version__ = "0.1.0"
