"""CLI entry point for swagger-search."""

import json
import logging

import click

from swagger_search.config import get_settings
from swagger_search.errors import DocumentLoadError
from swagger_search.service import SwaggerIndex
from swagger_search.store import DocumentStore
from swagger_search.tools import list_tools


def _load_index(ctx: click.Context) -> SwaggerIndex:
    """Load the document named by --source / SWAGGER_URL into a fresh index."""
    source = ctx.obj["source"]
    if not source:
        raise click.ClickException("No API document given: pass --source or set SWAGGER_URL.")

    settings = get_settings()
    store = DocumentStore()
    try:
        store.load(source, timeout=settings.timeout)
    except DocumentLoadError as e:
        raise click.ClickException(str(e)) from e
    return SwaggerIndex(store, default_limit=settings.default_limit)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.option("-s", "--source", default=None, help="File path or URL of the OpenAPI/Swagger document. Defaults to SWAGGER_URL.")
@click.option("--log-level", default=None, help="Log level (default: SWAGGER_LOG_LEVEL or INFO).")
@click.pass_context
def main(ctx: click.Context, source: str | None, log_level: str | None):
    """Swagger Search: find API endpoints and their resolved schemas."""
    settings = get_settings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["source"] = source or settings.url


@main.command()
@click.argument("keyword")
@click.pass_context
def search(ctx: click.Context, keyword: str):
    """List endpoints matching KEYWORD (paths and methods only)."""
    index = _load_index(ctx)
    _echo_json([r.model_dump(mode="json") for r in index.search(keyword)])


@main.command()
@click.argument("path")
@click.argument("method")
@click.pass_context
def details(ctx: click.Context, path: str, method: str):
    """Show one endpoint with parameters, request body and resolved responses."""
    index = _load_index(ctx)
    detail = index.get_endpoint_details(path, method)
    if detail is None:
        click.echo(f"Endpoint not found: {method.upper()} {path}", err=True)
        ctx.exit(1)
    _echo_json(detail.to_dict())


@main.command()
@click.argument("keyword")
@click.option("-n", "--limit", default=None, type=int, help="Maximum number of endpoints to expand.")
@click.pass_context
def find(ctx: click.Context, keyword: str, limit: int | None):
    """Search for KEYWORD and show full details of the top matches."""
    index = _load_index(ctx)
    results = index.search_with_details(keyword, limit)
    if not results:
        click.echo(f'No API endpoints found matching keyword: "{keyword}"')
        return
    _echo_json([d.to_dict() for d in results])


@main.command()
def tools():
    """Print the LLM tool catalog with input schemas."""
    _echo_json(list_tools())
