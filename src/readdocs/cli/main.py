"""Typer app: serve, fetch, search, read, tools and config commands."""

from __future__ import annotations

from typing import Optional

import typer

from readdocs.cli._shared import (
    AUTH_TOKEN_OPTION,
    BRANCH_OPTION,
    CLONE_LOCATION_OPTION,
    DOCS_DIR_OPTION,
    DOCS_PATH_OPTION,
    FORMAT_OPTION,
    INCLUDE_SRC_OPTION,
    LOG_LEVEL_OPTION,
    NAME_OPTION,
    REPO_URL_OPTION,
    get_context,
    load_settings,
)
from readdocs.core.docs import DocsError, list_items, read_detail, read_list, read_overview
from readdocs.core.manifest import ManifestError
from readdocs.core.report import NO_MATCHES, format_results
from readdocs.core.search import search_docs
from readdocs.sync.checkout import CheckoutError, fetch_docs
from readdocs.utils.config import ConfigError
from readdocs.utils.output import error, info, output_json, output_table, output_text, resolve_format, success

app = typer.Typer(
    name="readdocs",
    help="ReadDocs: serve a git-hosted documentation tree to AI agents over MCP.",
    no_args_is_help=True,
)


@app.command()
def serve(
    repo_url: Optional[str] = REPO_URL_OPTION,
    branch: Optional[str] = BRANCH_OPTION,
    docs_path: Optional[str] = DOCS_PATH_OPTION,
    clone_location: Optional[str] = CLONE_LOCATION_OPTION,
    auth_token: Optional[str] = AUTH_TOKEN_OPTION,
    name: Optional[str] = NAME_OPTION,
    include_src: Optional[bool] = INCLUDE_SRC_OPTION,
    docs_dir: Optional[str] = DOCS_DIR_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Run the MCP server on stdio."""
    from readdocs.mcp.server import serve as run_server

    settings = load_settings(
        repo_url=repo_url, branch=branch, docs_path=docs_path,
        clone_location=clone_location, auth_token=auth_token, name=name,
        include_src=include_src, docs_dir=docs_dir, log_level=log_level,
    )
    try:
        run_server(settings)
    except (ConfigError, CheckoutError, ManifestError) as e:
        error(str(e))
        raise typer.Exit(1)


@app.command()
def fetch(
    repo_url: Optional[str] = REPO_URL_OPTION,
    branch: Optional[str] = BRANCH_OPTION,
    docs_path: Optional[str] = DOCS_PATH_OPTION,
    clone_location: Optional[str] = CLONE_LOCATION_OPTION,
    auth_token: Optional[str] = AUTH_TOKEN_OPTION,
    name: Optional[str] = NAME_OPTION,
    include_src: Optional[bool] = INCLUDE_SRC_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Clone or update the docs checkout and print its location."""
    settings = load_settings(
        repo_url=repo_url, branch=branch, docs_path=docs_path,
        clone_location=clone_location, auth_token=auth_token, name=name,
        include_src=include_src, log_level=log_level,
    )
    try:
        docs_root = fetch_docs(settings)
    except (ConfigError, CheckoutError) as e:
        error(str(e))
        raise typer.Exit(1)

    if resolve_format(fmt) == "json":
        output_json({"docs_dir": str(docs_root), "branch": settings.branch})
    else:
        success(f"Docs checked out at {docs_root}")


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Space-separated search terms"),
    operation: str = typer.Option("or", "--operation", "-o", help="'or' (any term) or 'and' (all terms)"),
    repo_url: Optional[str] = REPO_URL_OPTION,
    branch: Optional[str] = BRANCH_OPTION,
    docs_path: Optional[str] = DOCS_PATH_OPTION,
    clone_location: Optional[str] = CLONE_LOCATION_OPTION,
    auth_token: Optional[str] = AUTH_TOKEN_OPTION,
    docs_dir: Optional[str] = DOCS_DIR_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Search module documents by keyword."""
    if operation.lower() not in ("and", "or"):
        error(f"Invalid operation: {operation}. Use 'and' or 'or'.")
        raise typer.Exit(1)

    settings = load_settings(
        repo_url=repo_url, branch=branch, docs_path=docs_path,
        clone_location=clone_location, auth_token=auth_token,
        docs_dir=docs_dir, log_level=log_level,
    )
    ctx = get_context(settings)
    records = search_docs(ctx, keyword, operation)

    if resolve_format(fmt) == "json":
        output_json([r.to_dict() for r in records])
    elif not records:
        info(NO_MATCHES)
    else:
        output_text(format_results(records))


@app.command()
def read(
    module: str = typer.Argument(..., help="Module name"),
    item: Optional[str] = typer.Argument(None, help="Item name; omit for the module overview"),
    show_list: bool = typer.Option(False, "--list", "-l", help="Show the module's list document"),
    items: bool = typer.Option(False, "--items", help="List the module's detail item names"),
    start_line: int = typer.Option(0, "--start-line", help="First line (1-indexed, 0 = start)"),
    end_line: int = typer.Option(0, "--end-line", help="Last line (inclusive, 0 = end)"),
    docs_dir: Optional[str] = DOCS_DIR_OPTION,
    repo_url: Optional[str] = REPO_URL_OPTION,
    branch: Optional[str] = BRANCH_OPTION,
    docs_path: Optional[str] = DOCS_PATH_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Print a module overview, list, item names, or one item's document."""
    settings = load_settings(
        docs_dir=docs_dir, repo_url=repo_url, branch=branch,
        docs_path=docs_path, log_level=log_level,
    )
    ctx = get_context(settings)
    try:
        if items:
            text = "\n".join(list_items(ctx, module))
        elif show_list:
            text = read_list(ctx, module)
        elif item:
            text = read_detail(ctx, module, item, start_line, end_line)
        else:
            text = read_overview(ctx, module)
    except DocsError as e:
        error(str(e))
        raise typer.Exit(1)
    output_text(text)


@app.command()
def tools(
    docs_dir: Optional[str] = DOCS_DIR_OPTION,
    repo_url: Optional[str] = REPO_URL_OPTION,
    branch: Optional[str] = BRANCH_OPTION,
    docs_path: Optional[str] = DOCS_PATH_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List the MCP tools the server would expose for these docs."""
    from readdocs.mcp.server import build_tool_specs

    settings = load_settings(
        docs_dir=docs_dir, repo_url=repo_url, branch=branch,
        docs_path=docs_path, log_level=log_level,
    )
    ctx = get_context(settings)
    try:
        specs = build_tool_specs(ctx)
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)

    rows = [
        {
            "name": spec.name,
            "parameters": ", ".join(spec.parameters) or "-",
            "description": spec.description,
        }
        for spec in specs
    ]
    output_table(rows, ["name", "parameters", "description"], fmt=fmt)


# Register subcommand groups
from readdocs.cli.config_cmd import config_app

app.add_typer(config_app, name="config", help="Manage global configuration")
