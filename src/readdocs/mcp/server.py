"""MCP server exposing a documentation tree as tools and resources."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Annotated, Callable, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from readdocs.core.corpus import SearchContext, load_context
from readdocs.core.docs import DocsError, list_items, read_detail, read_list, read_overview
from readdocs.core.manifest import ManifestError
from readdocs.core.report import format_results
from readdocs.core.schema import ModuleConfig
from readdocs.core.search import search_docs
from readdocs.sync.checkout import CheckoutError, fetch_docs
from readdocs.utils.config import ConfigError, Settings, resolve_settings
from readdocs.utils.log import setup_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "readdocs"

_FALLBACK_INSTRUCTIONS = (
    "ReadDocs provides tools to help agents read documentation. "
    "Use search_docs to find documents by keyword, then the per-module tools to read them."
)

# Parameter docs, published in each tool's input schema
ITEM_DOC = "Item name, in any casing; converted to the module's file naming pattern"
START_LINE_DOC = "First line to return, 1-indexed (0 = from the start)"
END_LINE_DOC = "Last line to return, inclusive (0 = to the end)"
KEYWORD_DOC = "Space-separated search terms"
OPERATION_DOC = "'or' (any term, default) or 'and' (all terms)"


@dataclass(frozen=True)
class ToolSpec:
    """One callable tool: name, description, parameter docs and handler."""

    name: str
    description: str
    handler: Callable[..., str]
    parameters: dict[str, str] = field(default_factory=dict)


def tool_slug(module_name: str) -> str:
    """Tool-name-safe form of a module name."""
    slug = re.sub(r"[^0-9a-zA-Z]+", "_", module_name).strip("_").lower()
    return slug or "module"


def _error(e: Exception) -> str:
    return f"Error: {e}"


def _module_tools(ctx: SearchContext, module: ModuleConfig) -> list[ToolSpec]:
    slug = tool_slug(module.name)
    name = module.name
    about = f" {module.description}" if module.description else ""

    def overview() -> str:
        try:
            return read_overview(ctx, name)
        except DocsError as e:
            return _error(e)

    def item_list() -> str:
        try:
            return read_list(ctx, name)
        except DocsError as e:
            return _error(e)

    def items() -> str:
        try:
            return "\n".join(list_items(ctx, name))
        except DocsError as e:
            return _error(e)

    def detail(
        item: Annotated[str, Field(description=ITEM_DOC)],
        start_line: Annotated[int, Field(description=START_LINE_DOC)] = 0,
        end_line: Annotated[int, Field(description=END_LINE_DOC)] = 0,
    ) -> str:
        try:
            return read_detail(ctx, name, item, start_line, end_line)
        except DocsError as e:
            return _error(e)

    return [
        ToolSpec(
            name=f"{slug}_overview",
            description=f"Read the overview of the '{name}' module.{about}",
            handler=overview,
        ),
        ToolSpec(
            name=f"{slug}_list",
            description=f"Read the list of everything documented in the '{name}' module.",
            handler=item_list,
        ),
        ToolSpec(
            name=f"{slug}_items",
            description=f"List the item names that have a detail document in the '{name}' module.",
            handler=items,
        ),
        ToolSpec(
            name=f"{slug}_detail",
            description=(
                f"Read the detail document of one item in the '{name}' module. "
                "Optionally restrict to a 1-indexed, inclusive line range. "
                f"Item names are converted to {module.naming_pattern.value} file names."
            ),
            handler=detail,
            parameters={
                "item": ITEM_DOC,
                "start_line": START_LINE_DOC,
                "end_line": END_LINE_DOC,
            },
        ),
    ]


def _search_tool(ctx: SearchContext) -> ToolSpec:
    def search(
        keyword: Annotated[str, Field(description=KEYWORD_DOC)],
        operation: Annotated[Literal["and", "or"], Field(description=OPERATION_DOC)] = "or",
    ) -> str:
        records = search_docs(ctx, keyword, operation)
        logger.debug("search %r (%s): %d matches", keyword, operation, len(records))
        return format_results(records)

    return ToolSpec(
        name="search_docs",
        description=(
            "Search all module documents by space-separated keywords. "
            "Filename matches rank above content matches; each extra matched "
            "keyword adds to the score. Use operation='and' to require every keyword."
        ),
        handler=search,
        parameters={
            "keyword": KEYWORD_DOC,
            "operation": OPERATION_DOC,
        },
    )


def build_tool_specs(ctx: SearchContext) -> list[ToolSpec]:
    """Declarative tool list for a loaded manifest."""
    specs = [_search_tool(ctx)]
    for module in ctx.modules:
        specs.extend(_module_tools(ctx, module))

    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise ConfigError(f"Two modules map to the same tool name: {spec.name}")
        seen.add(spec.name)
    return specs


def generate_instructions(ctx: SearchContext) -> str:
    """Build an instruction string describing the served docs."""
    manifest = ctx.manifest
    if not manifest.modules:
        return _FALLBACK_INSTRUCTIONS

    lines = [
        f"ReadDocs is serving '{manifest.name}' (version {manifest.version}).",
    ]
    if manifest.description:
        lines.append(manifest.description)
    lines.append("")
    lines.append(f"Modules ({len(manifest.modules)}):")
    for module in manifest.modules:
        suffix = f": {module.description}" if module.description else ""
        lines.append(f"- {module.name} (tools prefixed '{tool_slug(module.name)}_'){suffix}")
    lines.extend([
        "",
        "Use search_docs to locate documents, <module>_overview and <module>_list "
        "to browse, and <module>_detail to read one item.",
    ])
    return "\n".join(lines)


def create_server(ctx: SearchContext) -> FastMCP:
    """Build a FastMCP server with one tool per ToolSpec and a manifest resource."""
    server = FastMCP(SERVER_NAME, instructions=generate_instructions(ctx))

    for spec in build_tool_specs(ctx):
        server.add_tool(spec.handler, name=spec.name, description=spec.description)

    @server.resource("docs://manifest")
    def resource_manifest() -> str:
        """Docs manifest: project metadata and module list."""
        return ctx.manifest.model_dump_json(indent=2)

    return server


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def serve(settings: Settings) -> None:
    """Fetch the docs, load the manifest and run the server on stdio."""
    docs_root = fetch_docs(settings)
    ctx = load_context(docs_root)
    logger.info("Serving %d modules from %s", len(ctx.modules), ctx.docs_root)
    create_server(ctx).run(transport="stdio")


def main():
    """Run the MCP server on stdio with settings from config and environment."""
    try:
        settings = resolve_settings()
    except ConfigError as e:
        setup_logging()
        logger.error("%s", e)
        raise SystemExit(1)
    setup_logging(settings.log_level)
    try:
        serve(settings)
    except (ConfigError, CheckoutError, ManifestError) as e:
        logger.error("Fatal error: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
