"""Tests for tool specs, server registration and instructions."""

from __future__ import annotations

import asyncio

import pytest

from readdocs.core.report import NO_MATCHES
from readdocs.mcp.server import (
    _FALLBACK_INSTRUCTIONS,
    ITEM_DOC,
    KEYWORD_DOC,
    OPERATION_DOC,
    START_LINE_DOC,
    build_tool_specs,
    create_server,
    generate_instructions,
    tool_slug,
)
from readdocs.utils.config import ConfigError


def _specs(ctx):
    return {spec.name: spec for spec in build_tool_specs(ctx)}


class TestToolSpecs:
    def test_names(self, ctx):
        assert list(_specs(ctx)) == [
            "search_docs",
            "components_overview",
            "components_list",
            "components_items",
            "components_detail",
            "hooks_overview",
            "hooks_list",
            "hooks_items",
            "hooks_detail",
        ]

    def test_search_handler(self, ctx):
        text = _specs(ctx)["search_docs"].handler("button")
        assert text.startswith("type: detail\nname: button\nmodule: components")
        assert "match_type: exact-filename" in text
        assert "score: 100" in text

    def test_search_and_no_matches(self, ctx):
        search = _specs(ctx)["search_docs"].handler
        assert search("xyz-nonexistent") == NO_MATCHES
        assert search("useRouter useState", operation="and") == NO_MATCHES

    def test_overview_and_list(self, ctx):
        specs = _specs(ctx)
        assert specs["hooks_overview"].handler().startswith("# Hooks")
        assert "- use-router" in specs["hooks_list"].handler()

    def test_items(self, ctx):
        assert _specs(ctx)["components_items"].handler() == "button\ncard\ndate-picker"

    def test_detail_with_range(self, ctx):
        detail = _specs(ctx)["components_detail"].handler
        assert detail("DatePicker", start_line=1, end_line=1) == "# DatePicker"

    def test_detail_missing_returns_error_text(self, ctx):
        text = _specs(ctx)["hooks_detail"].handler("useEffect")
        assert text.startswith("Error:")

    def test_detail_parameters_documented(self, ctx):
        params = _specs(ctx)["hooks_detail"].parameters
        assert list(params) == ["item", "start_line", "end_line"]
        assert "kebab" in _specs(ctx)["hooks_detail"].description

    def test_colliding_slugs_rejected(self, make_ctx):
        ctx = make_ctx(
            {"a-b/x.md": "x", "a_b/y.md": "y"},
            modules=[{"name": "a-b"}, {"name": "a_b", "naming_pattern": "original"}],
        )
        with pytest.raises(ConfigError):
            build_tool_specs(ctx)


@pytest.mark.parametrize(
    "name,slug",
    [("components", "components"), ("Form Controls", "form_controls"), ("data-grid", "data_grid")],
)
def test_tool_slug(name, slug):
    assert tool_slug(name) == slug


class TestServer:
    def test_registers_every_tool(self, ctx):
        server = create_server(ctx)
        tools = asyncio.run(server.list_tools())
        assert sorted(t.name for t in tools) == sorted(_specs(ctx))

    def test_search_schema_has_operation_enum(self, ctx):
        server = create_server(ctx)
        tool = next(t for t in asyncio.run(server.list_tools()) if t.name == "search_docs")
        props = tool.inputSchema["properties"]
        assert props["operation"]["enum"] == ["and", "or"]
        assert tool.inputSchema["required"] == ["keyword"]

    def test_parameter_descriptions_in_schema(self, ctx):
        server = create_server(ctx)
        tools = {t.name: t for t in asyncio.run(server.list_tools())}
        detail = tools["hooks_detail"].inputSchema["properties"]
        assert detail["item"]["description"] == ITEM_DOC
        assert detail["start_line"]["description"] == START_LINE_DOC
        assert detail["end_line"]["default"] == 0
        search = tools["search_docs"].inputSchema["properties"]
        assert search["keyword"]["description"] == KEYWORD_DOC
        assert search["operation"]["description"] == OPERATION_DOC

    def test_manifest_resource(self, ctx):
        server = create_server(ctx)
        uris = [str(r.uri) for r in asyncio.run(server.list_resources())]
        assert "docs://manifest" in uris


class TestInstructions:
    def test_lists_modules(self, ctx):
        text = generate_instructions(ctx)
        assert "'acme-ui' (version 2.1.0)" in text
        assert "- hooks (tools prefixed 'hooks_'): React hooks" in text

    def test_fallback_without_modules(self, make_ctx):
        ctx = make_ctx({}, modules=[])
        assert generate_instructions(ctx) == _FALLBACK_INSTRUCTIONS
