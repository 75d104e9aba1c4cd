"""ReadDocs: serve a git-hosted documentation tree as MCP tools."""

__version__ = "0.3.0"
