"""Shared CLI options and helpers to avoid circular imports."""

from __future__ import annotations

from typing import Optional

import typer

from readdocs.core.corpus import SearchContext, load_context
from readdocs.core.manifest import ManifestError
from readdocs.sync.checkout import CheckoutError, fetch_docs
from readdocs.utils.config import ConfigError, Settings, resolve_settings
from readdocs.utils.log import setup_logging
from readdocs.utils.output import error

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")
REPO_URL_OPTION = typer.Option(None, "--repo-url", "-r", help="Git URL of the docs repository (https or ssh)")
BRANCH_OPTION = typer.Option(None, "--branch", "-b", help="Branch to read the docs from [default: main]")
DOCS_PATH_OPTION = typer.Option(None, "--docs-path", help="Docs folder inside the repository [default: docs]")
CLONE_LOCATION_OPTION = typer.Option(None, "--clone-location", help="Parent directory for checkouts [default: ~/.temp-repo]")
AUTH_TOKEN_OPTION = typer.Option(None, "--auth-token", help="Access token for private repositories")
NAME_OPTION = typer.Option(None, "--name", "-n", help="Checkout folder name [default: repository name]")
INCLUDE_SRC_OPTION = typer.Option(None, "--include-src/--docs-only", help="Check out the whole repository, not just the docs folder")
DOCS_DIR_OPTION = typer.Option(None, "--docs-dir", "-d", help="Use an existing local docs directory (skips git)")
LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR")


def load_settings(**overrides: Optional[object]) -> Settings:
    """Resolve settings and configure logging, exiting on invalid config."""
    try:
        settings = resolve_settings(**overrides)
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)
    setup_logging(settings.log_level)
    return settings


def get_context(settings: Settings) -> SearchContext:
    """Fetch the docs and load their manifest, exiting on failure."""
    try:
        return load_context(fetch_docs(settings))
    except (ConfigError, CheckoutError, ManifestError) as e:
        error(str(e))
        raise typer.Exit(1)
