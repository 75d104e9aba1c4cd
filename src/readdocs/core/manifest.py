"""Load the docs manifest from a docs root."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from readdocs.core.schema import DocsManifest

logger = logging.getLogger(__name__)

MANIFEST_FILE = "config.json"


class ManifestError(Exception):
    pass


class ManifestNotFoundError(ManifestError):
    pass


class ManifestParseError(ManifestError):
    pass


def load_manifest(docs_dir: Path) -> DocsManifest:
    """Read and validate `config.json` from `docs_dir`."""
    path = docs_dir / MANIFEST_FILE
    if not path.is_file():
        raise ManifestNotFoundError(f"No {MANIFEST_FILE} found in {docs_dir}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestNotFoundError(f"Cannot read {path}: {e}")
    try:
        manifest = DocsManifest.model_validate_json(text)
    except ValidationError as e:
        raise ManifestParseError(f"Invalid manifest {path}: {e}")
    logger.debug("Loaded manifest %s with %d modules", manifest.name, len(manifest.modules))
    return manifest
