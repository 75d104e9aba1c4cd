"""Search context and corpus traversal over module folders."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from readdocs.core.manifest import load_manifest
from readdocs.core.schema import DocsManifest, ModuleConfig

logger = logging.getLogger(__name__)

MODULE_STEMS = frozenset({"overview", "list"})


class DocumentKind(str, Enum):
    module = "module"
    detail = "detail"


@dataclass(frozen=True)
class SearchContext:
    """Immutable view of one docs root and its manifest."""

    docs_root: Path
    manifest: DocsManifest

    @property
    def modules(self) -> tuple[ModuleConfig, ...]:
        return self.manifest.modules

    def module_dir(self, module: ModuleConfig) -> Path:
        return self.docs_root / module.directory


def load_context(docs_root: Path) -> SearchContext:
    """Build a search context from a docs root holding config.json."""
    root = docs_root.resolve()
    return SearchContext(docs_root=root, manifest=load_manifest(root))


@dataclass(frozen=True)
class Document:
    module: ModuleConfig
    stem: str
    path: Path

    @property
    def kind(self) -> DocumentKind:
        if self.stem.lower() in MODULE_STEMS:
            return DocumentKind.module
        return DocumentKind.detail


def list_documents(module_dir: Path) -> list[tuple[str, Path]]:
    """Markdown files directly inside `module_dir` as (stem, path), by name."""
    return [
        (path.stem, path)
        for path in sorted(module_dir.glob("*.md"))
        if path.is_file()
    ]


def read_content(path: Path) -> str | None:
    """Read a document, returning None when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping content of %s: %s", path, e)
        return None


def walk_corpus(ctx: SearchContext) -> Iterator[Document]:
    """Yield every document of every module, in manifest then file-name order.

    Modules whose folder is missing or unreadable are skipped.
    """
    for module in ctx.modules:
        module_dir = ctx.module_dir(module)
        if not module_dir.is_dir():
            logger.warning("Module %r folder not found: %s", module.name, module_dir)
            continue
        try:
            entries = list_documents(module_dir)
        except OSError as e:
            logger.warning("Cannot list module %r: %s", module.name, e)
            continue
        for stem, path in entries:
            yield Document(module=module, stem=stem, path=path)
