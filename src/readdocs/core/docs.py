"""Plain document reads: module overview, item list, item detail."""

from __future__ import annotations

from pathlib import Path

from readdocs.core.corpus import MODULE_STEMS, SearchContext, list_documents
from readdocs.core.schema import ModuleConfig

OVERVIEW_FILE = "overview.md"
LIST_FILE = "list.md"


class DocsError(Exception):
    pass


class UnknownModuleError(DocsError):
    pass


class DocumentNotFoundError(DocsError):
    pass


def get_module(ctx: SearchContext, name: str) -> ModuleConfig:
    module = ctx.manifest.get_module(name)
    if module is None:
        known = ", ".join(m.name for m in ctx.modules) or "(none)"
        raise UnknownModuleError(f"Unknown module '{name}'. Known modules: {known}")
    return module


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentNotFoundError(f"{what} not found: {path.name}")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFoundError(f"{what} could not be read: {e}")


def slice_lines(text: str, start_line: int = 0, end_line: int = 0) -> str:
    """Return lines start_line..end_line (1-indexed, inclusive).

    Zero leaves that side unbounded; bounds outside the text are clamped.
    """
    if start_line <= 0 and end_line <= 0:
        return text
    lines = text.split("\n")
    start = max(start_line, 1) - 1
    end = len(lines) if end_line <= 0 else min(end_line, len(lines))
    return "\n".join(lines[start:end])


def read_overview(ctx: SearchContext, module_name: str) -> str:
    module = get_module(ctx, module_name)
    return _read(ctx.module_dir(module) / OVERVIEW_FILE, f"Overview of '{module.name}'")


def read_list(ctx: SearchContext, module_name: str) -> str:
    module = get_module(ctx, module_name)
    return _read(ctx.module_dir(module) / LIST_FILE, f"List of '{module.name}'")


def list_items(ctx: SearchContext, module_name: str) -> list[str]:
    """Stems of the detail documents in a module, sorted."""
    module = get_module(ctx, module_name)
    module_dir = ctx.module_dir(module)
    if not module_dir.is_dir():
        raise DocumentNotFoundError(f"Folder of module '{module.name}' not found: {module.directory}")
    return [stem for stem, _ in list_documents(module_dir) if stem.lower() not in MODULE_STEMS]


def read_detail(
    ctx: SearchContext,
    module_name: str,
    item: str,
    start_line: int = 0,
    end_line: int = 0,
) -> str:
    """Read one item's document, converting `item` with the module's naming pattern."""
    module = get_module(ctx, module_name)
    file_name = module.file_name(item)
    if "/" in file_name or "\\" in file_name or file_name.startswith(".."):
        raise DocumentNotFoundError(f"Invalid item name: {item!r}")
    text = _read(ctx.module_dir(module) / file_name, f"Detail '{item}' in '{module.name}'")
    return slice_lines(text, start_line, end_line)
