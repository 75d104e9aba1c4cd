"""Path utilities for clone locations."""

from __future__ import annotations

from pathlib import Path

CLONE_ROOT = ".temp-repo"


def default_clone_root() -> Path:
    """Return the default parent of all checkouts (~/.temp-repo/)."""
    return Path.home() / CLONE_ROOT


def clone_dir(name: str, clone_location: str = "") -> Path:
    """Return the checkout directory for a docs project."""
    if clone_location:
        return Path(clone_location).expanduser() / name
    return default_clone_root() / name
