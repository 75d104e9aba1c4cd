"""Shared fixtures: docs corpora on disk and a seed git repository."""

from __future__ import annotations

import json
from pathlib import Path

import git
import pytest

from readdocs.core.corpus import SearchContext, load_context

MANIFEST = {
    "name": "acme-ui",
    "description": "ACME design system",
    "version": "2.1.0",
    "modules": [
        {"name": "components", "description": "UI components", "naming_pattern": "kebab"},
        {"name": "hooks", "description": "React hooks", "naming_pattern": "kebab"},
    ],
}

FILES = {
    "components/overview.md": "# Components\n\nReusable building blocks.\n",
    "components/list.md": "- button\n- card\n- date-picker\n",
    "components/button.md": "# Button\n\nA clickable element.\nPass \"onClick\" to handle presses.\n",
    "components/card.md": "# Card\n\nGroups content.\nOften wraps a button or two.\n",
    "components/date-picker.md": "# DatePicker\n\nPick a date.\nUses state internally.\n",
    "hooks/overview.md": "# Hooks\n\nFunctions for stateful logic.\n",
    "hooks/list.md": "- use-state\n- use-router\n",
    "hooks/use-state.md": "# useState\n\nDeclare a state variable.\nHooks are functions\n",
    "hooks/use-router.md": "# useRouter\n\nAccess the router object.\nSee also useParams.\n",
}


def write_docs(root: Path, manifest: dict, files: dict[str, str]) -> Path:
    """Write a manifest and markdown files under root."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "config.json").write_text(json.dumps(manifest, indent=2))
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Docs directory with two modules."""
    return write_docs(tmp_path / "docs", MANIFEST, FILES)


@pytest.fixture
def ctx(docs_root: Path) -> SearchContext:
    return load_context(docs_root)


@pytest.fixture
def make_ctx(tmp_path: Path):
    """Build a context from an ad-hoc corpus: make_ctx({"mod/a.md": "..."})."""
    counter = {"n": 0}

    def _make(files: dict[str, str], modules: list[dict] | None = None) -> SearchContext:
        counter["n"] += 1
        if modules is None:
            names = sorted({rel.split("/")[0] for rel in files})
            modules = [{"name": n} for n in names]
        root = write_docs(
            tmp_path / f"corpus{counter['n']}",
            {"name": "adhoc", "modules": modules},
            files,
        )
        return load_context(root)

    return _make


@pytest.fixture
def upstream_repo(tmp_path: Path) -> Path:
    """Non-bare repository on branch main with docs/ and src/ committed."""
    seed = tmp_path / "upstream"
    repo = git.Repo.init(seed)
    write_docs(seed / "docs", MANIFEST, FILES)
    (seed / "src").mkdir()
    (seed / "src" / "app.py").write_text("print('hello')\n")
    repo.index.add(["docs", "src"])
    repo.index.commit("initial")
    repo.git.branch("-M", "main")
    return seed
