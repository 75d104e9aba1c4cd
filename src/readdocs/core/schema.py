"""Pydantic v2 models for the docs manifest (config.json at the docs root)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from readdocs.core.naming import NamingPattern, convert_name


class ModuleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    naming_pattern: NamingPattern = NamingPattern.kebab
    folder: str = ""  # explicit on-disk folder, overrides the naming pattern

    @field_validator("folder")
    @classmethod
    def _no_traversal(cls, value: str) -> str:
        if value and (".." in value.split("/") or value.startswith("/")):
            raise ValueError(f"folder must be relative to the docs root: {value!r}")
        return value

    @property
    def directory(self) -> str:
        return self.folder or convert_name(self.name, self.naming_pattern)

    def file_name(self, item: str) -> str:
        """On-disk markdown file name for a detail item of this module."""
        return f"{convert_name(item, self.naming_pattern)}.md"


class DocsManifest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "docs"
    description: str = ""
    version: str = "0.0.0"
    modules: tuple[ModuleConfig, ...] = ()

    @model_validator(mode="after")
    def _unique_modules(self) -> DocsManifest:
        seen: set[str] = set()
        for module in self.modules:
            if module.name in seen:
                raise ValueError(f"duplicate module name {module.name!r}")
            seen.add(module.name)
        return self

    def get_module(self, name: str) -> ModuleConfig | None:
        for module in self.modules:
            if module.name == name:
                return module
        return None
