"""Name casing conversion between module/item names and on-disk file names."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from readdocs.utils.config import ConfigError


class NamingPattern(str, Enum):
    kebab = "kebab"
    camel = "camel"
    snake = "snake"
    pascal = "pascal"
    original = "original"


_UPPER = re.compile(r"([A-Z])")
_DASHED = re.compile(r"-([a-z])")


def to_kebab(name: str) -> str:
    return _UPPER.sub(r"-\1", name).lower().lstrip("-")


def to_snake(name: str) -> str:
    return _UPPER.sub(r"_\1", name).lower().lstrip("_")


def to_camel(name: str) -> str:
    return _DASHED.sub(lambda m: m.group(1).upper(), name)


def to_pascal(name: str) -> str:
    camel = to_camel(name)
    return camel[:1].upper() + camel[1:]


_CONVERTERS: dict[NamingPattern, Callable[[str], str]] = {
    NamingPattern.kebab: to_kebab,
    NamingPattern.camel: to_camel,
    NamingPattern.snake: to_snake,
    NamingPattern.pascal: to_pascal,
    NamingPattern.original: lambda name: name,
}


def parse_pattern(value: str | NamingPattern) -> NamingPattern:
    """Parse a naming pattern, failing fast on anything unrecognized."""
    try:
        return NamingPattern(value)
    except ValueError:
        valid = ", ".join(p.value for p in NamingPattern)
        raise ConfigError(f"Invalid naming pattern: {value!r}. Valid patterns: {valid}")


def convert_name(name: str, pattern: str | NamingPattern) -> str:
    """Convert a free-form identifier to its on-disk form for `pattern`."""
    return _CONVERTERS[parse_pattern(pattern)](name)
