"""Tests for name casing conversion."""

import pytest

from readdocs.core.naming import NamingPattern, convert_name, parse_pattern
from readdocs.utils.config import ConfigError


@pytest.mark.parametrize(
    "name,pattern,expected",
    [
        ("DatePicker", "kebab", "date-picker"),
        ("useState", "kebab", "use-state"),
        ("button", "kebab", "button"),
        ("DatePicker", "snake", "date_picker"),
        ("useState", "snake", "use_state"),
        ("date-picker", "camel", "datePicker"),
        ("date-picker", "pascal", "DatePicker"),
        ("button", "pascal", "Button"),
        ("Date Picker", "original", "Date Picker"),
    ],
)
def test_convert_name(name, pattern, expected):
    assert convert_name(name, pattern) == expected


def test_accepts_enum_members():
    assert convert_name("useState", NamingPattern.kebab) == "use-state"


def test_every_pattern_has_a_converter():
    for pattern in NamingPattern:
        assert isinstance(convert_name("someName", pattern), str)


def test_unknown_pattern_fails_fast():
    with pytest.raises(ConfigError, match="Invalid naming pattern"):
        parse_pattern("screaming")
    with pytest.raises(ConfigError):
        convert_name("x", "upper")
