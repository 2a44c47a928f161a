"""Tests for os_name.py."""

import pytest

from alamofire_ua import InvalidOsNameError, OsName

LITERALS = [
    "macOS(Catalyst)",
    "iOS",
    "watchOS",
    "tvOS",
    "macOS",
    "Linux",
    "Windows",
]


def test_closed_set() -> None:
    """Test the enumeration has exactly the known spellings."""
    assert [name.value for name in OsName] == LITERALS


@pytest.mark.parametrize("literal", LITERALS)
def test_parse_round_trip(literal: str) -> None:
    """Test each canonical spelling parses and renders back exactly."""
    os_name = OsName.parse(literal)

    assert isinstance(os_name, OsName)
    assert str(os_name) == literal


def test_parse_catalyst() -> None:
    """Test the spelling containing parentheses."""
    assert OsName.parse("macOS(Catalyst)") is OsName.MACOS_CATALYST


def test_parse_unknown() -> None:
    """Test that the sentinel parses to None."""
    assert OsName.parse("Unknown") is None


@pytest.mark.parametrize(
    "text",
    ["ios", "IOS", " iOS", "iOS ", "macOS (Catalyst)", "Android", "", "unknown"],
)
def test_parse_mismatch(text: str) -> None:
    """Test that anything else is a mismatch."""
    with pytest.raises(InvalidOsNameError, match="Mismatch"):
        OsName.parse(text)
