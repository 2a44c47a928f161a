"""Tests for _sentinel.py."""

from alamofire_ua import UNKNOWN, Version
from alamofire_ua._sentinel import decode_optional, encode_optional


def test_decode_sentinel() -> None:
    """Test the sentinel decodes to None without calling the decoder."""

    def fail(text: str) -> str:
        raise AssertionError(text)

    assert decode_optional(UNKNOWN, fail) is None


def test_decode_value() -> None:
    """Test other text is passed to the decoder."""
    assert decode_optional("1.2.3", Version.parse) == Version(1, 2, 3)
    assert decode_optional("my app", str) == "my app"


def test_encode() -> None:
    """Test None renders as the sentinel."""
    assert encode_optional(None) == "Unknown"
    assert encode_optional(Version(1, 2, 3)) == "1.2.3"
    assert encode_optional("") == ""
