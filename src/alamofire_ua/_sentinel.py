"""Codec for the "Unknown" sentinel standing for an absent field."""

from collections.abc import Callable
from typing import TypeVar

from .constants import UNKNOWN

T = TypeVar("T")


def decode_optional(text: str, decoder: Callable[[str], T]) -> T | None:
    """Decode an optional field.

    Args:
        text: Raw field text.
        decoder: Function decoding non-sentinel text. Pass ``str`` to keep
            the text as-is.

    Returns:
        None for the sentinel, otherwise the decoded value.
    """
    if text == UNKNOWN:
        return None
    return decoder(text)


def encode_optional(value: object | None) -> str:
    """Render an optional field, using the sentinel for None."""
    return UNKNOWN if value is None else str(value)
