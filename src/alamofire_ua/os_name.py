"""Operating system names recognized in User-Agent strings."""

from enum import Enum
from typing import Self

from ._sentinel import decode_optional
from .exceptions import InvalidOsNameError


class OsName(str, Enum):
    """Closed set of operating system names.

    Each value is the exact spelling used on the wire.
    """

    MACOS_CATALYST = "macOS(Catalyst)"
    IOS = "iOS"
    WATCHOS = "watchOS"
    TVOS = "tvOS"
    MACOS = "macOS"
    LINUX = "Linux"
    WINDOWS = "Windows"

    @classmethod
    def parse(cls, text: str) -> Self | None:
        """Parse an OS name.

        Matching is exact: no case folding and no whitespace trimming.

        Args:
            text: OS name literal, or "Unknown".

        Returns:
            The matching member, or None for "Unknown".

        Raises:
            InvalidOsNameError: If the text is not a known OS name.
        """
        return decode_optional(text, cls._parse_known)

    @classmethod
    def _parse_known(cls, text: str) -> Self:
        try:
            return cls(text)
        except ValueError as e:
            raise InvalidOsNameError(
                f"Mismatch: {text!r} is not a known OS name"
            ) from e

    def __str__(self: Self) -> str:
        """Return the wire spelling."""
        return self.value
