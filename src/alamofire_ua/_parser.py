"""Left-to-right parser for Alamofire User-Agent strings."""

import logging
from collections.abc import Callable
from typing import Self, TypeVar

from ._sentinel import decode_optional
from .app_build import AppBuild
from .constants import LIBRARY_NAME
from .exceptions import (
    FieldParseError,
    FieldReadError,
    StructuralMismatchError,
    UserAgentField,
    UserAgentParseError,
)
from .os_name import OsName
from .types import UserAgentFields
from .version import Version

logger = logging.getLogger(__name__)

T = TypeVar("T")

LIBRARY_MARKER = f" {LIBRARY_NAME}/".encode()


class _Cursor:
    """Read position over an immutable byte buffer."""

    def __init__(self: Self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def read_until(self: Self, delimiter: bytes) -> bytes | None:
        """Consume up to and including the delimiter.

        Returns:
            The bytes before the delimiter, or None if it does not occur in
            the rest of the buffer. The cursor does not move on None.
        """
        end = self._data.find(delimiter, self._pos)
        if end == -1:
            return None
        chunk = self._data[self._pos : end]
        self._pos = end + len(delimiter)
        return chunk

    def expect(self: Self, literal: bytes) -> bool:
        """Consume the literal if the buffer continues with it."""
        if not self._data.startswith(literal, self._pos):
            return False
        self._pos += len(literal)
        return True

    def read_to_end(self: Self) -> bytes:
        """Consume the rest of the buffer."""
        chunk = self._data[self._pos :]
        self._pos = len(self._data)
        return chunk


class _Parser:
    """Single-use parser holding the cursor for one input."""

    def __init__(self: Self, data: bytes) -> None:
        self._cursor = _Cursor(data)

    def parse(self: Self) -> UserAgentFields:
        executable = decode_optional(
            self._read_text(UserAgentField.EXECUTABLE, b"/"), str
        )

        app_version = self._decode(
            UserAgentField.APP_VERSION,
            self._read_text(UserAgentField.APP_VERSION, b" "),
            lambda text: decode_optional(text, Version.parse),
        )
        self._expect(b"(", after=UserAgentField.APP_VERSION)

        bundle = decode_optional(self._read_text(UserAgentField.BUNDLE, b";"), str)
        self._expect(b" build:", after=UserAgentField.BUNDLE)

        app_build = self._decode(
            UserAgentField.APP_BUILD,
            self._read_text(UserAgentField.APP_BUILD, b";"),
            AppBuild.parse,
        )
        self._expect(b" ", after=UserAgentField.APP_BUILD)

        os_name = self._decode(
            UserAgentField.OS_NAME,
            self._read_text(UserAgentField.OS_NAME, b" "),
            OsName.parse,
        )

        os_version = self._decode(
            UserAgentField.OS_VERSION,
            self._read_text(UserAgentField.OS_VERSION, b")"),
            Version.parse,
        )
        self._expect(LIBRARY_MARKER, after=UserAgentField.OS_VERSION)

        library_version = self._decode(
            UserAgentField.LIBRARY_VERSION,
            self._read_last_line(),
            Version.parse,
        )

        return {
            "executable": executable,
            "app_version": app_version,
            "bundle": bundle,
            "app_build": app_build,
            "os_name": os_name,
            "os_version": os_version,
            "library_version": library_version,
        }

    def _read_text(self: Self, field: UserAgentField, delimiter: bytes) -> str:
        chunk = self._cursor.read_until(delimiter)
        if chunk is None:
            raise FieldReadError(
                field, f"delimiter {delimiter.decode()!r} not found"
            )
        return self._to_text(field, chunk)

    def _read_last_line(self: Self) -> str:
        rest = self._cursor.read_to_end()
        newline = rest.find(b"\n")
        if newline != -1:
            if rest[newline + 1 :]:
                raise StructuralMismatchError(
                    UserAgentField.LIBRARY_VERSION,
                    "unexpected data after line terminator",
                )
            rest = rest[:newline].removesuffix(b"\r")
        return self._to_text(UserAgentField.LIBRARY_VERSION, rest)

    def _expect(self: Self, literal: bytes, *, after: UserAgentField) -> None:
        if not self._cursor.expect(literal):
            raise StructuralMismatchError(after, f"expected {literal.decode()!r}")

    @staticmethod
    def _to_text(field: UserAgentField, chunk: bytes) -> str:
        try:
            return chunk.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FieldParseError(field, str(e)) from e

    @staticmethod
    def _decode(field: UserAgentField, text: str, decoder: Callable[[str], T]) -> T:
        try:
            return decoder(text)
        except ValueError as e:
            raise FieldParseError(field, str(e)) from e


def parse_fields(data: str | bytes) -> UserAgentFields:
    """Parse a User-Agent string into its field values.

    Fields are read strictly in order and parsing stops at the first
    failure.

    Args:
        data: User-Agent text, or its UTF-8 encoded bytes. A single
            trailing line terminator is allowed.

    Returns:
        Mapping of UserAgent field names to decoded values.

    Raises:
        FieldReadError: If a field's closing delimiter is missing.
        FieldParseError: If a field's content cannot be decoded.
        StructuralMismatchError: If a fixed literal is missing.
    """
    # Surrogates pass through encoding and fail decoding within their field.
    raw = data.encode("utf-8", "surrogatepass") if isinstance(data, str) else data
    try:
        return _Parser(raw).parse()
    except UserAgentParseError as e:
        logger.debug(
            "Failed to parse User-Agent",
            extra={"field": e.field.value, "stage": e.stage.value, "detail": e.detail},
        )
        raise
