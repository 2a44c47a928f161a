"""Exceptions raised by alamofire_ua."""

from enum import Enum
from typing import Self


class UserAgentField(str, Enum):
    """Fields of the User-Agent grammar, in parse order."""

    EXECUTABLE = "executable"
    APP_VERSION = "app_version"
    BUNDLE = "bundle"
    APP_BUILD = "app_build"
    OS_NAME = "os_name"
    OS_VERSION = "os_version"
    LIBRARY_VERSION = "library_version"


class ParseStage(str, Enum):
    """Stage of the parser at which a failure happened."""

    READ = "read"
    PARSE = "parse"
    MISMATCH = "mismatch"


class UserAgentError(Exception):
    """Base exception for all alamofire_ua errors."""


class InvalidVersionError(UserAgentError, ValueError):
    """Raised when a semantic version string is malformed."""

    def __init__(self: Self, version: str, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            version: The rejected version string.
            message: Optional custom message.
        """
        self.version = version
        super().__init__(message or f"Invalid version format: {version!r}")


class InvalidAppBuildError(UserAgentError, ValueError):
    """Raised when an app build number is malformed."""


class InvalidOsNameError(UserAgentError, ValueError):
    """Raised when text is not one of the known OS names."""


class UserAgentParseError(UserAgentError, ValueError):
    """Raised when a User-Agent string cannot be parsed.

    Attributes:
        field: The field being read when parsing failed. For structural
            mismatches, the field after which the fixed literal was expected.
        stage: Whether the failure was a boundary search, content decoding,
            or a missing literal.
        detail: The underlying message.
    """

    stage: ParseStage

    def __init__(self: Self, field: UserAgentField, detail: str) -> None:
        """Initialize the error.

        Args:
            field: Field that failed.
            detail: Underlying error message.
        """
        self.field = field
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self: Self) -> str:
        return f"Failed to {self.stage.value} {self.field.value}: {self.detail}"


class FieldReadError(UserAgentParseError):
    """The delimiter ending a field was not found before the input ran out."""

    stage = ParseStage.READ


class FieldParseError(UserAgentParseError):
    """A field was extracted but its content could not be decoded."""

    stage = ParseStage.PARSE


class StructuralMismatchError(UserAgentParseError):
    """A fixed literal expected after a field was not present."""

    stage = ParseStage.MISMATCH

    def _format_message(self: Self) -> str:
        return f"Mismatch after {self.field.value}: {self.detail}"
