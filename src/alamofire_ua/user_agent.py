"""The Alamofire default User-Agent descriptor."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ._parser import parse_fields
from ._sentinel import encode_optional
from .app_build import AppBuild
from .constants import (
    DEFAULT_LIBRARY_VERSION,
    DEFAULT_OS_VERSION,
    LIBRARY_NAME,
    UNKNOWN,
    USER_AGENT_HEADER,
)
from .os_name import OsName
from .version import Version


class UserAgent(BaseModel):
    """Fields of an Alamofire default User-Agent string.

    The wire format is::

        <executable>/<app_version> (<bundle>; build:<app_build>;
            <os_name> <os_version>) Alamofire/<library_version>

    on a single line. Optional fields are None when the string carries
    "Unknown" in their position. Instances are immutable.

    Attributes:
        executable: Application display name.
        app_version: Application version.
        bundle: Bundle or package identifier.
        app_build: Application build number.
        os_name: Operating system.
        os_version: Operating system version.
        library_version: Alamofire version.

    Example:
        >>> ua = UserAgent.parse(
        ...     "App/1.0.0 (com.example.app; build:3; iOS 17.1.0) Alamofire/5.8.0"
        ... )
        >>> ua.os_name
        <OsName.IOS: 'iOS'>
        >>> str(ua.app_build)
        '3'
    """

    model_config = ConfigDict(frozen=True)

    executable: str | None = None
    app_version: Version | None = None
    bundle: str | None = None
    app_build: AppBuild | None = None
    os_name: OsName | None = None
    os_version: Version = Field(
        default_factory=lambda: Version.parse(DEFAULT_OS_VERSION)
    )
    library_version: Version = Field(
        default_factory=lambda: Version.parse(DEFAULT_LIBRARY_VERSION)
    )

    @field_validator("executable", "bundle")
    @classmethod
    def reject_sentinel(cls, value: str | None) -> str | None:
        """Reject the sentinel as a literal field value."""
        if value == UNKNOWN:
            raise ValueError(f"{UNKNOWN!r} is reserved for absent values, use None")
        return value

    @field_validator("app_version", "os_version", "library_version", mode="before")
    @classmethod
    def parse_version_text(cls, value: Any) -> Any:
        """Decode version strings."""
        if isinstance(value, str):
            return Version.parse(value)
        return value

    @field_validator("app_build", mode="before")
    @classmethod
    def parse_app_build_text(cls, value: Any) -> Any:
        """Decode build number strings."""
        if isinstance(value, str):
            if value == UNKNOWN:
                raise ValueError(
                    f"{UNKNOWN!r} is reserved for absent values, use None"
                )
            return AppBuild.parse(value)
        return value

    @field_serializer("app_version", "app_build", "os_version", "library_version")
    def serialize_as_text(self: Self, value: Version | AppBuild | None) -> str | None:
        """Serialize versions in their wire form."""
        return None if value is None else str(value)

    @classmethod
    def parse(cls, data: str | bytes) -> Self:
        """Parse a User-Agent string.

        Args:
            data: User-Agent text, or its UTF-8 encoded bytes. A single
                trailing line terminator is allowed.

        Returns:
            New UserAgent instance.

        Raises:
            FieldReadError: If a field's closing delimiter is missing.
            FieldParseError: If a field's content cannot be decoded.
            StructuralMismatchError: If a fixed literal is missing.
        """
        return cls(**parse_fields(data))

    def format(self: Self) -> str:
        """Render the canonical User-Agent string.

        Absent optional fields render as "Unknown".

        Returns:
            User-Agent header value.
        """
        return (
            f"{encode_optional(self.executable)}/{encode_optional(self.app_version)}"
            f" ({encode_optional(self.bundle)};"
            f" build:{encode_optional(self.app_build)};"
            f" {encode_optional(self.os_name)} {self.os_version})"
            f" {LIBRARY_NAME}/{self.library_version}"
        )

    def to_header(self: Self) -> dict[str, str]:
        """Return the User-Agent as a request header mapping."""
        return {USER_AGENT_HEADER: self.format()}

    def __str__(self: Self) -> str:
        """Return the canonical User-Agent string."""
        return self.format()
