"""Variable-precision build numbers."""

from dataclasses import dataclass
from typing import Self

from ._sentinel import decode_optional
from .exceptions import InvalidAppBuildError, InvalidVersionError
from .version import Version

_MAX_SEGMENTS = 3


@dataclass(frozen=True)
class AppBuild:
    """Application build number of one to three integer components.

    Parsing accepts "1", "1.2" or "1.2.3", padding missing components with
    zero. Rendering drops trailing zero components, so "1.0.0" formats as
    "1" and "1.2.0" as "1.2".

    Attributes:
        major: First build component.
        minor: Second build component.
        patch: Third build component.
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self: Self) -> None:
        """Check every component is a non-negative integer."""
        for component in (self.major, self.minor, self.patch):
            if (
                isinstance(component, bool)
                or not isinstance(component, int)
                or component < 0
            ):
                raise InvalidAppBuildError(
                    f"Invalid build number component: {component!r}"
                )

    @classmethod
    def parse(cls, text: str) -> Self | None:
        """Parse build number text.

        Args:
            text: Build number, or "Unknown".

        Returns:
            Parsed AppBuild, or None for "Unknown".

        Raises:
            InvalidAppBuildError: If the text has the wrong number of
                segments or a segment is not a non-negative integer.
        """
        return decode_optional(text, cls._parse_known)

    @classmethod
    def _parse_known(cls, text: str) -> Self:
        segments = text.split(".")
        if len(segments) > _MAX_SEGMENTS:
            raise InvalidAppBuildError(f"Invalid build number: {text!r}")

        padded = ".".join(segments + ["0"] * (_MAX_SEGMENTS - len(segments)))
        try:
            version = Version.parse(padded)
        except InvalidVersionError as e:
            raise InvalidAppBuildError(f"Invalid build number: {text!r}") from e

        return cls.from_version(version)

    @classmethod
    def from_version(cls, version: Version) -> Self:
        """Build an AppBuild from a release version.

        Raises:
            InvalidAppBuildError: If the version has pre-release or build
                metadata.
        """
        if not version.is_release:
            raise InvalidAppBuildError(
                f"Invalid build number: {str(version)!r}"
                " (components must be integers)"
            )
        return cls(version.major, version.minor, version.patch)

    @property
    def version(self: Self) -> Version:
        """The zero-padded three-component version."""
        return Version(self.major, self.minor, self.patch)

    def __str__(self: Self) -> str:
        """Return the shortest rendering without trailing zero components."""
        if self.minor == 0 and self.patch == 0:
            return f"{self.major}"
        if self.patch == 0:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"
