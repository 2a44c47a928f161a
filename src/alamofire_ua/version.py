"""Semantic version values embedded in User-Agent strings."""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Self

from .exceptions import InvalidVersionError

_NUMERIC = r"0|[1-9]\d*"
_ALNUM = r"\d*[a-zA-Z-][0-9a-zA-Z-]*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|{_ALNUM})"
_BUILD_ID = r"[0-9a-zA-Z-]+"

_SEMVER_RE = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)
_PRERELEASE_ID_RE = re.compile(_PRERELEASE_ID, re.ASCII)
_BUILD_ID_RE = re.compile(_BUILD_ID, re.ASCII)
_LEADING_NUMBERS_RE =re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?", re.ASCII)


@total_ordering
@dataclass(frozen=True)
class Version:
    """Semantic version representation (SemVer 2.0.0).

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Dot-separated pre-release identifiers, if any.
        build: Dot-separated build metadata identifiers, if any.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self: Self) -> None:
        """Check the fields form a valid semantic version.

        Raises:
            InvalidVersionError: If a component is not a non-negative integer
                or an identifier is malformed.
        """
        for component in (self.major, self.minor, self.patch):
            if (
                isinstance(component, bool)
                or not isinstance(component, int)
                or component < 0
            ):
                raise InvalidVersionError(
                    str(component), f"Invalid version component: {component!r}"
                )
        if not isinstance(self.prerelease, tuple) or not isinstance(self.build, tuple):
            raise InvalidVersionError(
                str(self.prerelease), "Identifiers must be tuples of strings"
            )
        for ident in self.prerelease:
            if not isinstance(ident, str) or not _PRERELEASE_ID_RE.fullmatch(ident):
                raise InvalidVersionError(
                    str(ident), f"Invalid pre-release identifier: {ident!r}"
                )
        for ident in self.build:
            if not isinstance(ident, str) or not _BUILD_ID_RE.fullmatch(ident):
                raise InvalidVersionError(
                    str(ident), f"Invalid build identifier: {ident!r}"
                )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a semantic version string.

        Args:
            version_str: Version string in format
                "major.minor.patch[-prerelease][+build]".

        Returns:
            Parsed Version instance.

        Raises:
            InvalidVersionError: If version string format is invalid.
        """
        match = _SEMVER_RE.fullmatch(version_str)
        if match is None:
            raise InvalidVersionError(version_str)

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("patch")),
            tuple(prerelease.split(".")) if prerelease else (),
            tuple(build.split(".")) if build else (),
        )

    @classmethod
    def coerce(cls, text: str) -> Self:
        """Extract a release version from free-form text.

        Takes the first run of up to three dot-separated numbers, padding
        missing components with zero. Used for OS release strings such as
        "6.8.0-45-generic" or "10.0.19045".

        Args:
            text: Text containing a version somewhere.

        Returns:
            Version with no pre-release or build metadata.

        Raises:
            InvalidVersionError: If the text contains no digits.
        """
        match = _LEADING_NUMBERS_RE.search(text)
        if match is None:
            raise InvalidVersionError(text, f"No version found in {text!r}")
        major, minor, patch = (int(part) if part else 0 for part in match.groups())
        return cls(major, minor, patch)

    @property
    def is_release(self: Self) -> bool:
        """Whether the version carries neither pre-release nor build metadata."""
        return not self.prerelease and not self.build

    def _precedence_key(self: Self) -> tuple[int, int, int, int, tuple]:
        # A release sorts after all of its pre-releases. Numeric identifiers
        # sort before alphanumeric ones.
        ids = tuple(
            (0, int(ident), "") if ident.isdigit() else (1, 0, ident)
            for ident in self.prerelease
        )
        return (self.major, self.minor, self.patch, 0 if ids else 1, ids)

    def __lt__(self: Self, other: object) -> bool:
        """Compare by SemVer precedence, ignoring build metadata."""
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch[-prerelease][+build]".
        """
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({str(self)!r})"
