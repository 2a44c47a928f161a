"""Tests for version.py."""

import pytest

from alamofire_ua import InvalidVersionError, Version


def test_parse_release() -> None:
    """Test parsing a plain major.minor.patch version."""
    assert Version.parse("1.2.3") == Version(1, 2, 3)


def test_parse_prerelease_and_build() -> None:
    """Test parsing pre-release and build metadata."""
    version = Version.parse("1.0.0-alpha.1+build.5")

    assert version == Version(1, 0, 0, ("alpha", "1"), ("build", "5"))
    assert str(version) == "1.0.0-alpha.1+build.5"
    assert not version.is_release


@pytest.mark.parametrize(
    "text",
    [
        "1.2",
        "1.2.3.4",
        "01.2.3",
        "v1.2.3",
        "",
        " 1.2.3",
        "1.2.3 ",
        "1.2.3-",
        "1.2.3-01",
        "1.2.3+",
    ],
)
def test_parse_invalid(text: str) -> None:
    """Test that malformed versions are rejected."""
    with pytest.raises(InvalidVersionError, match="Invalid version format"):
        Version.parse(text)


def test_invalid_version_error_is_value_error() -> None:
    """Test that version errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        Version.parse("Unknown")


def test_str_and_repr() -> None:
    """Test string representations."""
    version = Version(13, 0, 0)

    assert str(version) == "13.0.0"
    assert repr(version) == "Version('13.0.0')"


def test_precedence_ordering() -> None:
    """Test ordering follows semantic version precedence."""
    ordered = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
        "1.0.1",
        "1.2.0",
        "2.0.0",
    ]
    versions = [Version.parse(text) for text in ordered]

    assert sorted(reversed(versions)) == versions
    assert Version(5, 6, 4) > Version(5, 0, 0)


def test_versions_are_hashable() -> None:
    """Test versions can be used in sets and as dict keys."""
    assert len({Version.parse("1.0.0"), Version(1, 0, 0)}) == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("6.8.0-45-generic", Version(6, 8, 0)),
        ("6.18.44-fc-v139", Version(6, 18, 44)),
        ("10.0.19045", Version(10, 0, 19045)),
        ("14", Version(14, 0, 0)),
        ("14.4", Version(14, 4, 0)),
    ],
)
def test_coerce(text: str, expected: Version) -> None:
    """Test extracting a release version from OS release strings."""
    assert Version.coerce(text) == expected


def test_coerce_without_digits() -> None:
    """Test coercing text with no version in it."""
    with pytest.raises(InvalidVersionError, match="No version found"):
        Version.coerce("rolling")


@pytest.mark.parametrize(
    "components",
    [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (1.0, 0, 0), ("1", 0, 0), (False, 0, 0)],
)
def test_construction_rejects_invalid_components(
    components: tuple[object, object, object],
) -> None:
    """Test components must be non-negative integers."""
    with pytest.raises(InvalidVersionError, match="Invalid version component"):
        Version(*components)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("prerelease", "build", "message"),
    [
        (("01",), (), "Invalid pre-release identifier"),
        (("",), (), "Invalid pre-release identifier"),
        (("rc.1",), (), "Invalid pre-release identifier"),
        (("béta",), (), "Invalid pre-release identifier"),
        ((), ("",), "Invalid build identifier"),
        ((), ("sha+1",), "Invalid build identifier"),
        ((), (" x",), "Invalid build identifier"),
        ("rc", (), "Identifiers must be tuples"),
    ],
)
def test_construction_rejects_invalid_identifiers(
    prerelease: tuple[str, ...], build: tuple[str, ...], message: str
) -> None:
    """Test identifiers must follow the semantic version grammar."""
    with pytest.raises(InvalidVersionError, match=message):
        Version(1, 0, 0, prerelease, build)


def test_constructed_version_round_trips() -> None:
    """Test any constructible version renders as parseable text."""
    version = Version(1, 2, 3, ("rc", "0", "x-1"), ("001", "sha"))

    assert Version.parse(str(version)) == version
