"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from alamofire_ua import AppBuild, OsName, UserAgent, Version
from alamofire_ua.host import detect_os_name, detect_os_version

CANONICAL = (
    "iOS Example/1.0.0 (org.alamofire.iOS-Example; build:1; iOS 13.0.0) "
    "Alamofire/5.0.0"
)
ALL_UNKNOWN = "Unknown/Unknown (Unknown; build:Unknown; Unknown 13.0.0) Alamofire/5.0.0"


@pytest.fixture
def canonical_string() -> str:
    """A fully populated User-Agent string."""
    return CANONICAL


@pytest.fixture
def canonical_user_agent() -> UserAgent:
    """The descriptor matching canonical_string."""
    return UserAgent(
        executable="iOS Example",
        app_version=Version(1, 0, 0),
        bundle="org.alamofire.iOS-Example",
        app_build=AppBuild(1, 0, 0),
        os_name=OsName.IOS,
        os_version=Version(13, 0, 0),
        library_version=Version(5, 0, 0),
    )


@pytest.fixture
def all_unknown_string() -> str:
    """A User-Agent string with every optional field absent."""
    return ALL_UNKNOWN


@pytest.fixture(autouse=True)
def _clear_host_caches() -> Iterator[None]:
    detect_os_name.cache_clear()
    detect_os_version.cache_clear()
    yield
    detect_os_name.cache_clear()
    detect_os_version.cache_clear()
