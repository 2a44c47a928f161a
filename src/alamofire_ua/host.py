"""Build User-Agent descriptors for the running process.

This module fills the operating system fields of a UserAgent from the host
platform, so HTTP clients can send the same header an Alamofire client on
that platform would send.
"""

import logging
import platform
import sys
from functools import cache
from pathlib import Path

from .constants import DEFAULT_LIBRARY_VERSION, DEFAULT_OS_VERSION, UNKNOWN
from .exceptions import InvalidVersionError
from .os_name import OsName
from .types import AppBuildLike, VersionLike
from .user_agent import UserAgent
from .version import Version

logger = logging.getLogger(__name__)

_SYSTEM_OS_NAMES: dict[str, OsName] = {
    "Darwin": OsName.MACOS,
    "iOS": OsName.IOS,
    "iPadOS": OsName.IOS,
    "Linux": OsName.LINUX,
    "Windows": OsName.WINDOWS,
}


@cache
def detect_os_name() -> OsName | None:
    """Map the host platform to an OS name.

    Returns:
        The matching OsName, or None if the platform has no counterpart.
    """
    system = platform.system()
    os_name = _SYSTEM_OS_NAMES.get(system)
    logger.debug("Detected OS name", extra={"system": system, "os_name": os_name})
    return os_name


@cache
def detect_os_version() -> Version:
    """Read the host OS version.

    Falls back to 0.0.0 when the platform reports no usable version.

    Returns:
        Release version of the host OS.
    """
    system = platform.system()
    if system == "Darwin":
        release = platform.mac_ver()[0]
    elif system == "Windows":
        release = platform.version()
    else:
        release = platform.release()

    try:
        version = Version.coerce(release)
    except InvalidVersionError:
        logger.warning(
            "Could not determine OS version, using default",
            extra={"release": release, "default": DEFAULT_OS_VERSION},
        )
        return Version.parse(DEFAULT_OS_VERSION)

    logger.debug(
        "Detected OS version", extra={"release": release, "version": str(version)}
    )
    return version


def _default_executable() -> str | None:
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name == UNKNOWN:
        return None
    return name


def default_user_agent(
    executable: str | None = None,
    app_version: VersionLike | None = None,
    bundle: str | None = None,
    app_build: AppBuildLike | None = None,
    library_version: VersionLike = DEFAULT_LIBRARY_VERSION,
) -> UserAgent:
    """Build the User-Agent for the running process.

    Args:
        executable: Application name. Defaults to the script name.
        app_version: Application version.
        bundle: Bundle or package identifier.
        app_build: Build number.
        library_version: Alamofire version to advertise.

    Returns:
        UserAgent with OS fields detected from the host.

    Example:
        >>> ua = default_user_agent("Sync", "2.1.0", "com.example.sync", "42")
        >>> ua.to_header()["User-Agent"]  # doctest: +SKIP
        'Sync/2.1.0 (com.example.sync; build:42; Linux 6.8.0) Alamofire/5.6.4'
    """
    user_agent = UserAgent(
        executable=executable if executable is not None else _default_executable(),
        app_version=app_version,
        bundle=bundle,
        app_build=app_build,
        os_name=detect_os_name(),
        os_version=detect_os_version(),
        library_version=library_version,
    )
    logger.debug("Built User-Agent string", extra={"user_agent": str(user_agent)})
    return user_agent
