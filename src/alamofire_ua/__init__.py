"""alamofire_ua - parse and format Alamofire default User-Agent strings.

A package for decoding the User-Agent header sent by Alamofire clients into
typed fields, and for rendering such fields back into the canonical header.
"""

from ._version import __version__
from .app_build import AppBuild
from .constants import UNKNOWN
from .exceptions import (
    FieldParseError,
    FieldReadError,
    InvalidAppBuildError,
    InvalidOsNameError,
    InvalidVersionError,
    ParseStage,
    StructuralMismatchError,
    UserAgentError,
    UserAgentField,
    UserAgentParseError,
)
from .host import default_user_agent, detect_os_name, detect_os_version
from .os_name import OsName
from .user_agent import UserAgent
from .version import Version

__all__ = [
    "UNKNOWN",
    "AppBuild",
    "FieldParseError",
    "FieldReadError",
    "InvalidAppBuildError",
    "InvalidOsNameError",
    "InvalidVersionError",
    "OsName",
    "ParseStage",
    "StructuralMismatchError",
    "UserAgent",
    "UserAgentError",
    "UserAgentField",
    "UserAgentParseError",
    "Version",
    "__version__",
    "default_user_agent",
    "detect_os_name",
    "detect_os_version",
]
