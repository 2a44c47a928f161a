"""Type aliases needed in the package."""

from typing import Any, TypeAlias

from .app_build import AppBuild
from .version import Version

VersionLike: TypeAlias = str | Version
AppBuildLike: TypeAlias = str | AppBuild

UserAgentFields: TypeAlias = dict[str, Any]
