"""Grammar literals and default values."""

from typing import Final

UNKNOWN: Final = "Unknown"

LIBRARY_NAME: Final = "Alamofire"
USER_AGENT_HEADER: Final = "User-Agent"

DEFAULT_OS_VERSION: Final = "0.0.0"
# Alamofire release whose HTTPHeaders.swift defines this format.
DEFAULT_LIBRARY_VERSION: Final = "5.6.4"
