"""
Host operating system detection
Predicates take an explicit platform identifier so tests can pass any value.
"""

import re
import sys
from enum import Enum
from typing import Optional

from helpers.exceptions import UnsupportedPlatformError

_WINDOWS_PATTERN = re.compile(r"cygwin|mswin|mingw|bccwin|wince|emx|win32")
_LINUX_PATTERN = re.compile(r"linux")
_MAC_PATTERN = re.compile(r"darwin")


class Platform(str, Enum):
    """Operating system families with published wallet binaries"""

    LINUX = "linux"
    MACOS = "macos"
    WIN = "win"


def current_platform_id() -> str:
    """Platform identifier of the running interpreter (e.g. 'linux', 'darwin', 'win32')"""
    return sys.platform


def _resolve(platform_id: Optional[str]) -> str:
    return (current_platform_id() if platform_id is None else platform_id).lower()


def is_win(platform_id: Optional[str] = None) -> bool:
    return _WINDOWS_PATTERN.search(_resolve(platform_id)) is not None


def is_linux(platform_id: Optional[str] = None) -> bool:
    return _LINUX_PATTERN.search(_resolve(platform_id)) is not None


def is_mac(platform_id: Optional[str] = None) -> bool:
    return _MAC_PATTERN.search(_resolve(platform_id)) is not None


def detect_platform(platform_id: Optional[str] = None) -> Platform:
    """
    Map a platform identifier to a Platform.
    Windows takes precedence over macOS, macOS over linux.
    """
    resolved = _resolve(platform_id)
    if is_win(resolved):
        return Platform.WIN
    if is_mac(resolved):
        return Platform.MACOS
    if is_linux(resolved):
        return Platform.LINUX
    raise UnsupportedPlatformError(resolved)
