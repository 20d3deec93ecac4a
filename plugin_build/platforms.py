"""Operating system names used for the per-platform install folders."""

import sys
from typing import Optional

# sys.platform prefix -> folder name used by the plugin host
_PLATFORM_NAMES = (
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("darwin", "darwin"),
    ("android", "android"),
    ("linux", "linux"),
    ("freebsd", "freebsd"),
    ("netbsd", "netbsd"),
    ("openbsd", "openbsd"),
    ("aix", "aix"),
    ("sunos", "solaris"),
)


def current_platform(platform: Optional[str] = None) -> str:
    """Return the name of the running operating system.

    ``platform`` defaults to ``sys.platform``. Unknown values are returned as is.
    """
    platform = platform or sys.platform
    for prefix, name in _PLATFORM_NAMES:
        if platform.startswith(prefix):
            return name
    return platform
