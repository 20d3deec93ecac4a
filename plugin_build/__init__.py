"""
Plugin Build

Build helper for a plugin package: resets the output directory, copies the
plugin assets into it and installs the native binary with cargo.
"""

from .builder import Builder
from .platforms import current_platform

__all__ = ["Builder", "current_platform"]
__version__ = "0.1.0"
