#!/usr/bin/env python3
"""
Plugin Build Script

Builds the plugin package: clears the output directory, copies the assets
into it and installs the native binary for the given target.

Usage:
    python build.py <out_dir> <target>
"""

from plugin_build.cli import main

if __name__ == "__main__":
    main()
