#!/usr/bin/env python3
"""
Plugin Build Setup Script

Setup script for installing the plugin build helper.
"""

from pathlib import Path

try:
    from setuptools import setup, find_packages
except ImportError as exc:
    raise ImportError(
        "setuptools is required to install plugin-build. "
        "Please install it with: pip install setuptools"
    ) from exc

# Read the README
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Core dependencies
install_requires = [
    "psutil>=5.8.0",
    "tqdm>=4.62.0",
]

setup(
    name="plugin-build",
    version="0.1.0",
    description="Build helper for plugin packages with a native cargo binary",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Build Tools",
    ],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "plugin-build=plugin_build.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
