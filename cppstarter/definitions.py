# cppstarter/definitions.py
"""
Shared constants for cppstarter.

This module centralizes:
- Project defaults and offered choices (`DEFAULT_*`, `*_CHOICES`)
- Required and optional external tools (`REQUIRED_TOOLS`, `TOOL_DESCRIPTIONS`)
- Minimum tool versions for `check-tools` (`MIN_TOOL_VERSIONS`)
- Pinned third-party repositories fetched by generated projects
- Build directory layout consumed by the project commands
- Environment variable names read at startup

Environment variables
---------------------
CPPSTARTER_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    Log level for diagnostic logging (default WARNING).
CPPSTARTER_FORCE_COLOR=true|false
    Force colored log output even when stderr is not a TTY.
CPPSTARTER_HEADLESS=1
    Never prompt: accept defaults for every value not given on the command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Tuple

__all__ = [
    "DEFAULT_CPP_STANDARD",
    "CPP_STANDARD_CHOICES",
    "DEFAULT_MIN_CMAKE_VERSION",
    "DEFAULT_LICENSE",
    "LICENSE_CHOICES",
    "DEFAULT_GENERATOR",
    "DEFAULT_BUILD_TYPE",
    "BUILD_TYPE_CHOICES",
    "DEFAULT_IDENTITY",
    "REPO_URL_TEMPLATE",
    "REQUIRED_TOOLS",
    "OPTIONAL_TOOLS",
    "TOOL_DESCRIPTIONS",
    "MIN_TOOL_VERSIONS",
    "GOOGLETEST_REPOSITORY",
    "GOOGLETEST_COMMIT",
    "FMT_REPOSITORY",
    "FMT_COMMIT",
    "APACHE_LICENSE_URL",
    "LICENSE_FETCH_TIMEOUT",
    "PROJECT_MARKER",
    "BUILD_DIR",
    "CACHE_MARKER",
    "is_headless",
]

# -----------------------------------------------------------------------------
# Project defaults
# -----------------------------------------------------------------------------
DEFAULT_CPP_STANDARD = "20"
CPP_STANDARD_CHOICES: List[str] = ["14", "17", "20", "23"]

DEFAULT_MIN_CMAKE_VERSION = "3.25"

DEFAULT_LICENSE = "MIT"
LICENSE_CHOICES: List[str] = ["MIT", "Apache-2.0", "BSD-3-Clause"]

DEFAULT_GENERATOR = "Ninja"
DEFAULT_BUILD_TYPE = "Release"
BUILD_TYPE_CHOICES: List[str] = ["Debug", "Release"]

# Used for the default repository URL when git has no user.name configured.
DEFAULT_IDENTITY = "your-username"
REPO_URL_TEMPLATE = "https://github.com/{identity}/{name}"

# -----------------------------------------------------------------------------
# External tools
# -----------------------------------------------------------------------------
REQUIRED_TOOLS: Tuple[str, ...] = ("git", "cmake")

OPTIONAL_TOOLS: Tuple[str, ...] = (
    "ctest",
    "ninja",
    "clang-format",
    "clang-tidy",
    "cppcheck",
)

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "git": "Version control, used to initialize the new repository.",
    "cmake": "Build system generator, drives config/build/install.",
    "ctest": "CMake test driver, used by `cppstarter test`.",
    "ninja": "Default CMake generator backend.",
    "clang-format": "Source formatter, reads the generated .clang-format.",
    "clang-tidy": "Linter, enabled by the static analysis option.",
    "cppcheck": "Static analyzer, enabled by the static analysis option.",
}

MIN_TOOL_VERSIONS: Dict[str, str] = {
    "git": "2.28",
    "cmake": DEFAULT_MIN_CMAKE_VERSION,
    "ctest": DEFAULT_MIN_CMAKE_VERSION,
    "ninja": "1.10",
    "clang-format": "14.0",
    "clang-tidy": "14.0",
    "cppcheck": "2.7",
}

# -----------------------------------------------------------------------------
# Pinned dependencies of generated projects
# -----------------------------------------------------------------------------
GOOGLETEST_REPOSITORY = "https://github.com/google/googletest.git"
GOOGLETEST_COMMIT = "f8d7d77c06936315286eb55f8de22cd23c188571"  # v1.14.0

FMT_REPOSITORY = "https://github.com/fmtlib/fmt.git"
FMT_COMMIT = "e69e5f977d458f2650bb346dadf2ad30c5320281"  # 10.2.1

APACHE_LICENSE_URL = "https://www.apache.org/licenses/LICENSE-2.0.txt"
LICENSE_FETCH_TIMEOUT = 30

# -----------------------------------------------------------------------------
# Project layout consumed by config/build/test/install
# -----------------------------------------------------------------------------
PROJECT_MARKER = Path("CMakeLists.txt")
BUILD_DIR = Path("build")
CACHE_MARKER = BUILD_DIR / "CMakeCache.txt"


def is_headless() -> bool:
    """Return True when prompts are disabled through ``CPPSTARTER_HEADLESS``."""
    return os.environ.get("CPPSTARTER_HEADLESS", "").strip().lower() in {"1", "true", "yes", "on"}
