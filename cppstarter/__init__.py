"""
cppstarter: C++/CMake project scaffolding CLI

Creates new projects and wraps CMake configure, build, test and install.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .cli import cli

__all__ = ["cli"]
