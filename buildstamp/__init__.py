#!/usr/bin/env python3
"""
BuildStamp Package
==================

Build metadata generation for compiled projects.

Available subpackages:
- versioning: Build and revision number generation with version file persistence
- emitters: Assembly information source files for C# and Visual Basic
"""

from .exceptions import (
    BuildStampError,
    InvalidArgumentError,
    InvalidStrategyError,
    ReferenceDateError,
    VersionFormatError,
    MissingVersionFileError,
    UnsupportedLanguageError,
    AttributeAlreadyAddedError,
)
from .versioning import (
    BuildStrategy,
    RevisionStrategy,
    Version,
    VersionEngine,
    VersionStore,
    generate_version,
)
from .emitters import AssemblyInfoBuilder, get_emitter

__all__ = [
    'BuildStampError',
    'InvalidArgumentError',
    'InvalidStrategyError',
    'ReferenceDateError',
    'VersionFormatError',
    'MissingVersionFileError',
    'UnsupportedLanguageError',
    'AttributeAlreadyAddedError',
    'BuildStrategy',
    'RevisionStrategy',
    'Version',
    'VersionEngine',
    'VersionStore',
    'generate_version',
    'AssemblyInfoBuilder',
    'get_emitter',
]

__version__ = "1.0.0"
__author__ = "BuildStamp Team"
