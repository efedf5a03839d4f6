#!/usr/bin/env python3
"""
Versioning
==========

Four-part version number generation with pluggable build and revision
numbering strategies.

Features:
- Fixed and incrementing build/revision numbers persisted in a version file
- Calendar based build numbers (YearMonthDay, MonthDay, BuildDay)
- Clock based revision numbers (HourMinute, DaySecond, DayFraction)
- Revision reset when the build number changes (BuildIncrement)
- Overflow correction keeping build and revision within 0-65535

Usage:
    from buildstamp.versioning import VersionEngine, BuildStrategy, RevisionStrategy

    engine = VersionEngine(BuildStrategy.INCREMENT, RevisionStrategy.BUILD_INCREMENT,
                           version_file='version.txt')
    version = engine.generate()
"""

from .strategies import BuildStrategy, RevisionStrategy
from .version import Version, MAX_COMPONENT
from .dates import years_since, months_since, days_since, parse_date
from .store import VersionStore
from .generator import (
    VersionEngine,
    calculate_build_number,
    calculate_revision_number,
    correct_overflow,
    generate_version,
    generate_version_from,
    generate_version_with_file,
)

__all__ = [
    'BuildStrategy',
    'RevisionStrategy',
    'Version',
    'MAX_COMPONENT',
    'years_since',
    'months_since',
    'days_since',
    'parse_date',
    'VersionStore',
    'VersionEngine',
    'calculate_build_number',
    'calculate_revision_number',
    'correct_overflow',
    'generate_version',
    'generate_version_from',
    'generate_version_with_file',
]
