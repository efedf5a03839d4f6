#!/usr/bin/env python3
"""
BuildStamp Exception Classes
"""


class BuildStampError(Exception):
    """Base exception for buildstamp errors"""
    pass


class InvalidArgumentError(BuildStampError, ValueError):
    """Raised when a caller supplies an unusable argument"""
    pass


class InvalidStrategyError(InvalidArgumentError):
    """Raised when a numbering strategy name or value is not recognized"""

    def __init__(self, enum_name: str, value):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid value {value!r} for enum {enum_name}")


class ReferenceDateError(InvalidArgumentError):
    """Raised when the reference date is later than the current date"""
    pass


class VersionFormatError(InvalidArgumentError):
    """Raised when version text cannot be parsed"""
    pass


class MissingVersionFileError(InvalidArgumentError):
    """Raised when a version file is required but no path was given"""
    pass


class UnsupportedLanguageError(InvalidArgumentError):
    """Raised when no emitter exists for the requested language"""
    pass


class AttributeAlreadyAddedError(BuildStampError):
    """Raised when an assembly attribute is added twice to one builder"""
    pass
