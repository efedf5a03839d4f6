"""
Four-part version numbers (major.minor.build.revision).
"""

from dataclasses import dataclass, replace

from ..exceptions import InvalidArgumentError, VersionFormatError

# Build and revision numbers must fit in an unsigned 16-bit field.
MAX_COMPONENT = 65535


@dataclass(frozen=True, order=True)
class Version:
    """Immutable version number value object."""
    major: int
    minor: int
    build: int = 0
    revision: int = 0

    def __post_init__(self):
        for name in ('major', 'minor', 'build', 'revision'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"Version {name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(f"Version {name} must not be negative, got {value}")

    @classmethod
    def parse(cls, text: str) -> 'Version':
        """Parse ``major.minor[.build[.revision]]``; missing parts default to 0."""
        if not isinstance(text, str):
            raise VersionFormatError(f"Version text must be a string, got {text!r}")

        parts = text.strip().split('.')
        if not 2 <= len(parts) <= 4:
            raise VersionFormatError(f"Invalid version string: {text!r}")

        numbers = []
        for part in parts:
            part = part.strip()
            if not part.isdigit() or not part.isascii():
                raise VersionFormatError(f"Invalid version string: {text!r}")
            numbers.append(int(part))

        return cls(*numbers)

    def with_numbers(self, build: int, revision: int) -> 'Version':
        """Return a copy with the build and revision numbers replaced."""
        return replace(self, build=build, revision=revision)

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"
