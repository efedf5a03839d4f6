"""
Version Number Generator

Calculates new build and revision numbers from the current version, the
selected strategies and the current UTC time. The calculation itself is a
pure function of its arguments; ``VersionEngine`` wraps it with the version
file round trip for strategies that depend on the previous build.
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Union

from ..exceptions import InvalidArgumentError, InvalidStrategyError
from .dates import years_since, months_since, parse_date
from .store import VersionStore, PathLike
from .strategies import BuildStrategy, RevisionStrategy
from .version import Version, MAX_COMPONENT

logger = logging.getLogger(__name__)

DEFAULT_MAJOR = 1
DEFAULT_MINOR = 0

# Years are folded back below this so the leading digit of YearMonthDay stays small.
YEAR_MONTH_DAY_YEAR_LIMIT = 7

SECONDS_PER_DAY = 24 * 3600
DAY_FRACTION = 32767 / SECONDS_PER_DAY


def utc_now(now: Optional[Union[date, datetime]] = None) -> datetime:
    """Normalize ``now`` to an aware UTC datetime; naive values are taken as UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    if isinstance(now, datetime):
        if now.tzinfo is None:
            return now.replace(tzinfo=timezone.utc)
        return now.astimezone(timezone.utc)
    if isinstance(now, date):
        return datetime.combine(now, time(), tzinfo=timezone.utc)
    raise InvalidArgumentError(f"Invalid current time: {now!r}")


def seconds_since_midnight(now: datetime) -> int:
    return now.hour * 3600 + now.minute * 60 + now.second


def calculate_build_number(starting_date, current_build: int, build_strategy,
                           now: Optional[datetime] = None) -> int:
    """Calculate the build number for ``build_strategy``."""
    build_strategy = BuildStrategy.parse(build_strategy)
    now = utc_now(now)

    if build_strategy is BuildStrategy.FIXED:
        return max(current_build, 0)

    if build_strategy is BuildStrategy.INCREMENT:
        return max(current_build + 1, 0)

    if build_strategy is BuildStrategy.YEAR_MONTH_DAY:
        years = years_since(now, starting_date)
        while years >= YEAR_MONTH_DAY_YEAR_LIMIT:
            years -= YEAR_MONTH_DAY_YEAR_LIMIT
        return years * 10000 + int(now.strftime('%m%d'))

    if build_strategy is BuildStrategy.MONTH_DAY:
        return months_since(now, starting_date) * 100 + now.day

    if build_strategy is BuildStrategy.BUILD_DAY:
        return years_since(now, starting_date) * 1000 + now.timetuple().tm_yday

    raise InvalidStrategyError(BuildStrategy.__name__, build_strategy)


def calculate_revision_number(current_revision: int, revision_strategy,
                              build_changed: bool,
                              now: Optional[datetime] = None) -> int:
    """Calculate the revision number for ``revision_strategy``."""
    revision_strategy = RevisionStrategy.parse(revision_strategy)
    now = utc_now(now)

    if revision_strategy is RevisionStrategy.FIXED:
        return max(current_revision, 0)

    if revision_strategy is RevisionStrategy.INCREMENT:
        return max(current_revision + 1, 0)

    if revision_strategy is RevisionStrategy.BUILD_INCREMENT:
        return 0 if build_changed else max(current_revision + 1, 0)

    if revision_strategy is RevisionStrategy.HOUR_MINUTE:
        return int(now.strftime('%H%M'))

    if revision_strategy is RevisionStrategy.DAY_SECOND:
        return seconds_since_midnight(now) // 10

    if revision_strategy is RevisionStrategy.DAY_FRACTION:
        return int(seconds_since_midnight(now) * DAY_FRACTION)

    raise InvalidStrategyError(RevisionStrategy.__name__, revision_strategy)


def correct_overflow(number: int) -> int:
    """Wrap a number larger than ``MAX_COMPONENT`` back into range."""
    while number > MAX_COMPONENT:
        number -= MAX_COMPONENT
    return number


def generate_version(current: Version, build_strategy, revision_strategy,
                     starting_date=None, now=None) -> Version:
    """
    Generate the version following ``current``.

    Args:
        current: Version of the previous build; major and minor are kept.
        build_strategy: ``BuildStrategy`` member or name.
        revision_strategy: ``RevisionStrategy`` member or name.
        starting_date: Project start date used by the calendar strategies.
            Defaults to ``now``.
        now: Current time, defaults to the UTC clock.

    Returns:
        Version: New version with build and revision in ``[0, 65535]``.
    """
    build_strategy = BuildStrategy.parse(build_strategy)
    revision_strategy = RevisionStrategy.parse(revision_strategy)
    now = utc_now(now)
    if starting_date is None:
        starting_date = now

    build = calculate_build_number(starting_date, current.build, build_strategy, now)
    revision = calculate_revision_number(current.revision, revision_strategy,
                                         build != current.build, now)

    return current.with_numbers(correct_overflow(build), correct_overflow(revision))


def generate_version_from(major: int, minor: int, build_strategy, revision_strategy,
                          starting_date=None, now=None) -> Version:
    """Generate a version starting from ``major.minor.0.0``."""
    return generate_version(Version(major, minor), build_strategy, revision_strategy,
                            starting_date, now)


def generate_version_with_file(version_file: Optional[PathLike], build_strategy, revision_strategy,
                               starting_date=None, major: int = DEFAULT_MAJOR,
                               minor: int = DEFAULT_MINOR, now=None,
                               store: Optional[VersionStore] = None) -> Version:
    """
    Generate a version using the previous one stored in ``version_file``.

    The file is read and overwritten only when one of the strategies needs
    the previous version. Nothing is written if generation fails.
    """
    store = store or VersionStore()
    current = store.load(version_file, major, minor, build_strategy, revision_strategy)
    new_version = generate_version(current, build_strategy, revision_strategy, starting_date, now)

    if store.requires_persistence(build_strategy, revision_strategy):
        store.save(version_file, new_version)

    return new_version


def _config_int(config: Dict[str, Any], key: str, default: int) -> int:
    value = config.get(key, default)
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {key}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid {key}: {value!r}") from None


class VersionEngine:
    """
    Configured version generator.

    Holds the major/minor numbers, the strategies and the optional version
    file of a project so every build can call ``generate()``.
    """

    def __init__(self, build_strategy, revision_strategy, starting_date=None,
                 major: int = DEFAULT_MAJOR, minor: int = DEFAULT_MINOR,
                 version_file: Optional[PathLike] = None,
                 store: Optional[VersionStore] = None):
        self.build_strategy = BuildStrategy.parse(build_strategy)
        self.revision_strategy = RevisionStrategy.parse(revision_strategy)
        self.starting_date = starting_date
        self.major = major
        self.minor = minor
        self.version_file = version_file
        self.store = store or VersionStore()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, version_config: Dict[str, Any],
                    store: Optional[VersionStore] = None) -> 'VersionEngine':
        """Create an engine from the ``version`` section of the configuration."""
        starting_date = version_config.get('starting_date')
        if isinstance(starting_date, str):
            starting_date = parse_date(starting_date)
        elif starting_date is not None and not isinstance(starting_date, date):
            raise InvalidArgumentError(f"Invalid starting_date: {starting_date!r}")

        version_file = version_config.get('version_file')
        if isinstance(version_file, str) and not version_file.strip():
            version_file = None

        return cls(
            build_strategy=version_config.get('build_type', BuildStrategy.INCREMENT),
            revision_strategy=version_config.get('revision_type', RevisionStrategy.BUILD_INCREMENT),
            starting_date=starting_date,
            major=_config_int(version_config, 'major', DEFAULT_MAJOR),
            minor=_config_int(version_config, 'minor', DEFAULT_MINOR),
            version_file=version_file,
            store=store,
        )

    @property
    def requires_version_file(self) -> bool:
        return self.store.requires_persistence(self.build_strategy, self.revision_strategy)

    def generate(self, now=None) -> Version:
        """Generate the next version, reading and updating the version file if configured."""
        if self.version_file is None:
            self.logger.debug("Creating version without using a version file.")
            version = generate_version_from(self.major, self.minor, self.build_strategy,
                                            self.revision_strategy, self.starting_date, now)
        else:
            version = generate_version_with_file(self.version_file, self.build_strategy,
                                                 self.revision_strategy, self.starting_date,
                                                 self.major, self.minor, now, self.store)

        self.logger.info(f"Version number generated: {version}")
        return version
