"""
Numbering Strategies

Enumerations of the available build and revision number algorithms.
"""

from enum import Enum

from ..exceptions import InvalidStrategyError


class _StrategyEnum(Enum):
    """Enum whose members can be looked up by name, ignoring case."""

    @classmethod
    def parse(cls, value):
        """Resolve a member from a member, or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        raise InvalidStrategyError(cls.__name__, value)

    @classmethod
    def names(cls):
        return [member.value for member in cls]

    def __str__(self):
        return self.value


class BuildStrategy(_StrategyEnum):
    """Algorithms for calculating the build number."""

    # Build number is left unchanged.
    FIXED = "Fixed"
    # Build number is incremented.
    INCREMENT = "Increment"
    # Years since the starting date (wrapped at 7) followed by the date as MMdd.
    YEAR_MONTH_DAY = "YearMonthDay"
    # Months since the starting date followed by the day of the month.
    MONTH_DAY = "MonthDay"
    # Years since the starting date followed by the day of the year.
    BUILD_DAY = "BuildDay"


class RevisionStrategy(_StrategyEnum):
    """Algorithms for calculating the revision number."""

    # Revision number is left unchanged.
    FIXED = "Fixed"
    # Revision number is incremented.
    INCREMENT = "Increment"
    # Incremented while the build number stays the same, reset to 0 otherwise.
    BUILD_INCREMENT = "BuildIncrement"
    # Current UTC time formatted as HHmm.
    HOUR_MINUTE = "HourMinute"
    # Seconds since midnight UTC divided by 10.
    DAY_SECOND = "DaySecond"
    # Seconds since midnight UTC scaled so the value advances roughly every 1.3 seconds.
    DAY_FRACTION = "DayFraction"
