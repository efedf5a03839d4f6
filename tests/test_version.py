"""
Unit tests for the Version value object and strategy parsing
"""
import pytest

from buildstamp.exceptions import InvalidArgumentError, InvalidStrategyError, VersionFormatError
from buildstamp.versioning import BuildStrategy, RevisionStrategy, Version


class TestVersion:
    """Test Version"""

    def test_string_form(self):
        assert str(Version(1, 0, 2314, 4502)) == '1.0.2314.4502'

    def test_build_and_revision_default_to_zero(self):
        assert str(Version(1, 0)) == '1.0.0.0'

    @pytest.mark.parametrize('text, expected', [
        ('1.0', Version(1, 0, 0, 0)),
        ('1.2.3', Version(1, 2, 3, 0)),
        ('1.0.2314.4502', Version(1, 0, 2314, 4502)),
        ('1.0.5.6\n', Version(1, 0, 5, 6)),
    ])
    def test_parse(self, text, expected):
        assert Version.parse(text) == expected

    def test_parse_round_trip(self):
        version = Version(3, 1, 40307, 1305)
        assert Version.parse(str(version)) == version

    @pytest.mark.parametrize('text', ['', '1', '1.2.3.4.5', 'a.b', '1.-2', '1..2', 'not a version'])
    def test_parse_rejects_malformed_text(self, text):
        with pytest.raises(VersionFormatError):
            Version.parse(text)

    def test_negative_components_are_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Version(1, 0, -1, 0)

    def test_is_immutable(self):
        version = Version(1, 0, 1, 1)
        with pytest.raises(AttributeError):
            version.build = 2

    def test_with_numbers_keeps_major_and_minor(self):
        assert Version(4, 2, 1, 1).with_numbers(7, 8) == Version(4, 2, 7, 8)


class TestStrategyParsing:
    """Test case-insensitive strategy lookup"""

    @pytest.mark.parametrize('name, expected', [
        ('Fixed', BuildStrategy.FIXED),
        ('increment', BuildStrategy.INCREMENT),
        ('YEARMONTHDAY', BuildStrategy.YEAR_MONTH_DAY),
        ('monthDay', BuildStrategy.MONTH_DAY),
        (' BuildDay ', BuildStrategy.BUILD_DAY),
        (BuildStrategy.BUILD_DAY, BuildStrategy.BUILD_DAY),
    ])
    def test_build_strategy(self, name, expected):
        assert BuildStrategy.parse(name) is expected

    def test_revision_strategy(self):
        assert RevisionStrategy.parse('buildincrement') is RevisionStrategy.BUILD_INCREMENT
        assert RevisionStrategy.parse('DayFraction') is RevisionStrategy.DAY_FRACTION

    def test_unknown_name_names_the_enum(self):
        with pytest.raises(InvalidStrategyError) as exc_info:
            BuildStrategy.parse('Weekly')

        assert exc_info.value.enum_name == 'BuildStrategy'
        assert exc_info.value.value == 'Weekly'
        assert 'BuildStrategy' in str(exc_info.value)
        assert 'Weekly' in str(exc_info.value)

    def test_members_of_the_other_enum_are_rejected(self):
        with pytest.raises(InvalidStrategyError):
            BuildStrategy.parse(RevisionStrategy.HOUR_MINUTE)

    def test_non_string_values_are_rejected(self):
        with pytest.raises(InvalidStrategyError):
            RevisionStrategy.parse(7)

    def test_names(self):
        assert BuildStrategy.names() == ['Fixed', 'Increment', 'YearMonthDay', 'MonthDay', 'BuildDay']
        assert len(RevisionStrategy.names()) == 6
