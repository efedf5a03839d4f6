"""
Unit tests for VersionStore functionality
"""
import pytest
from pathlib import Path
from unittest.mock import patch

from buildstamp.exceptions import MissingVersionFileError, VersionFormatError
from buildstamp.versioning import BuildStrategy, RevisionStrategy, Version, VersionStore


class TestRequiresPersistence:
    """Test the version file policy"""

    @pytest.mark.parametrize('build_strategy, revision_strategy, expected', [
        (BuildStrategy.FIXED, RevisionStrategy.HOUR_MINUTE, True),
        (BuildStrategy.INCREMENT, RevisionStrategy.DAY_SECOND, True),
        (BuildStrategy.MONTH_DAY, RevisionStrategy.BUILD_INCREMENT, True),
        (BuildStrategy.BUILD_DAY, RevisionStrategy.FIXED, True),
        (BuildStrategy.YEAR_MONTH_DAY, RevisionStrategy.INCREMENT, True),
        (BuildStrategy.YEAR_MONTH_DAY, RevisionStrategy.HOUR_MINUTE, False),
        (BuildStrategy.BUILD_DAY, RevisionStrategy.DAY_FRACTION, False),
        (BuildStrategy.MONTH_DAY, RevisionStrategy.DAY_SECOND, False),
    ])
    def test_policy(self, build_strategy, revision_strategy, expected):
        assert VersionStore.requires_persistence(build_strategy, revision_strategy) is expected

    def test_accepts_names(self):
        assert VersionStore.requires_persistence('fixed', 'hourminute')
        assert not VersionStore.requires_persistence('YearMonthDay', 'HourMinute')


class TestVersionStore:
    """Test loading and saving the version file"""

    @pytest.fixture
    def store(self):
        return VersionStore()

    def test_load_skips_filesystem_when_not_required(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        version_file.write_text('1.0.99.99')

        with patch.object(Path, 'read_text') as read_text, \
             patch.object(Path, 'exists') as exists:
            version = store.load(version_file, 3, 4, 'YearMonthDay', 'HourMinute')

        assert version == Version(3, 4, 0, 0)
        read_text.assert_not_called()
        exists.assert_not_called()

    def test_load_without_path_when_not_required(self, store):
        assert store.load(None, 3, 4, 'BuildDay', 'DayFraction') == Version(3, 4, 0, 0)

    @pytest.mark.parametrize('path', [None, '', '   '])
    def test_load_requires_a_path(self, store, path):
        with pytest.raises(MissingVersionFileError):
            store.load(path, 1, 0, 'Increment', 'Increment')

    def test_load_missing_file_starts_from_zero(self, store, temp_dir):
        version = store.load(temp_dir / 'version.txt', 1, 2, 'Increment', 'BuildIncrement')
        assert version == Version(1, 2, 0, 0)

    def test_load_replaces_major_and_minor(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        version_file.write_text('9.9.12.34')

        version = store.load(version_file, 1, 2, BuildStrategy.FIXED, RevisionStrategy.FIXED)

        assert version == Version(1, 2, 12, 34)

    def test_load_accepts_string_paths(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        version_file.write_text('1.0.5.6\n')

        assert store.load(str(version_file), 1, 0, 'Increment', 'Fixed') == Version(1, 0, 5, 6)

    def test_load_malformed_file(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        version_file.write_text('not a version')

        with pytest.raises(VersionFormatError):
            store.load(version_file, 1, 0, 'Increment', 'Increment')

    def test_load_io_errors_propagate(self, store, temp_dir):
        # A directory exists but cannot be read as text
        with pytest.raises(OSError):
            store.load(temp_dir, 1, 0, 'Increment', 'Increment')

    def test_save_writes_full_version(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'

        store.save(version_file, Version(1, 0, 2314, 4502))

        assert version_file.read_text() == '1.0.2314.4502'

    def test_save_overwrites(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        version_file.write_text('1.0.1.1 and some leftover text')

        store.save(version_file, Version(1, 0, 2, 2))

        assert version_file.read_text() == '1.0.2.2'

    def test_round_trip(self, store, temp_dir):
        version_file = temp_dir / 'version.txt'
        store.save(version_file, Version(5, 6, 40307, 1305))

        loaded = store.load(version_file, 7, 8, 'Increment', 'BuildIncrement')

        assert loaded == Version(7, 8, 40307, 1305)
