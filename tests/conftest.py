"""
Test configuration and shared fixtures for buildstamp tests
"""
import logging
import pytest
import tempfile
import shutil
from datetime import date, datetime, timezone
from pathlib import Path

ENV_VARS = [
    'BUILDSTAMP_MAJOR',
    'BUILDSTAMP_MINOR',
    'BUILDSTAMP_BUILD_TYPE',
    'BUILDSTAMP_REVISION_TYPE',
    'BUILDSTAMP_STARTING_DATE',
    'BUILDSTAMP_VERSION_FILE',
    'BUILDSTAMP_LANGUAGE',
    'LOG_LEVEL',
    'DEBUG_MODE',
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep buildstamp environment overrides out of the tests"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces the root handlers; put them back after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def now():
    """Fixed clock: 2012-03-07 13:05:30 UTC"""
    return datetime(2012, 3, 7, 13, 5, 30, tzinfo=timezone.utc)


@pytest.fixture
def starting_date():
    """Project starting date"""
    return date(2008, 1, 1)


@pytest.fixture
def sample_config():
    """Configuration file contents for tests"""
    return {
        'version': {
            'major': 2,
            'minor': 5,
            'build_type': 'Increment',
            'revision_type': 'BuildIncrement',
            'version_file': 'version.txt',
        },
        'assembly_info': {
            'language': 'csharp',
            'cls_compliant': True,
        },
        'logging': {
            'level': 'WARNING',
        },
    }
