"""
Version File Store

Loads and saves the build and revision numbers of the previous build to a
plain text version file. Only strategies that derive their value from the
previous version need the file; the clock-based ones never touch it.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..exceptions import MissingVersionFileError
from .strategies import BuildStrategy, RevisionStrategy
from .version import Version

PathLike = Union[str, Path]

BUILD_STRATEGIES_REQUIRING_FILE = frozenset({
    BuildStrategy.FIXED,
    BuildStrategy.INCREMENT,
})

REVISION_STRATEGIES_REQUIRING_FILE = frozenset({
    RevisionStrategy.FIXED,
    RevisionStrategy.INCREMENT,
    RevisionStrategy.BUILD_INCREMENT,
})


class VersionStore:
    """
    Reads and writes the version file shared between builds.

    The file holds a single ``major.minor.build.revision`` string. Major and
    minor in the file are informational only; the values passed to ``load``
    always win. There is no locking: one build owns the file at a time.
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def requires_persistence(build_strategy, revision_strategy) -> bool:
        """Whether either strategy reads the previously generated version."""
        build_strategy = BuildStrategy.parse(build_strategy)
        revision_strategy = RevisionStrategy.parse(revision_strategy)
        return (build_strategy in BUILD_STRATEGIES_REQUIRING_FILE or
                revision_strategy in REVISION_STRATEGIES_REQUIRING_FILE)

    def load(self, path: Optional[PathLike], major: int, minor: int,
             build_strategy, revision_strategy) -> Version:
        """
        Load the current version for the next generation.

        Returns:
            Version: ``major.minor`` with the stored build and revision, or
            ``major.minor.0.0`` when there is nothing to load.
        """
        if not self.requires_persistence(build_strategy, revision_strategy):
            return Version(major, minor)

        if path is None or not str(path).strip():
            raise MissingVersionFileError(
                "A version file is required by the selected build and revision strategies"
            )

        path = Path(path)
        if not path.exists():
            self.logger.debug(f"Version file {path} does not exist, starting from {major}.{minor}.0.0")
            return Version(major, minor)

        stored = Version.parse(path.read_text(encoding=self.encoding))
        self.logger.debug(f"Loaded version {stored} from {path}")
        return Version(major, minor, stored.build, stored.revision)

    def save(self, path: PathLike, version: Version) -> None:
        """Overwrite the version file with ``version``."""
        path = Path(path)
        path.write_text(str(version), encoding=self.encoding)
        self.logger.debug(f"Saved version {version} to {path}")
