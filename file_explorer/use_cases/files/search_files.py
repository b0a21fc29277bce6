"""
Use case for searching entries by name in a directory tree.
"""

from typing import Callable, Iterator, Optional

from file_explorer.entities.Entry import DirectoryEntry
from file_explorer.exceptions import FileRepositoryError
from file_explorer.use_cases.files.base import FileUseCase

_SELF_REFERENCES = (".", "..")


class SearchFilesUseCase(FileUseCase):
    """Use case for recursively searching entries whose name contains a pattern."""

    def execute(
        self,
        pattern: str,
        directory: str = ".",
        on_match: Optional[Callable[[DirectoryEntry], None]] = None,
    ) -> list[DirectoryEntry]:
        """
        Search `directory` and all its subdirectories.

        Matching is a case-sensitive substring test on entry names; no wildcard
        expansion. A start path that cannot be opened yields no matches.

        Args:
            pattern: Substring to look for
            directory: Where to start, relative to the working directory
            on_match: Called with each match as soon as it is found

        Returns:
            All matches, in traversal order
        """
        root = self._resolve(directory)
        self._logger.info(
            f"Searching for entries matching '{pattern}' in directory: {root}"
        )

        def search() -> list[DirectoryEntry]:
            matches: list[DirectoryEntry] = []
            for entry in self.iter_matches(root, pattern):
                matches.append(entry)
                if on_match is not None:
                    on_match(entry)
            return matches

        matches = self._attempt(
            lambda found: f"Searched for: {pattern} in {directory} ({len(found)} matches)",
            f"Failed to search for: {pattern} in {directory}",
            search,
        )
        self._logger.info(f"Found {len(matches)} entries matching pattern '{pattern}'")
        return matches

    def iter_matches(self, root: str, pattern: str) -> Iterator[DirectoryEntry]:
        """
        Pre-order traversal yielding matching entries below absolute `root`.

        Each directory is reported (if it matches) before its contents, and is
        descended into whether or not it matched. Directories that cannot be
        opened are skipped silently. Symbolic links are never followed.
        """
        pending: list[Iterator[DirectoryEntry]] = [self._children(root)]
        while pending:
            entry = next(pending[-1], None)
            if entry is None:
                pending.pop()
                continue
            if pattern in entry.name:
                yield entry
            if entry.is_dir:
                pending.append(self._children(entry.path))

    def _children(self, directory: str) -> Iterator[DirectoryEntry]:
        try:
            entries = self._file_system.scandir(directory)
        except FileRepositoryError as e:
            self._logger.debug(f"Skipping {directory}: {e}")
            return iter(())
        return iter([e for e in entries if e.name not in _SELF_REFERENCES])
