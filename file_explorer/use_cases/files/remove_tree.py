"""
Use case for deleting a file or a whole directory tree.
"""

import errno
import os
from typing import Callable, Iterator

from file_explorer.entities.Entry import DirectoryEntry
from file_explorer.exceptions import FileRepositoryError
from file_explorer.use_cases.files.base import FileUseCase

_SELF_REFERENCES = (".", "..")


class RemoveTreeUseCase(FileUseCase):
    """
    Recursive delete, children before parent.

    Traversal uses an explicit stack of (directory, pending children) frames, so
    depth is bounded by memory rather than the interpreter's recursion limit.
    Only entries classified as directories by lstat are entered; symbolic links
    are removed as leaves and never followed.

    Failures on individual entries are logged and skipped: siblings are still
    removed, and the caller inspects the filesystem to see what remains.
    """

    def execute(self, path: str) -> int:
        """
        Remove `path` and everything below it.

        Args:
            path: File or directory to delete

        Returns:
            Number of entries that could not be removed

        Raises:
            FileRepositoryError: If `path` itself cannot be inspected
        """
        target = self._resolve(path)
        self._logger.info(f"Removing tree: {target}")

        def describe(failures: int) -> str:
            if failures:
                return f"Failed to remove: {path} ({failures} entries could not be removed)"
            return f"Removed: {path}"

        failures = self._attempt(
            describe,
            f"Failed to remove: {path}",
            lambda: self._remove_root(path, target),
        )
        if failures:
            self._logger.warning(f"{failures} entries under {target} could not be removed")
        return failures

    def _remove_root(self, path: str, target: str) -> int:
        if os.path.basename(path.rstrip("/\\")) in _SELF_REFERENCES:
            raise FileRepositoryError.from_errno(errno.EINVAL, path)
        return self._remove(self._file_system.stat(target))

    def _remove(self, root: DirectoryEntry) -> int:
        if not root.is_dir:
            return 0 if self._try(self._file_system.remove_file, root.path) else 1

        failures = 0
        stack: list[tuple[DirectoryEntry, Iterator[DirectoryEntry]]] = [
            (root, self._children(root))
        ]
        while stack:
            directory, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                if not self._try(self._file_system.remove_dir, directory.path):
                    failures += 1
            elif child.is_dir:
                stack.append((child, self._children(child)))
            elif not self._try(self._file_system.remove_file, child.path):
                failures += 1
        return failures

    def _children(self, directory: DirectoryEntry) -> Iterator[DirectoryEntry]:
        try:
            entries = self._file_system.scandir(directory.path)
        except FileRepositoryError as e:
            self._logger.warning(f"Could not enumerate {directory.path}: {e}")
            return iter(())
        return iter([e for e in entries if e.name not in _SELF_REFERENCES])

    def _try(self, remove: Callable[[str], None], path: str) -> bool:
        try:
            remove(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Could not remove {path}: {e}")
            return False
        return True
