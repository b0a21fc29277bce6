"""
In-memory file system adapter.

Holds a tree of files, directories and symbolic links in a dictionary keyed by
absolute path, so traversals and shell commands can run without touching the
disk. Failures of individual primitives can be injected per path with
`fail_on`, which makes permission problems and cross-device moves reproducible.
"""

import errno
import io
import itertools
import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, cast

from typing_extensions import override

from file_explorer.entities.Entry import DirectoryEntry, EntryKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


@dataclass
class _Node:
    kind: EntryKind
    data: bytearray = field(default_factory=bytearray)
    target: str | None = None
    mtime: int = 0


class _WriteHandle(io.BytesIO):
    """Buffer that stores its content into the tree when closed."""

    def __init__(self, commit: Callable[[bytes], None]):
        super().__init__()
        self._commit = commit

    def close(self) -> None:
        if not self.closed:
            self._commit(self.getvalue())
        super().close()


class InMemoryFileSystemAdapter(FileSystemPort):
    """Dictionary-backed implementation of the file system port."""

    def __init__(self, root: str = "/", logger: logging.Logger | None = None):
        self._root = os.path.normpath(root)
        self._nodes: dict[str, _Node] = {self._root: _Node(EntryKind.DIRECTORY)}
        self._failures: dict[tuple[str, str], int] = {}
        self._clock = itertools.count(1)
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    # ------------------------- tree building -------------------------
    def add_dir(self, path: str) -> str:
        """Create a directory and any missing parents. Returns the normalized path."""
        path = self._norm(path)
        missing: list[str] = []
        current = path
        while current not in self._nodes:
            if current == os.path.dirname(current):
                raise FileRepositoryError.from_errno(errno.ENOENT, path)
            missing.append(current)
            current = os.path.dirname(current)
        if self._nodes[current].kind is not EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.ENOTDIR, current)
        for directory in reversed(missing):
            self._nodes[directory] = _Node(EntryKind.DIRECTORY, mtime=next(self._clock))
        return path

    def add_file(self, path: str, content: bytes | str = b"") -> str:
        """Create (or replace) a file, creating missing parent directories."""
        path = self._norm(path)
        self.add_dir(os.path.dirname(path))
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._nodes[path] = _Node(
            EntryKind.FILE, data=bytearray(content), mtime=next(self._clock)
        )
        return path

    def add_link(self, path: str, target: str | None = None) -> str:
        """Create a symbolic link; the target does not need to exist."""
        path = self._norm(path)
        self.add_dir(os.path.dirname(path))
        self._nodes[path] = _Node(
            EntryKind.LINK,
            target=self._norm(target) if target else None,
            mtime=next(self._clock),
        )
        return path

    def fail_on(self, operation: str, path: str, code: int = errno.EACCES) -> None:
        """
        Make a primitive fail for one path.

        Args:
            operation: Port method name (e.g. "remove_file", "scandir", "rename")
            path: Absolute path the failure applies to
            code: OS error code to raise
        """
        self._failures[(operation, self._norm(path))] = code

    def read_bytes(self, path: str) -> bytes:
        with self.open_read(path) as handle:
            return handle.read()

    def modified(self, path: str) -> int:
        """Logical modification time (increases with every change)."""
        return self._get(self._norm(path)).mtime

    def paths(self) -> list[str]:
        return list(self._nodes)

    # ------------------------- internal helpers -------------------------
    def _norm(self, path: str) -> str:
        if not os.path.isabs(path):
            raise ValueError(f"In-memory file system needs absolute paths: {path!r}")
        return os.path.normpath(path)

    def _check(self, operation: str, path: str) -> None:
        code = self._failures.get((operation, path))
        if code is not None:
            raise FileRepositoryError.from_errno(code, path)

    def _get(self, path: str) -> _Node:
        node = self._nodes.get(path)
        if node is None:
            raise FileRepositoryError.from_errno(errno.ENOENT, path)
        return node

    def _require_parent(self, path: str) -> None:
        parent = self._nodes.get(os.path.dirname(path))
        if parent is None:
            raise FileRepositoryError.from_errno(errno.ENOENT, path)
        if parent.kind is not EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.ENOTDIR, path)

    def _children(self, directory: str) -> list[str]:
        return [
            path
            for path in self._nodes
            if path != directory and os.path.dirname(path) == directory
        ]

    def _descendants(self, directory: str) -> list[str]:
        prefix = directory.rstrip(os.sep) + os.sep
        return [path for path in self._nodes if path.startswith(prefix)]

    def _follow(self, path: str) -> tuple[str, _Node]:
        node = self._get(path)
        seen: set[str] = set()
        while node.kind is EntryKind.LINK:
            if node.target is None or path in seen:
                raise FileRepositoryError.from_errno(errno.ENOENT, path)
            seen.add(path)
            path = node.target
            node = self._get(path)
        return path, node

    def _entry(self, path: str, node: _Node) -> DirectoryEntry:
        if node.kind is EntryKind.FILE:
            size = len(node.data)
        elif node.kind is EntryKind.LINK:
            size = len(node.target or "")
        else:
            size = 0
        return DirectoryEntry(
            name=os.path.basename(path) or path, path=path, kind=node.kind, size=size
        )

    # ------------------------- port implementation -------------------------
    @override
    def stat(self, path: str, follow_symlinks: bool = False) -> DirectoryEntry:
        path = self._norm(path)
        self._check("stat", path)
        if follow_symlinks:
            _, node = self._follow(path)
            return self._entry(path, node)
        return self._entry(path, self._get(path))

    @override
    def scandir(self, directory: str) -> list[DirectoryEntry]:
        directory = self._norm(directory)
        self._check("scandir", directory)
        real, node = self._follow(directory)
        if node.kind is not EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.ENOTDIR, directory)
        entries: list[DirectoryEntry] = []
        for child in self._children(real):
            # report children under the path that was asked for
            shown = os.path.join(directory, os.path.basename(child))
            entries.append(self._entry(shown, self._nodes[child]))
        return entries

    @override
    def exists(self, path: str) -> bool:
        return self._norm(path) in self._nodes

    @override
    def same_file(self, first: str, second: str) -> bool:
        first = self._norm(first)
        second = self._norm(second)
        try:
            _, first_node = self._follow(first)
            _, second_node = self._follow(second)
        except FileRepositoryError:
            # missing or dangling
            return False
        return first_node is second_node

    @override
    def open_read(self, path: str) -> BinaryIO:
        path = self._norm(path)
        self._check("open_read", path)
        _, node = self._follow(path)
        if node.kind is EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.EISDIR, path)
        return cast(BinaryIO, io.BytesIO(bytes(node.data)))

    @override
    def open_write(self, path: str) -> BinaryIO:
        path = self._norm(path)
        self._check("open_write", path)
        existing = self._nodes.get(path)
        if existing is not None:
            path, existing = self._follow(path)
            if existing.kind is EntryKind.DIRECTORY:
                raise FileRepositoryError.from_errno(errno.EISDIR, path)
        else:
            self._require_parent(path)
        node = _Node(EntryKind.FILE, mtime=next(self._clock))
        self._nodes[path] = node

        def commit(data: bytes) -> None:
            node.data = bytearray(data)
            node.mtime = next(self._clock)

        return cast(BinaryIO, _WriteHandle(commit))

    @override
    def touch(self, path: str) -> DirectoryEntry:
        path = self._norm(path)
        self._check("touch", path)
        node = self._nodes.get(path)
        if node is None:
            self._require_parent(path)
            node = _Node(EntryKind.FILE)
            self._nodes[path] = node
        else:
            _, target = self._follow(path)
            if target.kind is EntryKind.DIRECTORY:
                raise FileRepositoryError.from_errno(errno.EISDIR, path)
            node = target
        node.mtime = next(self._clock)
        return self.stat(path)

    @override
    def rename(self, source: str, destination: str) -> None:
        source = self._norm(source)
        destination = self._norm(destination)
        self._check("rename", source)
        node = self._get(source)
        self._require_parent(destination)
        if source == destination:
            return
        if destination.startswith(source.rstrip(os.sep) + os.sep):
            raise FileRepositoryError.from_errno(errno.EINVAL, source)
        target = self._nodes.get(destination)
        if target is not None:
            if target.kind is EntryKind.DIRECTORY:
                if node.kind is not EntryKind.DIRECTORY:
                    raise FileRepositoryError.from_errno(errno.EISDIR, destination)
                if self._children(destination):
                    raise FileRepositoryError.from_errno(errno.ENOTEMPTY, destination)
            elif node.kind is EntryKind.DIRECTORY:
                raise FileRepositoryError.from_errno(errno.ENOTDIR, destination)
            del self._nodes[destination]

        moved = [source, *self._descendants(source)]
        for old in moved:
            self._nodes[destination + old[len(source):]] = self._nodes.pop(old)

    @override
    def mkdir(self, path: str) -> DirectoryEntry:
        path = self._norm(path)
        self._check("mkdir", path)
        if path in self._nodes:
            raise FileRepositoryError.from_errno(errno.EEXIST, path)
        self._require_parent(path)
        self._nodes[path] = _Node(EntryKind.DIRECTORY, mtime=next(self._clock))
        return self.stat(path)

    @override
    def remove_file(self, path: str) -> None:
        path = self._norm(path)
        self._check("remove_file", path)
        node = self._get(path)
        if node.kind is EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.EISDIR, path)
        del self._nodes[path]

    @override
    def remove_dir(self, path: str) -> None:
        path = self._norm(path)
        self._check("remove_dir", path)
        node = self._get(path)
        if node.kind is not EntryKind.DIRECTORY:
            raise FileRepositoryError.from_errno(errno.ENOTDIR, path)
        if path == self._root:
            raise FileRepositoryError.from_errno(errno.EBUSY, path)
        if self._children(path):
            raise FileRepositoryError.from_errno(errno.ENOTEMPTY, path)
        del self._nodes[path]
