"""Discover the source files a run should analyse."""

from __future__ import annotations

import os
from typing import Callable, Iterator, List, Optional, Set, Tuple, Union

from .errors import DiscoveryError
from .logging import get_logger

DEFAULT_EXTENSION = ".ts"
DEFAULT_MAX_DEPTH = 64

ErrorHandler = Callable[[DiscoveryError], None]


def normalize_extension(extension: str) -> str:
    extension = extension.strip()
    if not extension or extension == ".":
        raise ValueError("extension must not be empty")
    return extension if extension.startswith(".") else f".{extension}"


class FileWalker:
    """Recursively list files with a given extension below a root directory.

    Traversal is depth-first with entries visited in name order, so repeated
    walks of an unchanged tree return the same list. Symbolic links are
    followed; a directory already on the visited set (same device and inode)
    is skipped, and recursion stops at ``max_depth`` levels below the root.
    """

    def __init__(self, extension: str = DEFAULT_EXTENSION, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.extension = normalize_extension(extension)
        self.max_depth = max_depth

    def walk(self, root: Union[str, "os.PathLike[str]"], on_error: Optional[ErrorHandler] = None) -> List[str]:
        """Return matching file paths in discovery order.

        An unlistable subdirectory is reported through ``on_error`` (logged as
        a warning when no handler is given) and its subtree skipped. An
        unlistable ``root`` raises :class:`DiscoveryError`.
        """

        root_path = os.fspath(root)
        handler = on_error or _log_skipped
        visited: Set[Tuple[int, int]] = set()

        entries = self._list(root_path)
        visited.add(_identity(root_path))
        files: List[str] = []
        stack: List[Iterator[os.DirEntry]] = [iter(entries)]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            if _is_dir(entry):
                if len(stack) >= self.max_depth:
                    get_logger().warning("Depth limit %d reached, not descending into %s", self.max_depth, entry.path)
                    continue
                try:
                    identity = _identity(entry.path)
                except OSError as exc:
                    handler(DiscoveryError(entry.path, exc.strerror or str(exc)))
                    continue
                if identity in visited:
                    get_logger().debug("Skipping already visited directory %s", entry.path)
                    continue
                visited.add(identity)
                try:
                    children = self._list(entry.path)
                except DiscoveryError as exc:
                    handler(exc)
                    continue
                stack.append(iter(children))
            elif entry.name.endswith(self.extension) and _is_file(entry):
                files.append(entry.path)

        return files

    def _list(self, path: str) -> List[os.DirEntry]:
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise DiscoveryError(path, exc.strerror or str(exc)) from exc


def _identity(path: str) -> Tuple[int, int]:
    stat = os.stat(path)
    return stat.st_dev, stat.st_ino


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _log_skipped(error: DiscoveryError) -> None:
    get_logger().warning("Skipping subtree: %s", error)
