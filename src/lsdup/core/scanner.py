"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Walks one or more roots and yields the paths of regular files.
Features:
- Iterative depth-first traversal with os.scandir (no recursion limit)
- Entries visited in name order, so results do not depend on the filesystem
- No-follow classification: symlinks of any kind, sockets and fifos are skipped
- Directories reached twice (overlapping roots) are walked once
- A file root also reached through another root is yielded once
"""

import logging
import os
import stat
from typing import Iterator, List, Optional, Set, Union

from lsdup.core.errors import ScanError
from lsdup.core.interfaces import FileScanner
from lsdup.core.models import PhysicalIdentity

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and yields regular, non-symlinked files.

    Attributes:
        roots: Directories (or single files) to scan
        strict: Raise ScanError on unreadable directories instead of skipping them
    """

    def __init__(self, roots: List[str], strict: bool = False):
        self.roots = list(roots)
        self.strict = strict
        self.directories_skipped = 0
        self._seen_dirs: Set[PhysicalIdentity] = set()
        self._file_roots: Set[Union[PhysicalIdentity, str]] = set()
        self._seen_files: Set[Union[PhysicalIdentity, str]] = set()

    def scan(self) -> Iterator[str]:
        """
        Yield file paths root by root.
        Every root is checked before the first path is yielded.
        """
        logger.debug(f"Roots: {self.roots}, strict={self.strict}")
        checked = [(root, self._check_root(root)) for root in self.roots]
        self._file_roots = {
            self._file_key(root, st) for root, st in checked
            if stat.S_ISREG(st.st_mode) and self._is_regular_file(root)
        }

        for root, st in checked:
            if stat.S_ISDIR(st.st_mode):
                yield from self._walk(root, st)
            elif stat.S_ISREG(st.st_mode) and self._is_regular_file(root):
                if self._first_file(root, st):
                    logger.debug(f"Root is a file: {root}")
                    yield root
                else:
                    logger.debug(f"File already scanned: {root}")
            else:
                logger.debug(f"Skipping root that is not a directory or regular file: {root}")

    @staticmethod
    def _check_root(root: str) -> os.stat_result:
        try:
            return os.stat(root)
        except FileNotFoundError:
            raise ScanError(root, "does not exist")
        except OSError as e:
            raise ScanError(root, str(e))

    @staticmethod
    def _is_regular_file(path: str) -> bool:
        try:
            return stat.S_ISREG(os.lstat(path).st_mode)
        except OSError:
            return False

    def _walk(self, root: str, root_st: os.stat_result) -> Iterator[str]:
        if not self._first_visit(root_st):
            logger.debug(f"Directory already scanned: {root}")
            return

        stack: List[Iterator[os.DirEntry]] = []
        entries = self._list_dir(root)
        if entries is not None:
            stack.append(iter(entries))

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            kind = self._classify(entry)
            if kind == "dir":
                sub_st = self._lstat_dir(entry)
                if sub_st is None or not self._first_visit(sub_st):
                    continue
                sub_entries = self._list_dir(entry.path)
                if sub_entries is not None:
                    stack.append(iter(sub_entries))
            elif kind == "file":
                if self._file_roots and not self._first_walked_file(entry):
                    logger.debug(f"File already scanned: {entry.path}")
                    continue
                yield entry.path
            else:
                logger.debug(f"Skipping {kind}: {entry.path}")

    def _list_dir(self, path: str) -> Optional[List[os.DirEntry]]:
        """Sorted entries of `path`, or None when the directory is skipped."""
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            if self.strict:
                raise ScanError(path, str(e))
            self.directories_skipped += 1
            logger.warning(f"Skipping directory {path}. Reason: {e}")
            return None

    @staticmethod
    def _classify(entry: os.DirEntry) -> str:
        try:
            if entry.is_symlink():
                return "symbolic link"
            if entry.is_dir(follow_symlinks=False):
                return "dir"
            if entry.is_file(follow_symlinks=False):
                return "file"
        except OSError as e:
            logger.debug(f"Could not stat {entry.path}: {e}")
            return "unreadable entry"
        return "special file"

    @staticmethod
    def _lstat_dir(entry: os.DirEntry) -> Optional[os.stat_result]:
        try:
            return entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Could not stat directory {entry.path}: {e}")
            return None

    def _first_visit(self, st: os.stat_result) -> bool:
        identity = PhysicalIdentity.from_stat(st)
        if identity is None:
            return True
        if identity in self._seen_dirs:
            return False
        self._seen_dirs.add(identity)
        return True

    @staticmethod
    def _file_key(path: str, st: os.stat_result) -> Union[PhysicalIdentity, str]:
        # Without an inode number, fall back to the resolved path
        identity = PhysicalIdentity.from_stat(st)
        if identity is None:
            return os.path.normcase(os.path.realpath(path))
        return identity

    def _first_file(self, path: str, st: os.stat_result) -> bool:
        key = self._file_key(path, st)
        if key in self._seen_files:
            return False
        self._seen_files.add(key)
        return True

    def _first_walked_file(self, entry: os.DirEntry) -> bool:
        """
        Only files that are also given as roots can be reached twice,
        since every directory is walked once.
        """
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError:
            return True
        if self._file_key(entry.path, st) not in self._file_roots:
            return True
        return self._first_file(entry.path, st)
