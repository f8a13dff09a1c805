"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/engine.py
Duplicate detection engine: one `visit()` per regular file.

PIPELINE
--------
stat -> hard link gate -> run counters -> size bucket -> hash (only on size
collision) -> duplicate index

Every step runs to completion before the next path is visited. Failures on a
single path are reported to the observer and never touch the state recorded
for other paths.
"""

import os
from typing import Iterable, List

from lsdup.core.bucketer import SizeBucketer
from lsdup.core.hardlinks import HardlinkTracker
from lsdup.core.hasher import ContentHasherImpl
from lsdup.core.index import DuplicateIndex
from lsdup.core.interfaces import Hasher, EngineObserver
from lsdup.core.models import Admission, DuplicateGroup, RunStats
from lsdup.core.observer import LoggingObserver


class Engine:
    """
    Composes the hard link tracker, size bucketer and duplicate index.
    Uses an injected Hasher and observer for flexibility and testability.
    """

    def __init__(self, hasher: Hasher = None, observer: EngineObserver = None):
        self.hasher = hasher or ContentHasherImpl()
        self.observer = observer or LoggingObserver()
        self._stats = RunStats()
        self.hardlinks = HardlinkTracker()
        self.index = DuplicateIndex()
        self.bucketer = SizeBucketer(
            hasher=self.hasher,
            index=self.index,
            observer=self.observer,
            stats=self._stats,
        )

    def visit(self, path: str) -> None:
        try:
            st = os.stat(path)
        except OSError as e:
            self._stats.errors += 1
            self.observer.on_error(path, e)
            return

        if self.hardlinks.admit(path, st) is Admission.SUPPRESSED:
            self.observer.on_hardlink_suppressed(path, self.hardlinks.first_path_for(st))
            return

        size = st.st_size
        self._stats.files += 1
        self._stats.bytes += size
        self.observer.on_file_visited(path, size)

        self.bucketer.classify(path, size)

    def visit_all(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.visit(path)

    def stats(self) -> RunStats:
        """Snapshot of the run counters."""
        return self._stats.copy()

    def duplicates(self) -> List[DuplicateGroup]:
        """Groups of two or more identical files, largest first."""
        return self.index.duplicates()
