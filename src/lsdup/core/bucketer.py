"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/bucketer.py
Lazy hashing by size class.

The first file of a given length is parked without being hashed. Only when a
second file of that length shows up are both hashed; every later file of that
length is hashed on arrival. A file whose length is unique in the scanned set
is therefore never read.
"""

from typing import Dict, Optional

from lsdup.core.index import DuplicateIndex
from lsdup.core.interfaces import Hasher, EngineObserver
from lsdup.core.models import RunStats
from lsdup.core.observer import NullObserver


class SizeBucketer:
    """
    Holds one pending slot per observed length and feeds the DuplicateIndex.

    A slot is either the path of the single file seen so far for that length,
    or None once that file has been flushed to the index.
    """

    def __init__(
            self,
            hasher: Hasher,
            index: DuplicateIndex,
            observer: EngineObserver = None,
            stats: RunStats = None,
    ):
        self.hasher = hasher
        self.index = index
        self.observer = observer or NullObserver()
        self.stats = stats if stats is not None else RunStats()
        self._pending: Dict[int, Optional[str]] = {}

    def classify(self, path: str, length: int) -> None:
        if length not in self._pending:
            self._pending[length] = path
            return

        pending = self._pending[length]
        if pending is not None:
            # Flushed even if hashing fails, so the path is never retried
            self._pending[length] = None
            self._hash_into_index(pending)

        self._hash_into_index(path)

    def pending_path(self, length: int) -> Optional[str]:
        return self._pending.get(length)

    def has_seen(self, length: int) -> bool:
        return length in self._pending

    def _hash_into_index(self, path: str) -> bool:
        try:
            identity = self.hasher.hash(path)
        except OSError as e:
            self.stats.errors += 1
            self.observer.on_error(path, e)
            return False

        self.stats.hashed += 1
        self.observer.on_file_hashed(path, identity)
        self.index.add(identity, path)
        return True
