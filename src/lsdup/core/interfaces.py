"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detector.
These protocols use structural typing via `typing.Protocol` so that test doubles
and alternative implementations plug in without inheritance.

Key Components:
---------------
- HashAlgorithm: Factory for incremental 256-bit digest objects (BLAKE3, SHA-256).
- Hasher: Interface for computing the ContentIdentity of a file on disk.
- FileScanner: Interface for walking roots and yielding regular file paths.
- EngineObserver: Receives notable engine events (visits, hashes, errors).
"""

from typing import Protocol, Iterator, Optional
from lsdup.core.models import ContentIdentity


# ===== Interfaces =====

class Digest(Protocol):
    """The subset of the hashlib object API the hasher relies on."""
    def update(self, data) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for digest algorithms.

    Allows plugging in different hashing functions without affecting
    the bucketing and grouping logic.
    """
    name: str
    digest_size: int

    def new(self) -> Digest:
        """Returns a fresh incremental digest object."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full contents of a file."""
    def hash(self, path: str) -> ContentIdentity:
        """
        Compute the content identity of the file at `path`.

        Raises:
            OSError: If the file cannot be opened, read or mapped.
        """
        ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems.

    Methods:
        scan: Yields paths of regular, non-symlinked files.
    """
    def scan(self) -> Iterator[str]:
        ...


class EngineObserver(Protocol):
    """
    Interface for receiving engine events.
    Keeps the engine itself free of printing and logging decisions.
    """
    def on_file_visited(self, path: str, size: int) -> None: ...

    def on_hardlink_suppressed(self, path: str, first_path: Optional[str]) -> None: ...

    def on_file_hashed(self, path: str, identity: ContentIdentity) -> None: ...

    def on_error(self, path: str, error: OSError) -> None: ...
