"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate detection: content and physical identities,
hard link records, duplicate groups, run statistics and scan parameters.
"""

import functools
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from lsdup.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class Admission(Enum):
    """
    Outcome of the hard link gate for a single visited file.
    """
    ADMITTED = "admitted"
    SUPPRESSED = "suppressed"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@functools.total_ordering
@dataclass(frozen=True, eq=True)
class ContentIdentity:
    """
    Identifies file contents by length and a 256-bit digest of the full bytes.

    Ordering puts the largest files first: descending length, then
    descending digest bytes. ``a < b`` means ``a`` is reported before ``b``.
    """
    length: int
    digest: bytes

    def __post_init__(self):
        if self.length < 0:
            raise ValueError("Length cannot be negative")
        if not isinstance(self.digest, bytes):
            raise ValueError("Digest must be bytes")

    def __lt__(self, other: "ContentIdentity") -> bool:
        if not isinstance(other, ContentIdentity):
            return NotImplemented
        return (self.length, self.digest) > (other.length, other.digest)

    def to_hex(self) -> str:
        return self.digest.hex()

    def __repr__(self):
        return f"<ContentIdentity length={self.length}, digest={self.to_hex()[:16]}>"


@dataclass(frozen=True)
class PhysicalIdentity:
    """
    Device and inode pair naming the storage object behind a directory entry.
    """
    device: int
    inode: int

    @staticmethod
    def from_stat(st: os.stat_result) -> Optional["PhysicalIdentity"]:
        """
        Build the identity from stat metadata.
        Returns None where the platform reports no inode, so the file never
        matches any other file.
        """
        inode = getattr(st, "st_ino", 0)
        if not inode:
            return None
        return PhysicalIdentity(device=st.st_dev, inode=inode)


@dataclass(frozen=True)
class HardlinkRecord:
    """First admitted occurrence of a hard-linked storage object."""
    length: int
    first_path: str


@dataclass
class DuplicateGroup:
    """
    Paths that share one ContentIdentity, in visitation order.
    """
    identity: ContentIdentity
    paths: List[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Size of each file in the group."""
        return self.identity.length

    @property
    def duplicate_count(self) -> int:
        return len(self.paths)

    @property
    def wasted_bytes(self) -> int:
        """Bytes taken by every copy beyond the first."""
        if not self.paths:
            return 0
        return self.size * (len(self.paths) - 1)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.paths)}>"


@dataclass
class RunStats:
    """
    Counters collected while visiting files.
    Hard-linked repeats are never counted in files or bytes.
    """
    files: int = 0
    bytes: int = 0
    hashed: int = 0
    errors: int = 0

    def copy(self) -> "RunStats":
        return RunStats(files=self.files, bytes=self.bytes, hashed=self.hashed, errors=self.errors)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic, used by both the CLI and library callers.
"""

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_MMAP_THRESHOLD = 16 * 1024


@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    roots: List[str]
    algorithm: str = "blake3"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    mmap_threshold: int = DEFAULT_MMAP_THRESHOLD
    strict: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.roots:
            raise ValueError("At least one root directory is required")

        if any(not root for root in self.roots):
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.mmap_threshold < 0:
            raise ValueError("Memory-map threshold cannot be negative")

        # Late import: hasher imports models
        from lsdup.core.hasher import get_algorithm
        get_algorithm(self.algorithm)
        self.algorithm = self.algorithm.lower()

    @staticmethod
    def from_human_readable(
            roots: List[str],
            chunk_size_str: str = "64K",
            algorithm: str = "blake3",
            strict: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        chunk_size = ConvertUtils.human_to_bytes(chunk_size_str)

        return ScanParams(
            roots=list(roots),
            algorithm=algorithm,
            chunk_size=chunk_size,
            strict=strict,
        )
