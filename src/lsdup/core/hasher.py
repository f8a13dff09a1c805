"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content hashing with pluggable 256-bit digest algorithms.

Files of at least `mmap_threshold` bytes are memory-mapped and fed to the
digest in one call; smaller files (including empty ones) and files too large
to map are streamed in `chunk_size` reads. Both paths digest the exact same
byte sequence, so they always agree.
"""

import hashlib
import mmap
import os
import sys
from typing import Dict

import blake3

from lsdup.core.interfaces import HashAlgorithm, Digest
from lsdup.core.models import ContentIdentity, DEFAULT_CHUNK_SIZE, DEFAULT_MMAP_THRESHOLD


# Use the same way to implement and use any other hashing algorithm
class Blake3AlgorithmImpl(HashAlgorithm):
    name = "blake3"
    digest_size = 32

    def new(self) -> Digest:
        return blake3.blake3()


class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"
    digest_size = 32

    def new(self) -> Digest:
        return hashlib.sha256()


ALGORITHMS: Dict[str, HashAlgorithm] = {
    Blake3AlgorithmImpl.name: Blake3AlgorithmImpl(),
    Sha256AlgorithmImpl.name: Sha256AlgorithmImpl(),
}


def get_algorithm(name: str) -> HashAlgorithm:
    """Look up a registered algorithm by case-insensitive name."""
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash algorithm: '{name}'. "
            f"Supported: {', '.join(sorted(ALGORITHMS))}"
        )


class ContentHasherImpl:
    """
    Computes the ContentIdentity of a file.
    Uses an injected HashAlgorithm for flexibility and testability.
    """

    def __init__(
            self,
            algorithm: HashAlgorithm = None,
            chunk_size: int = DEFAULT_CHUNK_SIZE,
            mmap_threshold: int = DEFAULT_MMAP_THRESHOLD,
    ):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Blake3AlgorithmImpl()
        self.chunk_size = chunk_size
        self.mmap_threshold = mmap_threshold

    def hash(self, path: str) -> ContentIdentity:
        """
        Hash the full contents of `path`.
        OSError from open, fstat, read or mmap propagates to the caller.
        """
        with open(path, "rb") as f:
            length = os.fstat(f.fileno()).st_size
            if self.should_map(length):
                digest = self.hash_mapped(f, length)
            else:
                digest = self.hash_streamed(f)
        return ContentIdentity(length=length, digest=digest)

    def should_map(self, length: int) -> bool:
        # mmap rejects empty files
        return max(self.mmap_threshold, 1) <= length <= sys.maxsize

    def hash_mapped(self, f, length: int) -> bytes:
        """Maps the file read-only and digests the whole region at once."""
        hasher = self.algorithm.new()
        try:
            mm = mmap.mmap(f.fileno(), length, access=mmap.ACCESS_READ)
        except ValueError as e:
            # File shrank after fstat
            raise OSError(f"Cannot map {f.name}: {e}") from e
        with mm:
            hasher.update(mm)
        return hasher.digest()

    def hash_streamed(self, f) -> bytes:
        """Feeds the file to the digest in fixed-size chunks."""
        hasher = self.algorithm.new()
        for chunk in iter(lambda: f.read(self.chunk_size), b""):
            hasher.update(chunk)
        return hasher.digest()
