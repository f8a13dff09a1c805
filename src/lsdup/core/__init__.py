"""
Core duplicate detection engine: hasher, hard link gate, size bucketer,
duplicate index, engine and directory scanner.

This package contains the performance-critical foundation of lsdup:
- ContentHasherImpl: full-content BLAKE3/SHA-256 hashing (mmap or streamed)
- HardlinkTracker: admits each (device, inode) once per run
- SizeBucketer: defers hashing until two files share a length
- DuplicateIndex: content identity -> paths, largest first
- Engine: `visit(path)` entry point plus run statistics
- FileScannerImpl: symlink-free directory walker feeding the engine

All components are pure Python with no terminal dependencies, suitable for CLI and library usage.
"""

from .models import (
    Admission, ContentIdentity, PhysicalIdentity, HardlinkRecord,
    DuplicateGroup, RunStats, ScanParams)
from .errors import LsdupError, ScanError
from .hasher import ContentHasherImpl, Blake3AlgorithmImpl, Sha256AlgorithmImpl, get_algorithm
from .hardlinks import HardlinkTracker
from .index import DuplicateIndex
from .bucketer import SizeBucketer
from .observer import LoggingObserver, NullObserver
from .engine import Engine
from .scanner import FileScannerImpl

__all__ = [
    "Admission",
    "ContentIdentity",
    "PhysicalIdentity",
    "HardlinkRecord",
    "DuplicateGroup",
    "RunStats",
    "ScanParams",
    "LsdupError",
    "ScanError",
    "ContentHasherImpl",
    "Blake3AlgorithmImpl",
    "Sha256AlgorithmImpl",
    "get_algorithm",
    "HardlinkTracker",
    "DuplicateIndex",
    "SizeBucketer",
    "LoggingObserver",
    "NullObserver",
    "Engine",
    "FileScannerImpl",
]
