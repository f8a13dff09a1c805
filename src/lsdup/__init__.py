"""
lsdup: list files with byte-identical contents.

Core features:
- Lazy hashing: a file is only read once another file of the same length turns up
- Full-content 256-bit digests (BLAKE3 by default, SHA-256 optional), memory-mapped for large files
- Hard-linked names of one file are counted and reported once
- Symbolic links are never followed into the results
- CLI interface plus a small library API
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("lsdup")
except Exception:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from lsdup.commands import DuplicateScanCommand
from lsdup.core import (
    ContentIdentity, DuplicateGroup, Engine, FileScannerImpl, RunStats, ScanError, ScanParams)
from lsdup.utils.convert_utils import ConvertUtils

__all__ = [
    "DuplicateScanCommand",
    "ContentIdentity",
    "DuplicateGroup",
    "Engine",
    "FileScannerImpl",
    "RunStats",
    "ScanError",
    "ScanParams",
    "ConvertUtils",
    "__version__",
]
