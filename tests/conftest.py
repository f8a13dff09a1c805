"""
Shared fixtures for lsdup tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List
import sys

# Add src/ to sys.path so 'lsdup' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from lsdup.core.hasher import ContentHasherImpl
from lsdup.core.models import ContentIdentity


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - 2 identical files of 1KB (duplicates)
    - 2 identical files of 32KB (duplicates, large enough to be memory-mapped)
    - 2 files of 1500 bytes with different content (same size, not duplicates)
    - 1 file with a unique size (never hashed)
    - 1 copy of the 1KB content in a subdirectory
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = bytes(range(256)) * 128  # 32KB
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["same_size_1"] = temp_dir / "same_size_1.txt"
    files["same_size_2"] = temp_dir / "same_size_2.txt"
    files["same_size_1"].write_bytes(b"C" * 1500)
    files["same_size_2"].write_bytes(b"D" * 1500)

    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"E" * 2500)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


class SpyHasher:
    """Records every path handed to the hasher; optionally fails for chosen paths."""

    def __init__(self, inner=None, failing: List[str] = None):
        self.inner = inner or ContentHasherImpl()
        self.failing = set(failing or [])
        self.calls: List[str] = []

    def hash(self, path: str) -> ContentIdentity:
        self.calls.append(path)
        if path in self.failing:
            raise PermissionError(f"Permission denied: {path}")
        return self.inner.hash(path)


@pytest.fixture
def spy_hasher():
    return SpyHasher()


def make_hard_link(src: Path, dst: Path) -> bool:
    """Create a hard link, returning False where the filesystem refuses."""
    try:
        os.link(src, dst)
        return True
    except (OSError, NotImplementedError, AttributeError):
        return False


def make_symlink(src: Path, dst: Path) -> bool:
    """Create a symbolic link, returning False where the OS refuses."""
    try:
        dst.symlink_to(src)
        return True
    except (OSError, NotImplementedError):
        return False
