"""
Unit tests for HardlinkTracker.
Each (device, inode) with several links must be admitted exactly once.
"""
import os
from types import SimpleNamespace

import pytest
from lsdup.core.hardlinks import HardlinkTracker
from lsdup.core.models import Admission, PhysicalIdentity
from conftest import make_hard_link


def _stat(nlink: int, dev: int = 1, ino: int = 42, size: int = 100):
    return SimpleNamespace(st_nlink=nlink, st_dev=dev, st_ino=ino, st_size=size)


class TestHardlinkTracker:

    def test_single_link_always_admitted(self):
        tracker = HardlinkTracker()
        assert tracker.admit("/a", _stat(nlink=1)) is Admission.ADMITTED
        assert tracker.admit("/a-again", _stat(nlink=1)) is Admission.ADMITTED
        assert len(tracker) == 0  # No records for unlinked files

    def test_first_link_admitted_later_links_suppressed(self):
        tracker = HardlinkTracker()
        assert tracker.admit("/a", _stat(nlink=2)) is Admission.ADMITTED
        assert tracker.admit("/b", _stat(nlink=2)) is Admission.SUPPRESSED
        assert tracker.admit("/c", _stat(nlink=2)) is Admission.SUPPRESSED
        assert len(tracker) == 1

    def test_record_keeps_first_path_and_length(self):
        tracker = HardlinkTracker()
        tracker.admit("/first", _stat(nlink=3, size=77))
        tracker.admit("/second", _stat(nlink=3, size=77))

        record = tracker.record(PhysicalIdentity(device=1, inode=42))
        assert record.first_path == "/first"
        assert record.length == 77
        assert tracker.first_path_for(_stat(nlink=3)) == "/first"

    def test_same_inode_on_other_device_is_distinct(self):
        tracker = HardlinkTracker()
        assert tracker.admit("/a", _stat(nlink=2, dev=1)) is Admission.ADMITTED
        assert tracker.admit("/b", _stat(nlink=2, dev=2)) is Admission.ADMITTED

    def test_platform_without_inodes_never_suppresses(self):
        tracker = HardlinkTracker()
        assert tracker.admit("/a", _stat(nlink=2, ino=0)) is Admission.ADMITTED
        assert tracker.admit("/b", _stat(nlink=2, ino=0)) is Admission.ADMITTED
        assert tracker.first_path_for(_stat(nlink=2, ino=0)) is None

    def test_real_hard_links(self, temp_dir):
        original = temp_dir / "a.txt"
        original.write_bytes(b"Contents for non-duplicated data.")
        link = temp_dir / "a-hardlink.txt"
        if not make_hard_link(original, link):
            pytest.skip("Hard links not supported")

        tracker = HardlinkTracker()
        assert tracker.admit(str(original), os.stat(original)) is Admission.ADMITTED
        assert tracker.admit(str(link), os.stat(link)) is Admission.SUPPRESSED
