"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hardlinks.py
Gate that lets each hard-linked storage object through once per run.
"""

import os
from typing import Dict, Optional

from lsdup.core.models import Admission, HardlinkRecord, PhysicalIdentity


class HardlinkTracker:
    """
    Remembers every (device, inode) with more than one link that was admitted.
    Later directory entries pointing at the same storage are suppressed: they are
    not counted, not bucketed, not hashed and never reported.
    """

    def __init__(self):
        self._records: Dict[PhysicalIdentity, HardlinkRecord] = {}

    def admit(self, path: str, st: os.stat_result) -> Admission:
        if st.st_nlink <= 1:
            return Admission.ADMITTED

        identity = PhysicalIdentity.from_stat(st)
        if identity is None:
            return Admission.ADMITTED

        if identity in self._records:
            return Admission.SUPPRESSED

        self._records[identity] = HardlinkRecord(length=st.st_size, first_path=path)
        return Admission.ADMITTED

    def record(self, identity: PhysicalIdentity) -> Optional[HardlinkRecord]:
        return self._records.get(identity)

    def first_path_for(self, st: os.stat_result) -> Optional[str]:
        """Path admitted for the storage object behind `st`, if any."""
        identity = PhysicalIdentity.from_stat(st)
        if identity is None:
            return None
        record = self._records.get(identity)
        return record.first_path if record else None

    def __len__(self) -> int:
        return len(self._records)
