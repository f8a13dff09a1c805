"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
Maps content identities to the paths that resolved to them.
"""

from typing import Dict, List

from lsdup.core.models import ContentIdentity, DuplicateGroup


class DuplicateIndex:
    """
    ContentIdentity -> paths, in the order the paths were added.

    Reading the index always yields groups in reporting order: largest
    length first, ties broken by descending digest.
    """

    def __init__(self):
        self._paths: Dict[ContentIdentity, List[str]] = {}

    def add(self, identity: ContentIdentity, path: str) -> None:
        self._paths.setdefault(identity, []).append(path)

    def paths_for(self, identity: ContentIdentity) -> List[str]:
        return list(self._paths.get(identity, []))

    def groups(self) -> List[DuplicateGroup]:
        """All groups, including single-member ones."""
        return [
            DuplicateGroup(identity=identity, paths=list(self._paths[identity]))
            for identity in sorted(self._paths)
        ]

    def duplicates(self) -> List[DuplicateGroup]:
        """Groups with at least two members."""
        return [group for group in self.groups() if group.is_duplicate()]

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, identity: ContentIdentity) -> bool:
        return identity in self._paths
