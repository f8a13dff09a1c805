"""
Unit tests for DuplicateIndex.
Verifies group minimality and the largest-first reporting order.
"""
from lsdup.core.index import DuplicateIndex
from lsdup.core.models import ContentIdentity


def _id(length: int, fill: int) -> ContentIdentity:
    return ContentIdentity(length=length, digest=bytes([fill]) * 32)


class TestDuplicateIndex:

    def test_paths_kept_in_insertion_order(self):
        index = DuplicateIndex()
        identity = _id(10, 1)
        for path in ("/z", "/a", "/m"):
            index.add(identity, path)

        assert index.paths_for(identity) == ["/z", "/a", "/m"]
        assert identity in index

    def test_duplicates_filters_single_member_groups(self):
        index = DuplicateIndex()
        index.add(_id(10, 1), "/a")
        index.add(_id(10, 1), "/b")
        index.add(_id(10, 2), "/c")

        duplicates = index.duplicates()

        assert len(index) == 2
        assert len(duplicates) == 1
        assert all(len(group.paths) >= 2 for group in duplicates)

    def test_ordered_by_descending_length_then_digest(self):
        index = DuplicateIndex()
        for identity in (_id(5, 9), _id(500, 1), _id(5, 200), _id(50, 3)):
            index.add(identity, "/one")
            index.add(identity, "/two")

        order = [(g.identity.length, g.identity.digest[0]) for g in index.duplicates()]

        assert order == [(500, 1), (50, 3), (5, 200), (5, 9)]

    def test_ordering_is_idempotent(self):
        index = DuplicateIndex()
        for length in (3, 300, 30):
            for fill in (7, 70):
                index.add(_id(length, fill), "/x")
                index.add(_id(length, fill), "/y")

        identities = [g.identity for g in index.duplicates()]

        assert sorted(identities) == identities
        assert identities == sorted(identities, key=lambda i: (i.length, i.digest), reverse=True)

    def test_groups_are_copies(self):
        index = DuplicateIndex()
        index.add(_id(1, 1), "/a")
        index.groups()[0].paths.append("/mutated")
        assert index.paths_for(_id(1, 1)) == ["/a"]
