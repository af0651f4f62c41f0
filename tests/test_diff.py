from datetime import datetime, timezone

import pytest

from protobom.sbom.diff import diff_dates, diff_list, diff_map, diff_slice, diff_values
from protobom.sbom.enums import ExternalReferenceType, HashAlgorithm
from protobom.sbom.person import ExternalReference, Person


@pytest.mark.parametrize(
    ("v1", "v2", "added", "removed", "count"),
    [
        ("a", "a", "", "", 0),
        ("", "a", "a", "", 1),
        ("a", "", "", "a", 1),
    ],
)
def test_diff_string(v1, v2, added, removed, count):
    assert diff_values(v1, v2) == (added, removed, count)


def test_diff_values_replacement_reports_new_value():
    assert diff_values("old", "new") == ("new", "", 1)


def test_diff_values_ints():
    assert diff_values(3, 0) == (0, 3, 1)
    assert diff_values(0, 3) == (3, 0, 1)


@pytest.mark.parametrize(
    ("arr1", "arr2", "added", "removed", "count"),
    [
        (["a", "b"], ["a", "b"], [], [], 0),
        ([], ["a"], ["a"], [], 1),
        (["a"], ["a", "b"], ["b"], [], 1),
        (["a", "b"], [], [], ["a", "b"], 1),
        (["a", "b"], ["b"], [], ["a"], 1),
    ],
)
def test_diff_str_slice(arr1, arr2, added, removed, count):
    assert diff_slice(arr1, arr2) == (added, removed, count)


T1 = datetime(2023, 11, 15, 13, 30, tzinfo=timezone.utc)
T2 = datetime(2000, 1, 1, 13, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("d1", "d2", "added", "removed", "count"),
    [
        (T1, T1, None, None, 0),
        (None, None, None, None, 0),
        (T1, T2, T2, None, 1),
        (T2, None, None, T2, 1),
        (None, T1, T1, None, 1),
    ],
)
def test_diff_dates(d1, d2, added, removed, count):
    assert diff_dates(d1, d2) == (added, removed, count)


def test_diff_dates_ignores_subsecond_changes():
    later = T1.replace(microsecond=500000)
    assert diff_dates(T1, later) == (None, None, 0)


P1 = Person(name="Corelia Enterprises", is_org=True)
P2 = Person(name="Turbowind Enterprises", is_org=True)
P3 = Person(name="Inky")


@pytest.mark.parametrize(
    ("list1", "list2", "added", "removed", "count"),
    [
        ([P1, P2], [P1, P2], [], [], 0),
        ([P1], [P1, P2], [P2], [], 1),
        ([P1, P2], [P1], [], [P2], 1),
        ([P1, P2], [P1, P3], [P3], [P2], 1),
    ],
)
def test_diff_person_list(list1, list2, added, removed, count):
    assert diff_list(list1, list2) == (added, removed, count)


ER1 = ExternalReference(url="https://example.com/", type=ExternalReferenceType.VCS)
ER2 = ExternalReference(url="https://example.net/", type=ExternalReferenceType.VCS)
ER3 = ExternalReference(url="https://example.org/", type=ExternalReferenceType.VCS)


@pytest.mark.parametrize(
    ("list1", "list2", "added", "removed", "count"),
    [
        ([ER1, ER2], [ER1, ER2], [], [], 0),
        ([ER1], [ER1, ER2], [ER2], [], 1),
        ([ER1, ER2], [ER1], [], [ER2], 1),
        ([ER1, ER2], [ER1, ER3], [ER3], [ER2], 1),
    ],
)
def test_diff_ext_ref_list(list1, list2, added, removed, count):
    assert diff_list(list1, list2) == (added, removed, count)


SHA1 = int(HashAlgorithm.SHA1)
SHA256 = int(HashAlgorithm.SHA256)
M1 = {
    SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8",
    SHA256: "d02b22ab7fc76fe2a17e768b180bf5048889dbcae3a6d7e4a889a916848e5d11",
}
M2 = {
    SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8",
    SHA256: "a8a20fe2e556080457d718930bfe1f423100952fdb3cffe9b1f0831be96fd85e",
}


@pytest.mark.parametrize(
    ("map1", "map2", "added", "removed", "count"),
    [
        (M1, M1, {}, {}, 0),
        (
            M1,
            M2,
            {SHA256: "a8a20fe2e556080457d718930bfe1f423100952fdb3cffe9b1f0831be96fd85e"},
            {},
            1,
        ),
        (
            M1,
            {SHA256: "d02b22ab7fc76fe2a17e768b180bf5048889dbcae3a6d7e4a889a916848e5d11"},
            {},
            {SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8"},
            1,
        ),
        (
            M1,
            {SHA256: "a8a20fe2e556080457d718930bfe1f423100952fdb3cffe9b1f0831be96fd85e"},
            {SHA256: "a8a20fe2e556080457d718930bfe1f423100952fdb3cffe9b1f0831be96fd85e"},
            {SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8"},
            1,
        ),
    ],
)
def test_diff_int_str_map(map1, map2, added, removed, count):
    assert diff_map(map1, map2) == (added, removed, count)