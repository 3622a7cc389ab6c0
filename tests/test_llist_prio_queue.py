import pytest

from opsyskit.llist_prio_queue import LListPrioQueue


def icmp(a, b):
    return a - b


def test_new_queue_is_empty():
    pq = LListPrioQueue(icmp)
    assert pq.is_empty()
    assert len(pq) == 0
    assert pq.to_list() == []


def test_remove_min_returns_in_priority_order():
    pq = LListPrioQueue(icmp)
    for prio in [5, 1, 4, 2, 3]:
        pq.insert(prio, f"v{prio}")
    out = []
    while not pq.is_empty():
        out.append(pq.remove_min())
    assert [p for p, _ in out] == sorted([5, 1, 4, 2, 3])
    assert [v for _, v in out] == [f"v{p}" for p in sorted([5, 1, 4, 2, 3])]


def test_min_does_not_remove():
    pq = LListPrioQueue(icmp)
    pq.insert(7, "seven")
    pq.insert(3, "three")
    assert pq.min() == (3, "three")
    assert len(pq) == 2


def test_equal_priorities_keep_insertion_order():
    pq = LListPrioQueue(icmp)
    pq.insert(1, "a")
    pq.insert(1, "b")
    pq.insert(0, "z")
    pq.insert(1, "c")
    assert pq.to_list() == ["z", "a", "b", "c"]


def test_iteration_matches_to_list():
    pq = LListPrioQueue(icmp)
    for prio in [9, 2, 6]:
        pq.insert(prio, prio * 10)
    assert list(pq) == pq.to_list()
    assert list(pq) == [20, 60, 90]


def test_empty_min_raises():
    with pytest.raises(IndexError):
        LListPrioQueue(icmp).min()


def test_empty_remove_min_raises():
    with pytest.raises(IndexError):
        LListPrioQueue(icmp).remove_min()


def test_clear_releases_priorities_and_values():
    freed_prios, freed_values = [], []
    pq = LListPrioQueue(icmp, freed_prios.append, freed_values.append)
    pq.insert(2, "b")
    pq.insert(1, "a")
    pq.clear()
    assert pq.is_empty()
    assert freed_prios == [1, 2]
    assert freed_values == ["a", "b"]


def test_remove_min_does_not_release():
    freed = []
    pq = LListPrioQueue(icmp, freed.append, freed.append)
    pq.insert(1, "a")
    assert pq.remove_min() == (1, "a")
    assert freed == []


def test_create_shares_comparator_and_is_empty():
    pq = LListPrioQueue(lambda a, b: b - a)
    pq.insert(1, "low")
    other = pq.create()
    assert other.is_empty()
    other.insert(1, "low")
    other.insert(5, "high")
    assert other.min() == (5, "high")
    assert len(pq) == 1


def test_string_priorities():
    def scmp(a, b):
        return (a > b) - (a < b)

    pq = LListPrioQueue(scmp)
    for word in ["pear", "apple", "fig"]:
        pq.insert(word, word.upper())
    assert pq.to_list() == ["APPLE", "FIG", "PEAR"]