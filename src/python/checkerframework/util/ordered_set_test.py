# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import pytest

from checkerframework.util.ordered_set import OrderedSet


def test_stable_order() -> None:
    set1 = OrderedSet("abracadabra")
    assert len(set1) == 5
    assert list(set1) == ["a", "b", "r", "c", "d"]


def test_contains() -> None:
    set1 = OrderedSet("abracadabra")
    assert "a" in set1
    assert "z" not in set1


def test_equality() -> None:
    assert OrderedSet([1, 2]) == OrderedSet([1, 2])
    assert OrderedSet([1, 2]) != OrderedSet([2, 1])
    assert OrderedSet([1, 2]) != [1, 2]


def test_repr() -> None:
    assert repr(OrderedSet()) == "OrderedSet()"
    assert repr(OrderedSet("ab")) == "OrderedSet(['a', 'b'])"


def test_mutation() -> None:
    set1: OrderedSet[str] = OrderedSet()
    set1.add("b")
    set1.add("a")
    set1.add("b")
    assert list(set1) == ["b", "a"]
    set1.update(["c", "a"])
    assert list(set1) == ["b", "a", "c"]
    set1.discard("a")
    set1.discard("missing")
    assert list(set1) == ["b", "c"]
    set1.remove("b")
    with pytest.raises(KeyError):
        set1.remove("b")
    set1.clear()
    assert not set1
