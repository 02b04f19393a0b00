# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from checkerframework.jvm.coordinate import Coordinate


def test_to_coord_str() -> None:
    coordinate = Coordinate("org.checkerframework", "checker-qual", "3.52.1")
    assert coordinate.to_coord_str() == "org.checkerframework:checker-qual:3.52.1"
    assert str(coordinate) == "org.checkerframework:checker-qual:3.52.1"


def test_ordering() -> None:
    older = Coordinate("org.checkerframework", "checker", "3.51.0")
    newer = Coordinate("org.checkerframework", "checker", "3.52.1")
    assert sorted([newer, older]) == [older, newer]
