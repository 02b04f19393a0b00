# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from checkerframework.util.strutil import capitalize_first, pluralize, softwrap


def test_pluralize() -> None:
    assert "1 checker" == pluralize(1, "checker")
    assert "2 checkers" == pluralize(2, "checker")
    assert "0 classes" == pluralize(0, "class")
    assert "2 dependencies" == pluralize(2, "dependency")
    assert "dependencies" == pluralize(2, "dependency", include_count=False)


def test_capitalize_first() -> None:
    assert "IntegrationTest" == capitalize_first("integrationTest")
    assert "" == capitalize_first("")


def test_softwrap() -> None:
    assert (
        softwrap(
            """
            The Checker Framework version is `local`, but the
            `CHECKERFRAMEWORK` environment variable is not set.

            Point it at a checkout.
            """
        )
        == "The Checker Framework version is `local`, but the `CHECKERFRAMEWORK` environment "
        "variable is not set.\n\nPoint it at a checkout."
    )


def test_softwrap_keeps_bullets() -> None:
    assert softwrap("Known:\n  * a\n  * b") == "Known:\n  * a\n  * b"
