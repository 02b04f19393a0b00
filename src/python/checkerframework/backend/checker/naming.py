# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Naming conventions used to classify compile tasks and source sets.

The plugin takes these as parameters, so a build with its own conventions can swap them out.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

TestNamePredicate = Callable[[str], bool]
CompanionTaskNamer = Callable[[str], Optional[str]]


def is_test_name_substring(name: str) -> bool:
    """Whether `test` appears anywhere in the name, ignoring case.

    `compileTestJava`, `integrationTest` and `latest` all match.
    """
    return "test" in name.lower()


# `Test` as a camelCase hump, or `test` at the start of a word, not followed by more lowercase.
# `TEST` as a whole all-caps word, possibly followed by the next camelCase hump.
_TEST_WORD_RE = re.compile(
    r"(?:(?<![A-Za-z])[Tt]est|(?<=[a-z0-9])Test)(?![a-z])"
    r"|(?<![A-Z])TEST(?![a-z]|[A-Z](?![a-z]))"
)


def is_test_name_word(name: str) -> bool:
    """Whether `test` appears as a word of the (camelCase, kebab or snake case) name.

    `compileTestJava`, `test`, `integrationTest`, `test-fixtures` and `compileTESTJava` match;
    `latest`, `contest`, `testing` and `LATEST` don't.
    """
    return _TEST_WORD_RE.search(name) is not None


_COMPILE_JAVA_RE = re.compile(r"compile(?P<source_set>\w*)Java")


def delombok_task_name(compile_task_name: str) -> str | None:
    """The name of the delombok task feeding a compile task, following the Lombok plugin.

    `compileJava` maps to `delombok`, `compileFooJava` to `delombokFoo`. Names that don't follow
    the `compile<SourceSet>Java` pattern have no companion.
    """
    match = _COMPILE_JAVA_RE.fullmatch(compile_task_name)
    if match is None:
        return None
    return f"delombok{match.group('source_set')}"
