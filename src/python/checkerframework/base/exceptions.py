# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations


class CheckerFrameworkException(Exception):
    """Base exception type for the Checker Framework build plugin."""


class ConfigurationError(CheckerFrameworkException):
    """Indicates a fatal problem with how the Checker Framework was configured for a build.

    Raised synchronously while the build is being configured. The message is meant to be shown to
    the invoking user verbatim.
    """


class BuildGraphError(CheckerFrameworkException):
    """Indicates a misuse of the build model (tasks, configurations, source sets)."""


class UnknownDomainObjectError(BuildGraphError):
    def __init__(self, kind: str, name: str, known: tuple[str, ...] = ()) -> None:
        self.kind = kind
        self.name = name
        msg = f"No {kind} named `{name}` has been registered."
        if known:
            msg += f" Known {kind}s: {', '.join(known)}."
        super().__init__(msg)


class DuplicateDomainObjectError(BuildGraphError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"A {kind} named `{name}` has already been registered.")


class TaskGraphCycleError(BuildGraphError):
    def __init__(self, cycle: tuple[str, ...]) -> None:
        self.cycle = cycle
        super().__init__(f"Task dependency cycle detected: {' -> '.join(cycle)}")
