# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from checkerframework.option.option_types import BoolOption, StrListOption, StrOption
from checkerframework.option.subsystem import Subsystem
from checkerframework.util.strutil import softwrap


class CheckerFramework(Subsystem):
    options_scope = "checkerframework"
    help = "Run the Checker Framework's pluggable type checkers as part of Java compilation."

    checkers = StrListOption(
        help=softwrap(
            """
            Which checkers will be run. Each element is a fully-qualified class name, such as
            `org.checkerframework.checker.nullness.NullnessChecker`. The order is kept in the
            generated processor list.
            """
        ),
    )
    extra_javac_args = StrListOption(
        help="Extra command-line options to pass directly to javac when running typecheckers.",
    )
    version = StrOption(
        default=None,
        help=softwrap(
            """
            Which version of the Checker Framework to use. If set to `local`, use the Checker
            Framework installation at the `$CHECKERFRAMEWORK` environment variable. If set to
            `dependencies` (or `disable`), no default dependency is added and the build is expected
            to declare the `checker` and `checker-qual` jars itself. Defaults to the version this
            plugin was released with.
            """
        ),
    )
    exclude_tests = BoolOption(
        default=False,
        help="If true, don't run the Checker Framework on tests.",
    )
    incrementalize = BoolOption(
        default=True,
        help=softwrap(
            """
            If true, declare every checker as an isolating incremental annotation processor. Turn
            this off if a checker crashes because the build wraps some javac APIs.
            """
        ),
    )
    suppress_lombok_warnings = BoolOption(
        default=False,
        help=softwrap(
            """
            If true, have delombok generate `@SuppressWarnings("all")` on Lombok-generated code.
            That is Lombok's default, but it can hide unsoundness from the Checker Framework.
            """
        ),
    )
    skip = BoolOption(
        default=False,
        help="If true, don't run the Checker Framework on any compile task.",
    )

    def to_config(self) -> ToolchainConfig:
        return ToolchainConfig(
            checkers=tuple(self.checkers),
            extra_javac_args=tuple(self.extra_javac_args),
            version=self.version,
            exclude_tests=self.exclude_tests,
            incrementalize=self.incrementalize,
            skip=self.skip,
            suppress_lombok_warnings=self.suppress_lombok_warnings,
        )


@dataclass(frozen=True)
class ToolchainConfig:
    """A snapshot of the Checker Framework settings, taken when a compile task is configured."""

    checkers: tuple[str, ...] = ()
    extra_javac_args: tuple[str, ...] = ()
    version: Optional[str] = None
    exclude_tests: bool = False
    incrementalize: bool = True
    skip: bool = False
    suppress_lombok_warnings: bool = False


@dataclass
class CheckerFrameworkCompileExtension:
    """Per-compile-task settings. `enabled=False` opts a single task out."""

    enabled: Optional[bool] = None
