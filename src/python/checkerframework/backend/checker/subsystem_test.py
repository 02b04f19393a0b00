# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from checkerframework.backend.checker.subsystem import CheckerFramework, ToolchainConfig
from checkerframework.testutil.project_util import make_options


def test_defaults() -> None:
    subsystem = CheckerFramework.create(make_options())
    assert subsystem.to_config() == ToolchainConfig()


def test_config_file_and_flags() -> None:
    options = make_options(
        """
        [checkerframework]
        checkers = ["org.checkerframework.checker.nullness.NullnessChecker"]
        extra_javac_args = ["-AsuppressWarnings=type.anno.before.modifier"]
        version = "local"
        exclude_tests = true
        incrementalize = false
        suppress_lombok_warnings = true
        """,
        flags={"checkerframework": {"skip": "true"}},
    )
    assert CheckerFramework.create(options).to_config() == ToolchainConfig(
        checkers=("org.checkerframework.checker.nullness.NullnessChecker",),
        extra_javac_args=("-AsuppressWarnings=type.anno.before.modifier",),
        version="local",
        exclude_tests=True,
        incrementalize=False,
        skip=True,
        suppress_lombok_warnings=True,
    )


def test_every_option_is_registered() -> None:
    make_options(
        """
        [checkerframework]
        checkers = []
        extra_javac_args = []
        version = "3.52.1"
        exclude_tests = false
        incrementalize = true
        suppress_lombok_warnings = false
        skip = false
        """
    ).verify_config({CheckerFramework.options_scope: CheckerFramework.registrations()})
