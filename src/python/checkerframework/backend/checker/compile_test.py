# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from checkerframework.backend.checker.compile import (
    CHECKER_FRAMEWORK_JVM_ARGS,
    CheckerFrameworkCompilerArgumentProvider,
    CheckerFrameworkJvmArgumentProvider,
    CompileDecision,
    PrepareCheckerFrameworkCompile,
    SkipReason,
    append_checkers_to_processor_arg,
    configure_compile_task,
    decide,
    parse_skip_property,
)
from checkerframework.backend.checker.manifest import WriteCheckerManifestTask
from checkerframework.backend.checker.naming import is_test_name_substring
from checkerframework.backend.checker.subsystem import ToolchainConfig
from checkerframework.build_graph.tasks import CompileOptions, JavaCompile

NULLNESS = "org.checkerframework.checker.nullness.NullnessChecker"
TAINTING = "org.x.TaintingChecker"


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), ("", True), ("true", True), ("yes", True), ("false", False), (" FALSE ", False)],
)
def test_parse_skip_property(value, expected) -> None:
    assert parse_skip_property(value) is expected


def _decide(task_name: str, config: ToolchainConfig, **kwargs) -> CompileDecision:
    kwargs.setdefault("task_enabled", None)
    kwargs.setdefault("skip_override", None)
    return decide(task_name, config, is_test_like=is_test_name_substring, **kwargs)


def test_decide() -> None:
    config = ToolchainConfig(checkers=(NULLNESS,))
    assert _decide("compileJava", config).applies
    assert _decide("compileJava", config, task_enabled=True).applies
    assert _decide("compileJava", config, task_enabled=False).skip_reason == (
        SkipReason.TASK_DISABLED
    )


def test_decide_skip() -> None:
    assert _decide("compileJava", ToolchainConfig(skip=True)).skip_reason == (
        SkipReason.SKIP_REQUESTED
    )
    assert _decide("compileJava", ToolchainConfig(), skip_override=True).skip_reason == (
        SkipReason.SKIP_REQUESTED
    )
    assert _decide("compileJava", ToolchainConfig(skip=True), skip_override=False).applies


def test_decide_exclude_tests() -> None:
    config = ToolchainConfig(exclude_tests=True)
    assert _decide("compileTestJava", config).skip_reason == SkipReason.EXCLUDED_TEST
    assert _decide("compileJava", config).applies
    assert _decide("compileTestJava", ToolchainConfig()).applies


@pytest.mark.parametrize(
    "compiler_args, expected",
    [
        ([], []),
        (["-Xlint"], ["-Xlint"]),
        (
            ["-processor", "com.foo.OtherProcessor"],
            ["-processor", f"com.foo.OtherProcessor,{TAINTING}"],
        ),
        (
            ["-Xlint", "-processor", f"{TAINTING},com.foo.OtherProcessor", "-Werror"],
            ["-Xlint", "-processor", f"{TAINTING},com.foo.OtherProcessor", "-Werror"],
        ),
        (["-processor", "a,,b"], ["-processor", f"a,,b,{TAINTING}"]),
        (["-processor", "a,"], ["-processor", f"a,{TAINTING}"]),
    ],
)
def test_append_checkers_to_processor_arg(compiler_args, expected) -> None:
    assert append_checkers_to_processor_arg(compiler_args, [TAINTING]) == expected


def test_append_checkers_to_processor_arg_without_value(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        assert append_checkers_to_processor_arg(["-processor"], [TAINTING]) == ["-processor"]
    assert "-processor without a value" in caplog.text


def test_prepare_action() -> None:
    task = JavaCompile(
        "compileJava", options=CompileOptions(compiler_args=["-processor", "com.foo.Other"])
    )
    PrepareCheckerFrameworkCompile((TAINTING,))(task)
    assert task.options.compiler_args == ["-processor", f"com.foo.Other,{TAINTING}"]
    assert task.options.fork

    unchecked = JavaCompile(
        "compileJava", options=CompileOptions(compiler_args=["-processor", "com.foo.Other"])
    )
    PrepareCheckerFrameworkCompile(())(unchecked)
    assert unchecked.options.compiler_args == ["-processor", "com.foo.Other"]
    assert unchecked.options.fork


@pytest.fixture
def manifest_task(tmp_path: Path) -> WriteCheckerManifestTask:
    return WriteCheckerManifestTask(
        "writeCheckerManifest",
        output_dir=str(tmp_path / "checkerframework"),
        config_provider=ToolchainConfig,
    )


def test_configure_compile_task(manifest_task: WriteCheckerManifestTask) -> None:
    config = ToolchainConfig(checkers=(NULLNESS,), extra_javac_args=("-Alint",))
    task = JavaCompile("compileJava")
    assert configure_compile_task(task, config, manifest_task, CompileDecision(task.name))

    assert list(task.depends_on) == [manifest_task.name]
    assert task.options.annotation_processor_path == [manifest_task.output_dir]
    assert task.options.all_compiler_args() == ["-Alint"]
    assert task.options.fork_options.jvm_argument_providers == [
        CheckerFrameworkJvmArgumentProvider()
    ]
    assert task.actions == [PrepareCheckerFrameworkCompile((NULLNESS,))]

    # The JVM arguments only apply once the action has forced a fork.
    assert task.jvm_args() == []
    task.execute()
    assert task.options.fork
    assert task.jvm_args() == list(CHECKER_FRAMEWORK_JVM_ARGS)
    assert len(CHECKER_FRAMEWORK_JVM_ARGS) == 10


def test_configure_compile_task_is_idempotent(manifest_task: WriteCheckerManifestTask) -> None:
    config = ToolchainConfig(checkers=(NULLNESS,), extra_javac_args=("-Alint",))
    task = JavaCompile("compileJava")
    for _ in range(2):
        configure_compile_task(task, config, manifest_task, CompileDecision(task.name))

    assert list(task.depends_on) == [manifest_task.name]
    assert task.options.annotation_processor_path == [manifest_task.output_dir]
    assert task.options.compiler_argument_providers == [
        CheckerFrameworkCompilerArgumentProvider(("-Alint",))
    ]
    assert len(task.options.fork_options.jvm_argument_providers) == 1
    assert len(task.actions) == 1


def test_reconfigure_replaces_settings(manifest_task: WriteCheckerManifestTask) -> None:
    task = JavaCompile("compileJava")
    decision = CompileDecision(task.name)
    configure_compile_task(task, ToolchainConfig(checkers=(NULLNESS,)), manifest_task, decision)
    configure_compile_task(
        task,
        ToolchainConfig(checkers=(TAINTING,), extra_javac_args=("-Awarns",)),
        manifest_task,
        decision,
    )
    assert task.actions == [PrepareCheckerFrameworkCompile((TAINTING,))]
    assert task.options.all_compiler_args() == ["-Awarns"]


def test_configure_without_checkers(manifest_task: WriteCheckerManifestTask) -> None:
    task = JavaCompile("compileJava")
    decision = CompileDecision(task.name)
    assert configure_compile_task(task, ToolchainConfig(), manifest_task, decision)
    assert task.options.annotation_processor_path == []
    assert list(task.depends_on) == [manifest_task.name]


def test_configure_with_processing_disabled(manifest_task: WriteCheckerManifestTask) -> None:
    task = JavaCompile("compileJava", options=CompileOptions(annotation_processor_path=None))
    configure_compile_task(
        task, ToolchainConfig(checkers=(NULLNESS,)), manifest_task, CompileDecision(task.name)
    )
    assert task.options.annotation_processor_path is None


def test_skipped_task_is_untouched(manifest_task: WriteCheckerManifestTask) -> None:
    task = JavaCompile("compileTestJava")
    decision = CompileDecision(task.name, SkipReason.EXCLUDED_TEST)
    assert not configure_compile_task(
        task, ToolchainConfig(checkers=(NULLNESS,)), manifest_task, decision
    )
    assert not task.depends_on
    assert not task.actions
    assert not task.options.compiler_argument_providers
    assert not task.options.fork_options.jvm_argument_providers
    assert task.options.annotation_processor_path == []
