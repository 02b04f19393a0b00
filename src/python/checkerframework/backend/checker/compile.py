# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Configures `JavaCompile` tasks to run the Checker Framework.

Configuring a task is split in two: `decide` is a pure function of the settings and the task's
name, and `configure_compile_task` applies a positive decision to the task. Applying the same
decision twice leaves the task exactly as applying it once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from checkerframework.backend.checker.manifest import WriteCheckerManifestTask
from checkerframework.backend.checker.naming import TestNamePredicate
from checkerframework.backend.checker.subsystem import ToolchainConfig
from checkerframework.build_graph.tasks import JavaCompile, Task

logger = logging.getLogger(__name__)

SKIP_PROPERTY = "skipCheckerFramework"
PROCESSOR_FLAG = "-processor"

# The Checker Framework reaches into javac internals. These only take effect in a forked javac.
CHECKER_FRAMEWORK_JVM_ARGS = (
    "--add-exports=jdk.compiler/com.sun.tools.javac.api=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.code=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.file=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.main=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.model=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.parser=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.processing=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.tree=ALL-UNNAMED",
    "--add-exports=jdk.compiler/com.sun.tools.javac.util=ALL-UNNAMED",
    "--add-opens=jdk.compiler/com.sun.tools.javac.comp=ALL-UNNAMED",
)


@dataclass(frozen=True)
class CheckerFrameworkCompilerArgumentProvider:
    """Supplies `extra_javac_args` verbatim, after the task's own `compiler_args`."""

    extra_javac_args: tuple[str, ...] = ()

    def as_arguments(self) -> Iterable[str]:
        return self.extra_javac_args


@dataclass(frozen=True)
class CheckerFrameworkJvmArgumentProvider:
    def as_arguments(self) -> Iterable[str]:
        return CHECKER_FRAMEWORK_JVM_ARGS


def parse_skip_property(value: str | None) -> bool | None:
    """Reads the `skipCheckerFramework` project property.

    Absent means "no override". Any value other than `false` (including an empty `-P` flag) skips.
    """
    if value is None:
        return None
    return value.strip().lower() != "false"


class SkipReason(Enum):
    TASK_DISABLED = "disabled for this task"
    SKIP_REQUESTED = "skip requested"
    EXCLUDED_TEST = "tests are excluded"


@dataclass(frozen=True)
class CompileDecision:
    task_name: str
    skip_reason: SkipReason | None = None

    @property
    def applies(self) -> bool:
        return self.skip_reason is None


def decide(
    task_name: str,
    config: ToolchainConfig,
    *,
    task_enabled: bool | None,
    skip_override: bool | None,
    is_test_like: TestNamePredicate,
) -> CompileDecision:
    """Whether the Checker Framework runs for the named compile task.

    Checked in order: the per-task `enabled` setting, the global skip (the project property wins
    over the `skip` option when present), and the test exclusion.
    """
    if task_enabled is False:
        return CompileDecision(task_name, SkipReason.TASK_DISABLED)
    skip = config.skip if skip_override is None else skip_override
    if skip:
        return CompileDecision(task_name, SkipReason.SKIP_REQUESTED)
    if config.exclude_tests and is_test_like(task_name):
        return CompileDecision(task_name, SkipReason.EXCLUDED_TEST)
    return CompileDecision(task_name)


def append_checkers_to_processor_arg(
    compiler_args: Sequence[str], checkers: Sequence[str]
) -> list[str]:
    """Returns `compiler_args` with the checkers appended to an explicit `-processor` value.

    An explicit `-processor` turns off processor auto-discovery, so the checkers must be named there
    too. The existing value is kept as written, and checkers it already lists are not appended
    again. A trailing `-processor` with no value is left alone, with a warning.
    """
    args = list(compiler_args)
    try:
        index = args.index(PROCESSOR_FLAG)
    except ValueError:
        return args
    if index + 1 >= len(args):
        logger.warning(
            "Found %s without a value in the javac arguments; not adding the Checker Framework "
            "checkers to it.",
            PROCESSOR_FLAG,
        )
        return args
    value = args[index + 1]
    existing = set(value.split(","))
    missing = [checker for checker in checkers if checker not in existing]
    if missing:
        separator = "" if not value or value.endswith(",") else ","
        args[index + 1] = value + separator + ",".join(missing)
    return args


@dataclass(frozen=True)
class PrepareCheckerFrameworkCompile:
    """The action that runs right before a configured compile task executes.

    It sees the final `compiler_args`, after every build script has had its say.
    """

    checkers: tuple[str, ...]

    def __call__(self, task: Task) -> None:
        assert isinstance(task, JavaCompile)
        if self.checkers:
            task.options.compiler_args = append_checkers_to_processor_arg(
                task.options.compiler_args, self.checkers
            )
        # Must fork for the JVM arguments to be applied.
        task.options.fork = True


def _add_once(providers: list, provider) -> None:
    """Adds `provider`, replacing any earlier provider of the same type."""
    providers[:] = [p for p in providers if type(p) is not type(provider)]
    providers.append(provider)


def configure_compile_task(
    task: JavaCompile,
    config: ToolchainConfig,
    manifest_task: WriteCheckerManifestTask,
    decision: CompileDecision,
) -> bool:
    """Applies the Checker Framework to a compile task. Returns whether anything was applied."""
    if not decision.applies:
        assert decision.skip_reason is not None
        logger.debug(
            "Not running the Checker Framework for %s: %s.", task.name, decision.skip_reason.value
        )
        return False

    task.depend_on(manifest_task)
    _add_once(
        task.options.compiler_argument_providers,
        CheckerFrameworkCompilerArgumentProvider(config.extra_javac_args),
    )
    _add_once(
        task.options.fork_options.jvm_argument_providers, CheckerFrameworkJvmArgumentProvider()
    )

    if config.checkers:
        processor_path = task.options.annotation_processor_path
        if processor_path is not None and manifest_task.output_dir not in processor_path:
            processor_path.append(manifest_task.output_dir)
    else:
        logger.debug("No checkers configured for %s; leaving its processor path alone.", task.name)

    # Replace an action left by an earlier configuration pass with different checkers.
    task.actions[:] = [a for a in task.actions if not isinstance(a, PrepareCheckerFrameworkCompile)]
    task.do_first(PrepareCheckerFrameworkCompile(config.checkers))
    logger.debug("Configured %s to run the Checker Framework.", task.name)
    return True
