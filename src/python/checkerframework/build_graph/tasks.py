# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import shlex
from typing import Any, Callable, Iterable

from typing_extensions import Protocol

from checkerframework.util.ordered_set import OrderedSet

logger = logging.getLogger(__name__)


class CommandLineArgumentProvider(Protocol):
    """Supplies arguments that are only computed when the command line is rendered."""

    def as_arguments(self) -> Iterable[str]:
        ...


TaskAction = Callable[["Task"], None]


class Task:
    """A unit of work in the build graph."""

    def __init__(self, name: str, *, description: str = "") -> None:
        self.name = name
        self.description = description
        self.enabled = True
        self.depends_on: OrderedSet[str] = OrderedSet()
        self.extensions: dict[str, Any] = {}
        self.actions: list[TaskAction] = []
        self.did_work = False

    def depend_on(self, *tasks: Task | str) -> None:
        for task in tasks:
            self.depends_on.add(task if isinstance(task, str) else task.name)

    def do_first(self, action: TaskAction) -> None:
        """Prepends an action to run before the task's own work.

        Registering an action equal to one already registered is a no-op.
        """
        if action not in self.actions:
            self.actions.insert(0, action)

    def execute(self) -> None:
        if not self.enabled:
            logger.debug("Task %s is disabled.", self.name)
            return
        for action in self.actions:
            action(self)
        self.run()
        self.did_work = True

    def run(self) -> None:
        """The task's own work. Subclasses override."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ForkOptions:
    def __init__(self) -> None:
        self.jvm_args: list[str] = []
        self.jvm_argument_providers: list[CommandLineArgumentProvider] = []

    def all_jvm_args(self) -> list[str]:
        args = list(self.jvm_args)
        for provider in self.jvm_argument_providers:
            args.extend(provider.as_arguments())
        return args


class CompileOptions:
    """Options for one `JavaCompile` task.

    `annotation_processor_path` of None means annotation processing is disabled for the task.
    """

    def __init__(
        self,
        *,
        compiler_args: Iterable[str] = (),
        annotation_processor_path: Iterable[str] | None = (),
        fork: bool = False,
    ) -> None:
        self.compiler_args: list[str] = list(compiler_args)
        self.compiler_argument_providers: list[CommandLineArgumentProvider] = []
        self.annotation_processor_path: list[str] | None = (
            None if annotation_processor_path is None else list(annotation_processor_path)
        )
        self.fork = fork
        self.fork_options = ForkOptions()

    def all_compiler_args(self) -> list[str]:
        args = list(self.compiler_args)
        for provider in self.compiler_argument_providers:
            args.extend(provider.as_arguments())
        return args


class JavaCompile(Task):
    """Compiles Java sources. Only the command line is modelled here."""

    def __init__(
        self,
        name: str,
        *,
        source: Iterable[str] = (),
        destination_dir: str | None = None,
        options: CompileOptions | None = None,
        description: str = "",
    ) -> None:
        super().__init__(name, description=description)
        self.source: tuple[str, ...] = tuple(source)
        self.destination_dir = destination_dir
        self.options = options or CompileOptions()

    def command_line(self) -> list[str]:
        argv = self.options.all_compiler_args()
        processor_path = self.options.annotation_processor_path
        if processor_path is None:
            argv.append("-proc:none")
        elif processor_path:
            argv.extend(["-processorpath", os.pathsep.join(processor_path)])
        if self.destination_dir:
            argv.extend(["-d", self.destination_dir])
        argv.extend(self.source)
        return argv

    def jvm_args(self) -> list[str]:
        """JVM arguments only take effect when compilation happens in a forked process."""
        if not self.options.fork:
            return []
        return self.options.fork_options.all_jvm_args()

    def run(self) -> None:
        logger.debug(
            "%s: javac %s (fork=%s, jvm args: %s)",
            self.name,
            shlex.join(self.command_line()),
            self.options.fork,
            shlex.join(self.jvm_args()),
        )


class DelombokTask(Task):
    """Produces plain Java sources from Lombok-annotated ones into `output_dir`."""

    def __init__(
        self,
        name: str,
        *,
        output_dir: str,
        source: Iterable[str] = (),
        description: str = "",
    ) -> None:
        super().__init__(name, description=description)
        self.output_dir = output_dir
        self.source: tuple[str, ...] = tuple(source)

    @property
    def outputs(self) -> tuple[str, ...]:
        return (self.output_dir,)

    def run(self) -> None:
        logger.debug(
            "%s: delombok %s -> %s (formatting: %s)",
            self.name,
            " ".join(self.source),
            self.output_dir,
            ", ".join(f"{k}:{v}" for k, v in sorted(self.extensions.items()) if isinstance(v, str)),
        )
