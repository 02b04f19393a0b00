# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, Mapping, Union

from typing_extensions import Protocol

from checkerframework.base.exceptions import TaskGraphCycleError
from checkerframework.build_graph.configuration import Configuration
from checkerframework.build_graph.container import NamedDomainObjectContainer
from checkerframework.build_graph.source_set import SourceSet
from checkerframework.build_graph.tasks import CompileOptions, JavaCompile, Task
from checkerframework.option.options import Options

logger = logging.getLogger(__name__)


class Plugin(Protocol):
    plugin_id: str

    def apply(self, project: Project) -> None:
        ...


PluginLike = Union[Plugin, str]


class Project:
    """The host build model a plugin is applied to.

    Everything is owned by an explicit project instance: configurations, source sets, tasks,
    extensions, project properties (`-Pname=value` style invocation flags) and the environment that
    plugins consult.
    """

    def __init__(
        self,
        build_dir: str,
        *,
        name: str = "root",
        project_dir: str | None = None,
        properties: Mapping[str, str] | None = None,
        env: Mapping[str, str] | None = None,
        options: Options | None = None,
    ) -> None:
        self.name = name
        self.build_dir = build_dir
        self.project_dir = project_dir or os.path.dirname(build_dir.rstrip(os.sep)) or "."
        self.properties: dict[str, str] = dict(properties or {})
        self.env: dict[str, str] = dict(os.environ if env is None else env)
        self.options = options or Options()
        self.extensions: dict[str, Any] = {}
        self.configurations: NamedDomainObjectContainer[Configuration] = (
            NamedDomainObjectContainer("configuration")
        )
        self.source_sets: NamedDomainObjectContainer[SourceSet] = NamedDomainObjectContainer(
            "source set"
        )
        self.tasks: NamedDomainObjectContainer[Task] = NamedDomainObjectContainer("task")
        self._applied_plugins: dict[str, Plugin | None] = {}
        self._plugin_actions: dict[str, list[Callable[[], None]]] = {}
        self._evaluated = False

    # -----------------------------------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------------------------------

    def find_property(self, name: str) -> str | None:
        return self.properties.get(name)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    # -----------------------------------------------------------------------------------------
    # Plugins
    # -----------------------------------------------------------------------------------------

    def apply_plugin(self, plugin: PluginLike) -> None:
        """Applies a plugin object, or records a bare plugin id as applied."""
        plugin_id = plugin if isinstance(plugin, str) else plugin.plugin_id
        if plugin_id in self._applied_plugins:
            return
        self._applied_plugins[plugin_id] = None if isinstance(plugin, str) else plugin
        logger.debug("Applying plugin %s to project %s.", plugin_id, self.name)
        if not isinstance(plugin, str):
            plugin.apply(self)
        for action in self._plugin_actions.pop(plugin_id, []):
            action()

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._applied_plugins

    def with_plugin(self, plugin_id: str, action: Callable[[], None]) -> None:
        """Runs `action` now if the plugin is applied, or as soon as it gets applied."""
        if self.has_plugin(plugin_id):
            action()
        else:
            self._plugin_actions.setdefault(plugin_id, []).append(action)

    # -----------------------------------------------------------------------------------------
    # Source sets
    # -----------------------------------------------------------------------------------------

    def add_source_set(self, name: str, java_srcdirs: Iterable[str] | None = None) -> SourceSet:
        """Creates a source set together with its configurations and compile task."""
        source_set = SourceSet(
            name,
            list(java_srcdirs)
            if java_srcdirs is not None
            else [os.path.join(self.project_dir, "src", name, "java")],
        )
        self.configurations.maybe_create(
            source_set.annotation_processor_configuration_name, Configuration
        )
        self.configurations.maybe_create(
            source_set.implementation_configuration_name,
            lambda config_name: Configuration(config_name, can_be_resolved=False),
        )
        self.tasks.add(
            JavaCompile(
                source_set.compile_java_task_name,
                source=source_set.java_srcdirs,
                destination_dir=os.path.join(self.build_dir, "classes", "java", name),
                options=CompileOptions(annotation_processor_path=[]),
                description=f"Compiles {name} Java source.",
            )
        )
        return self.source_sets.add(source_set)

    # -----------------------------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------------------------

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def evaluate(self) -> None:
        """Realizes all deferred configuration. Idempotent."""
        if self._evaluated:
            return
        self._evaluated = True
        self.configurations.realize()
        self.source_sets.realize()
        self.tasks.realize()

    def task_graph(self, *task_names: str) -> list[Task]:
        """The named tasks and everything they depend on, dependencies first."""
        ordered: list[Task] = []
        done: set[str] = set()
        in_progress: list[str] = []

        def visit(name: str) -> None:
            if name in done:
                return
            if name in in_progress:
                raise TaskGraphCycleError(tuple(in_progress[in_progress.index(name) :]) + (name,))
            in_progress.append(name)
            task = self.tasks.named(name)
            for dependency in task.depends_on:
                visit(dependency)
            in_progress.pop()
            done.add(name)
            ordered.append(task)

        for task_name in task_names:
            visit(task_name)
        return ordered

    def execute(self, *task_names: str) -> list[str]:
        """Evaluates the project, then runs the named tasks after their dependencies."""
        self.evaluate()
        graph = self.task_graph(*task_names)
        for task in graph:
            logger.info("> Task :%s", task.name)
            task.execute()
        return [task.name for task in graph]

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


class JavaPlugin:
    """Creates the conventional `main` and `test` source sets."""

    plugin_id = "java"

    def apply(self, project: Project) -> None:
        project.add_source_set("main")
        project.add_source_set("test")
