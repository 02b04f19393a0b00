# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os

from checkerframework.backend.checker.compile import (
    SKIP_PROPERTY,
    configure_compile_task,
    decide,
    parse_skip_property,
)
from checkerframework.backend.checker.dependencies import (
    checker_dependencies,
    extend_source_set_configurations,
    register_checker_configurations,
)
from checkerframework.backend.checker.lombok import LOMBOK_PLUGIN_ID, link_delombok_task
from checkerframework.backend.checker.manifest import (
    MANIFEST_DIR_NAME,
    WRITE_MANIFEST_TASK_NAME,
    WriteCheckerManifestTask,
)
from checkerframework.backend.checker.naming import (
    CompanionTaskNamer,
    TestNamePredicate,
    delombok_task_name,
    is_test_name_substring,
)
from checkerframework.backend.checker.subsystem import (
    CheckerFramework,
    CheckerFrameworkCompileExtension,
    ToolchainConfig,
)
from checkerframework.backend.checker.version import (
    VERSION_OVERRIDE_PROPERTY,
    VersionSelector,
    resolve_version,
)
from checkerframework.build_graph.project import JavaPlugin, Project
from checkerframework.build_graph.source_set import SourceSet
from checkerframework.build_graph.tasks import JavaCompile, Task

logger = logging.getLogger(__name__)

COMPILE_EXTENSION_NAME = "checkerFramework"


def compile_extension(task: Task) -> CheckerFrameworkCompileExtension:
    """The per-task Checker Framework settings, created on first use."""
    extension = task.extensions.get(COMPILE_EXTENSION_NAME)
    if extension is None:
        extension = CheckerFrameworkCompileExtension()
        task.extensions[COMPILE_EXTENSION_NAME] = extension
    return extension


class CheckerFrameworkPlugin:
    """Configures `JavaCompile` tasks to use the Checker Framework (https://checkerframework.org/).

    The test classification and the delombok task naming are parameters, defaulting to the
    conventions of the Gradle Java and Lombok plugins.
    """

    plugin_id = "org.checkerframework"

    def __init__(
        self,
        *,
        is_test_like: TestNamePredicate = is_test_name_substring,
        delombok_task_name: CompanionTaskNamer = delombok_task_name,
    ) -> None:
        self.is_test_like = is_test_like
        self.delombok_task_name = delombok_task_name

    def apply(self, project: Project) -> None:
        # Other plugins own the remaining sections of the shared config file.
        project.options.verify_config(
            {CheckerFramework.options_scope: CheckerFramework.registrations()},
            strict_sections=False,
        )
        subsystem = CheckerFramework.create(project.options)
        project.extensions[CheckerFramework.options_scope] = subsystem

        def version_selector() -> VersionSelector:
            return resolve_version(
                subsystem.version, project.find_property(VERSION_OVERRIDE_PROPERTY)
            )

        register_checker_configurations(project, version_selector)

        manifest_task = project.tasks.add(
            WriteCheckerManifestTask(
                WRITE_MANIFEST_TASK_NAME,
                output_dir=os.path.join(project.build_dir, MANIFEST_DIR_NAME),
                config_provider=subsystem.to_config,
            )
        )

        def extend_source_set(source_set: SourceSet) -> None:
            extend_source_set_configurations(
                project,
                source_set,
                exclude_tests=subsystem.exclude_tests,
                is_test_like=self.is_test_like,
            )

        project.with_plugin(
            JavaPlugin.plugin_id, lambda: project.source_sets.configure_each(extend_source_set)
        )

        def configure(task: JavaCompile) -> None:
            self.configure_compile(project, task, manifest_task, subsystem.to_config())

        project.tasks.configure_each(configure, of_type=JavaCompile)

    def configure_compile(
        self,
        project: Project,
        task: JavaCompile,
        manifest_task: WriteCheckerManifestTask,
        config: ToolchainConfig,
    ) -> bool:
        decision = decide(
            task.name,
            config,
            task_enabled=compile_extension(task).enabled,
            skip_override=parse_skip_property(project.find_property(SKIP_PROPERTY)),
            is_test_like=self.is_test_like,
        )
        if not decision.applies:
            return configure_compile_task(task, config, manifest_task, decision)

        # Raises ConfigurationError for a bad version or a broken local installation.
        checker_dependencies(project)

        configure_compile_task(task, config, manifest_task, decision)
        project.with_plugin(
            LOMBOK_PLUGIN_ID,
            lambda: link_delombok_task(project, task, config, self.delombok_task_name),
        )
        return True
