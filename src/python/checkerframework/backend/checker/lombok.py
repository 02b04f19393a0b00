# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging

from checkerframework.backend.checker.naming import CompanionTaskNamer
from checkerframework.backend.checker.subsystem import ToolchainConfig
from checkerframework.build_graph.project import Project
from checkerframework.build_graph.tasks import DelombokTask, JavaCompile

logger = logging.getLogger(__name__)

LOMBOK_PLUGIN_ID = "io.freefair.lombok"

# Values understood by delombok's `--format` option.
GENERATE = "generate"


def link_delombok_task(
    project: Project,
    task: JavaCompile,
    config: ToolchainConfig,
    delombok_task_name: CompanionTaskNamer,
) -> DelombokTask | None:
    """Makes a compile task check delomboked code instead of the Lombok-annotated sources.

    The delombok output must keep the `@Generated` annotations (`generated = generate`) so that the
    Checker Framework can recognize Lombok-generated code.
    """
    companion_name = delombok_task_name(task.name)
    if companion_name is None:
        return None
    delombok = project.tasks.find(companion_name)
    if not isinstance(delombok, DelombokTask):
        logger.debug("No delombok task %s for %s.", companion_name, task.name)
        return None

    task.depend_on(delombok)
    delombok.extensions["generated"] = GENERATE
    if config.suppress_lombok_warnings:
        delombok.extensions["suppressWarnings"] = GENERATE
    task.source = delombok.outputs
    logger.debug("%s now compiles the output of %s.", task.name, delombok.name)
    return delombok
