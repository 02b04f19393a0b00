# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from typing import Callable, Sequence

from checkerframework.backend.checker.subsystem import ToolchainConfig
from checkerframework.build_graph.tasks import Task
from checkerframework.util.dirutil import safe_delete, safe_file_dump, safe_mkdir
from checkerframework.util.strutil import pluralize

logger = logging.getLogger(__name__)

WRITE_MANIFEST_TASK_NAME = "writeCheckerManifest"
MANIFEST_DIR_NAME = "checkerframework"

# https://checkerframework.org/manual/#checker-auto-discovery
PROCESSOR_SERVICES_FILE = "META-INF/services/javax.annotation.processing.Processor"
# https://docs.gradle.org/current/userguide/java_plugin.html#sec:incremental_annotation_processing
INCREMENTAL_PROCESSORS_FILE = "META-INF/gradle/incremental.annotation.processors"
ISOLATING = "isolating"


def render_manifest(checkers: Sequence[str], suffix: str = "") -> str:
    """One checker per line, each followed by `suffix`, with a trailing newline."""
    return "".join(f"{checker}{suffix}\n" for checker in checkers)


def write_checker_manifest(
    checkers: Sequence[str], incrementalize: bool, output_dir: str
) -> tuple[str, ...]:
    """Writes the processor auto-discovery files under `output_dir` and returns their paths.

    Both files are rewritten from scratch on every call. When `incrementalize` is off, an
    incremental processors file left over from an earlier run is removed. With no checkers nothing
    is written.
    """
    if not checkers:
        logger.debug("No checkers configured; not writing a processor manifest.")
        return ()

    safe_mkdir(output_dir)
    services_path = os.path.join(output_dir, PROCESSOR_SERVICES_FILE)
    safe_file_dump(services_path, render_manifest(checkers), makedirs=True)
    written = [services_path]

    incremental_path = os.path.join(output_dir, INCREMENTAL_PROCESSORS_FILE)
    if incrementalize:
        safe_file_dump(incremental_path, render_manifest(checkers, f",{ISOLATING}"), makedirs=True)
        written.append(incremental_path)
    else:
        safe_delete(incremental_path)

    logger.debug(
        "Wrote processor manifest for %s to %s.", pluralize(len(checkers), "checker"), output_dir
    )
    return tuple(written)


class WriteCheckerManifestTask(Task):
    """Writes the processor manifest that compile tasks pick up through their processor path.

    The settings are read when the task runs, not when it is registered.
    """

    def __init__(
        self,
        name: str,
        *,
        output_dir: str,
        config_provider: Callable[[], ToolchainConfig],
    ) -> None:
        super().__init__(
            name,
            description="Writes META-INF files so the configured checkers are auto-discovered.",
        )
        self.output_dir = output_dir
        self._config_provider = config_provider
        self.written: tuple[str, ...] = ()

    def run(self) -> None:
        config = self._config_provider()
        self.written = write_checker_manifest(
            config.checkers, config.incrementalize, self.output_dir
        )
