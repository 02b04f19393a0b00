# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass, field

from checkerframework.util.strutil import capitalize_first

MAIN_SOURCE_SET_NAME = "main"


@dataclass
class SourceSet:
    """A logical group of Java sources, with Gradle's naming conventions for derived objects."""

    name: str
    java_srcdirs: list[str] = field(default_factory=list)

    def _configuration_name(self, base: str) -> str:
        if self.name == MAIN_SOURCE_SET_NAME:
            return base
        return f"{self.name}{capitalize_first(base)}"

    @property
    def annotation_processor_configuration_name(self) -> str:
        return self._configuration_name("annotationProcessor")

    @property
    def implementation_configuration_name(self) -> str:
        return self._configuration_name("implementation")

    @property
    def compile_java_task_name(self) -> str:
        if self.name == MAIN_SOURCE_SET_NAME:
            return "compileJava"
        return f"compile{capitalize_first(self.name)}Java"
