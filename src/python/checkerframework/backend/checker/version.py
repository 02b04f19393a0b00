# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Decides where the Checker Framework jars come from.

Precedence: the `checkerFrameworkVersion` project property, then `[checkerframework].version`, then
`DEFAULT_VERSION`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from checkerframework.base.exceptions import ConfigurationError
from checkerframework.util.strutil import softwrap

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "3.52.1"
VERSION_OVERRIDE_PROPERTY = "checkerFrameworkVersion"

LOCAL = "local"
DEPENDENCIES = "dependencies"
# Accepted spellings of "use whatever jars the build already declares".
DEPENDENCIES_SENTINELS = frozenset({DEPENDENCIES, "disable", "none"})


class VersionKind(Enum):
    RELEASE = "release"
    LOCAL = "local"
    DEPENDENCIES = "dependencies"


@dataclass(frozen=True)
class VersionSelector:
    kind: VersionKind
    version: str | None = None

    @classmethod
    def release(cls, version: str) -> VersionSelector:
        return cls(VersionKind.RELEASE, version)

    @property
    def adds_default_dependencies(self) -> bool:
        return self.kind != VersionKind.DEPENDENCIES

    def __str__(self) -> str:
        return self.version if self.kind == VersionKind.RELEASE else self.kind.value


def parse_version_selector(value: str) -> VersionSelector:
    if value == LOCAL:
        return VersionSelector(VersionKind.LOCAL)
    if value in DEPENDENCIES_SENTINELS:
        return VersionSelector(VersionKind.DEPENDENCIES)
    if not value or value != value.strip() or any(c.isspace() or c == ":" for c in value):
        raise ConfigurationError(
            softwrap(
                f"""
                Invalid Checker Framework version {value!r}. Set `[checkerframework].version` to a
                release such as `{DEFAULT_VERSION}`, to `{LOCAL}`, or to `{DEPENDENCIES}`.
                """
            )
        )
    return VersionSelector.release(value)


def resolve_version(configured: str | None, override: str | None = None) -> VersionSelector:
    """Picks the version selector for this build.

    An override (normally the `checkerFrameworkVersion` project property) wins unconditionally. An
    unset version falls back to `DEFAULT_VERSION`.
    """
    if override is not None:
        logger.debug("Checker Framework version overridden to %r.", override)
        return parse_version_selector(override)
    if configured is None:
        return VersionSelector.release(DEFAULT_VERSION)
    return parse_version_selector(configured)
