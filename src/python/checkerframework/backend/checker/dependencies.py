# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from typing import Callable, Mapping

from checkerframework.backend.checker.naming import TestNamePredicate
from checkerframework.backend.checker.version import VersionKind, VersionSelector
from checkerframework.base.exceptions import ConfigurationError
from checkerframework.build_graph.configuration import (
    ArtifactDependency,
    Configuration,
    Dependency,
    FileDependency,
)
from checkerframework.build_graph.project import Project
from checkerframework.build_graph.source_set import SourceSet
from checkerframework.jvm.coordinate import Coordinate
from checkerframework.util.ordered_set import OrderedSet
from checkerframework.util.strutil import softwrap

logger = logging.getLogger(__name__)

CHECKER_GROUP = "org.checkerframework"
CHECKER_JAR = "checker"
CHECKER_QUAL_JAR = "checker-qual"

CHECKERFRAMEWORK_CONFIGURATION = "checkerframework"
CHECKER_QUAL_CONFIGURATION = "checkerQual"

CHECKERFRAMEWORK_HOME_ENV_VAR = "CHECKERFRAMEWORK"


def local_jar_path(env: Mapping[str, str], jar_name: str) -> str:
    """The path of a jar inside the Checker Framework installation named by $CHECKERFRAMEWORK."""
    home = env.get(CHECKERFRAMEWORK_HOME_ENV_VAR)
    if not home:
        raise ConfigurationError(
            softwrap(
                f"""
                The Checker Framework version is `local`, but the
                `{CHECKERFRAMEWORK_HOME_ENV_VAR}` environment variable is not set. Point it at a
                Checker Framework checkout or distribution, or set a release version.
                """
            )
        )
    path = os.path.join(home, "checker", "dist", f"{jar_name}.jar")
    if not os.path.isfile(path):
        raise ConfigurationError(
            softwrap(
                f"""
                The Checker Framework version is `local`, but {path} does not exist. Build the
                Checker Framework at ${CHECKERFRAMEWORK_HOME_ENV_VAR} ({home}) first.
                """
            )
        )
    return path


def default_dependencies(
    selector: VersionSelector, jar_name: str, env: Mapping[str, str]
) -> tuple[Dependency, ...]:
    """The single default dependency for `jar_name`, or none in `dependencies` mode."""
    if selector.kind == VersionKind.DEPENDENCIES:
        return ()
    if selector.kind == VersionKind.LOCAL:
        return (FileDependency(local_jar_path(env, jar_name)),)
    assert selector.version is not None
    return (ArtifactDependency(Coordinate(CHECKER_GROUP, jar_name, selector.version)),)


def register_checker_configurations(
    project: Project, selector_provider: Callable[[], VersionSelector]
) -> tuple[Configuration, Configuration]:
    """Registers the `checkerframework` and `checkerQual` configurations.

    Neither can be consumed or resolved on its own: source set configurations extend them. Their
    default dependency is computed the first time it is needed, from `selector_provider`.
    """

    def register(name: str, jar_name: str, description: str) -> Configuration:
        configuration = Configuration(
            name,
            description=description,
            visible=False,
            can_be_consumed=False,
            can_be_resolved=False,
        )

        def add_defaults(dependencies: OrderedSet[Dependency]) -> None:
            dependencies.update(default_dependencies(selector_provider(), jar_name, project.env))

        configuration.default_dependencies(add_defaults)
        return project.configurations.add(configuration)

    return (
        register(
            CHECKERFRAMEWORK_CONFIGURATION,
            CHECKER_JAR,
            "Checker Framework dependencies, extended by every source set's annotation processor "
            "configuration.",
        ),
        register(
            CHECKER_QUAL_CONFIGURATION,
            CHECKER_QUAL_JAR,
            "Checker qualifier dependencies, extended by every source set's implementation "
            "configuration.",
        ),
    )


def extend_source_set_configurations(
    project: Project,
    source_set: SourceSet,
    *,
    exclude_tests: bool,
    is_test_like: TestNamePredicate,
) -> bool:
    """Makes a source set's configurations extend the Checker Framework ones.

    Returns False, leaving the source set alone, for test-like source sets when tests are excluded.
    """
    if exclude_tests and is_test_like(source_set.name):
        logger.debug("Not adding the Checker Framework to test source set %s.", source_set.name)
        return False
    project.configurations.named(source_set.annotation_processor_configuration_name).extend_from(
        project.configurations.named(CHECKERFRAMEWORK_CONFIGURATION)
    )
    project.configurations.named(source_set.implementation_configuration_name).extend_from(
        project.configurations.named(CHECKER_QUAL_CONFIGURATION)
    )
    return True


def checker_dependencies(project: Project) -> tuple[Dependency, ...]:
    """The effective dependencies of both Checker Framework configurations.

    Computing them raises `ConfigurationError` for a bad version or a broken local installation.
    """
    return tuple(
        dependency
        for name in (CHECKERFRAMEWORK_CONFIGURATION, CHECKER_QUAL_CONFIGURATION)
        for dependency in project.configurations.named(name).dependencies
    )
