# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from pathlib import Path

import pytest

from checkerframework.base.exceptions import TaskGraphCycleError, UnknownDomainObjectError
from checkerframework.build_graph.project import JavaPlugin, Project
from checkerframework.build_graph.source_set import SourceSet
from checkerframework.build_graph.tasks import JavaCompile, Task
from checkerframework.testutil.project_util import make_project


@pytest.mark.parametrize(
    "name, processor, implementation, compile_task",
    [
        ("main", "annotationProcessor", "implementation", "compileJava"),
        ("test", "testAnnotationProcessor", "testImplementation", "compileTestJava"),
        (
            "integrationTest",
            "integrationTestAnnotationProcessor",
            "integrationTestImplementation",
            "compileIntegrationTestJava",
        ),
    ],
)
def test_source_set_naming(name, processor, implementation, compile_task) -> None:
    source_set = SourceSet(name)
    assert source_set.annotation_processor_configuration_name == processor
    assert source_set.implementation_configuration_name == implementation
    assert source_set.compile_java_task_name == compile_task


def test_java_plugin(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    assert project.has_plugin("java")
    assert project.source_sets.names() == ("main", "test")
    assert {"annotationProcessor", "testAnnotationProcessor"} <= set(project.configurations.names())
    assert not project.configurations.named("implementation").can_be_resolved

    compile_java = project.tasks.named("compileJava")
    assert isinstance(compile_java, JavaCompile)
    assert compile_java.source == (os.path.join(str(tmp_path), "src", "main", "java"),)
    assert compile_java.destination_dir == os.path.join(
        str(tmp_path), "build", "classes", "java", "main"
    )
    assert compile_java.options.annotation_processor_path == []


def test_apply_plugin_is_idempotent(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    project.apply_plugin(JavaPlugin())
    assert project.source_sets.names() == ("main", "test")


def test_with_plugin(tmp_path: Path) -> None:
    project = make_project(tmp_path, plugins=())
    calls: list[str] = []
    project.with_plugin("io.freefair.lombok", lambda: calls.append("lombok"))
    assert calls == []
    project.apply_plugin("io.freefair.lombok")
    assert calls == ["lombok"]
    project.with_plugin("io.freefair.lombok", lambda: calls.append("again"))
    assert calls == ["lombok", "again"]


def test_properties_and_env(tmp_path: Path) -> None:
    project = make_project(
        tmp_path, properties={"skipCheckerFramework": ""}, env={"CHECKERFRAMEWORK": "/opt/cf"}
    )
    assert project.has_property("skipCheckerFramework")
    assert project.find_property("skipCheckerFramework") == ""
    assert project.find_property("checkerFrameworkVersion") is None
    assert project.env == {"CHECKERFRAMEWORK": "/opt/cf"}


def test_project_dir_defaults_to_parent_of_build_dir() -> None:
    project = Project(os.path.join("repo", "build"), env={})
    assert project.project_dir == "repo"


def test_execute_orders_dependencies(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    project.tasks.add(Task("writeCheckerManifest"))
    project.tasks.add(Task("delombok"))
    compile_java = project.tasks.named("compileJava")
    compile_java.depend_on("delombok", "writeCheckerManifest")
    project.tasks.named("compileTestJava").depend_on("compileJava")

    assert project.execute("compileTestJava") == [
        "delombok",
        "writeCheckerManifest",
        "compileJava",
        "compileTestJava",
    ]
    assert project.evaluated
    assert compile_java.did_work


def test_task_graph_cycle(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    project.tasks.named("compileJava").depend_on("compileTestJava")
    project.tasks.named("compileTestJava").depend_on("compileJava")
    with pytest.raises(TaskGraphCycleError) as exc_info:
        project.task_graph("compileJava")
    assert exc_info.value.cycle == ("compileJava", "compileTestJava", "compileJava")


def test_task_graph_unknown_dependency(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    project.tasks.named("compileJava").depend_on("delombok")
    with pytest.raises(UnknownDomainObjectError):
        project.task_graph("compileJava")
