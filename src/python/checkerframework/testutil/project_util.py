# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from pathlib import Path
from textwrap import dedent
from typing import Any, Iterable, Mapping

from checkerframework.build_graph.project import JavaPlugin, PluginLike, Project
from checkerframework.option.config import Config, FileContent
from checkerframework.option.options import Options


def make_options(
    config_toml: str = "",
    *,
    flags: Mapping[str, Mapping[str, Any]] | None = None,
    env: Mapping[str, str] | None = None,
) -> Options:
    """Options backed by a single in-memory TOML config file."""
    config = Config.load(
        [FileContent("checkerframework.toml", dedent(config_toml).encode())],
        buildroot="/buildroot",
        env=env,
    )
    return Options(config, flags)


def make_project(
    root: str | Path,
    *,
    config_toml: str = "",
    properties: Mapping[str, str] | None = None,
    env: Mapping[str, str] | None = None,
    plugins: Iterable[PluginLike] = (JavaPlugin(),),
) -> Project:
    """A project rooted at `root` with the given plugins already applied, in order."""
    project = Project(
        os.path.join(str(root), "build"),
        project_dir=str(root),
        properties=properties,
        env=env or {},
        options=make_options(config_toml, env=env),
    )
    for plugin in plugins:
        project.apply_plugin(plugin)
    return project


def create_local_installation(home: str | Path, *jar_names: str) -> str:
    """Lays out `<home>/checker/dist/<jar>.jar` files like a Checker Framework build does."""
    dist = os.path.join(str(home), "checker", "dist")
    os.makedirs(dist, exist_ok=True)
    for jar_name in jar_names:
        Path(dist, f"{jar_name}.jar").write_bytes(b"PK\x05\x06" + b"\x00" * 18)
    return str(home)
