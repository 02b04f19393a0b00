# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from checkerframework.base.exceptions import BuildGraphError
from checkerframework.jvm.coordinate import Coordinate
from checkerframework.util.ordered_set import OrderedSet

logger = logging.getLogger(__name__)


class Dependency:
    """A single entry in a `Configuration`."""


@dataclass(frozen=True)
class ArtifactDependency(Dependency):
    coordinate: Coordinate

    def __str__(self) -> str:
        return self.coordinate.to_coord_str()


@dataclass(frozen=True)
class FileDependency(Dependency):
    path: str

    def __str__(self) -> str:
        return self.path


class Configuration:
    """A named bucket of dependencies, in the manner of a Gradle configuration.

    A configuration may extend others, in which case it sees their dependencies as well as its own.
    When no dependency was declared explicitly, the `default_dependencies` actions are consulted
    instead. They run lazily on the first read, so a version chosen by the user after the action
    was registered still applies.
    """

    def __init__(
        self,
        name: str,
        *,
        description: str = "",
        visible: bool = True,
        can_be_consumed: bool = True,
        can_be_resolved: bool = True,
    ) -> None:
        self.name = name
        self.description = description
        self.visible = visible
        self.can_be_consumed = can_be_consumed
        self.can_be_resolved = can_be_resolved
        self.extends_from: OrderedSet[Configuration] = OrderedSet()
        self._declared: OrderedSet[Dependency] = OrderedSet()
        self._default_actions: list[Callable[[OrderedSet[Dependency]], None]] = []
        self._defaults: tuple[Dependency, ...] | None = None

    def extend_from(self, *others: Configuration) -> None:
        for other in others:
            if other is self or self in other.hierarchy():
                raise BuildGraphError(
                    f"Configuration `{self.name}` cannot extend `{other.name}`: it would be cyclic."
                )
            self.extends_from.add(other)

    def add(self, dependency: Dependency) -> None:
        self._declared.add(dependency)

    def default_dependencies(self, action: Callable[[OrderedSet[Dependency]], None]) -> None:
        self._default_actions.append(action)
        self._defaults = None

    def _compute_defaults(self) -> tuple[Dependency, ...]:
        if self._defaults is not None:
            return self._defaults
        defaults: OrderedSet[Dependency] = OrderedSet()
        for action in self._default_actions:
            action(defaults)
        if defaults:
            logger.debug(
                "Configuration %s defaults to: %s", self.name, ", ".join(map(str, defaults))
            )
        self._defaults = tuple(defaults)
        return self._defaults

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        """The dependencies declared directly on this configuration, or else its defaults."""
        if self._declared:
            return tuple(self._declared)
        return self._compute_defaults()

    def hierarchy(self) -> Iterator[Configuration]:
        """This configuration followed by everything it transitively extends."""
        seen: OrderedSet[Configuration] = OrderedSet()
        pending = [self]
        while pending:
            current = pending.pop(0)
            if current in seen:
                continue
            seen.add(current)
            pending.extend(current.extends_from)
        return iter(seen)

    def all_dependencies(self) -> tuple[Dependency, ...]:
        result: OrderedSet[Dependency] = OrderedSet()
        for configuration in self.hierarchy():
            result.update(configuration.dependencies)
        return tuple(result)

    def resolve(self) -> tuple[Dependency, ...]:
        if not self.can_be_resolved:
            raise BuildGraphError(
                f"Configuration `{self.name}` is not meant to be resolved directly; resolve a "
                "configuration that extends it instead."
            )
        return self.all_dependencies()

    def __repr__(self) -> str:
        return f"Configuration({self.name!r})"
