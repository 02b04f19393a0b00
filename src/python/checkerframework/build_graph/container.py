# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

from typing_extensions import Protocol

from checkerframework.base.exceptions import DuplicateDomainObjectError, UnknownDomainObjectError

logger = logging.getLogger(__name__)


class Named(Protocol):
    @property
    def name(self) -> str:
        raise NotImplementedError()


T = TypeVar("T", bound=Named)
_S = TypeVar("_S")


class NamedDomainObjectContainer(Generic[T]):
    """An ordered, name-keyed collection of build model elements.

    Actions registered with `configure_each` are deferred until the container is realized (when the
    owning project is evaluated). After that they run immediately for each newly added element. This
    keeps configuration lazy: values set by the user after a plugin registered its actions are
    still seen by those actions.
    """

    def __init__(self, kind: str) -> None:
        self._kind = kind
        self._elements: dict[str, T] = {}
        self._actions: list[tuple[type | None, Callable[[T], None]]] = []
        self._realized = False

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def realized(self) -> bool:
        return self._realized

    def add(self, element: T) -> T:
        if element.name in self._elements:
            raise DuplicateDomainObjectError(self._kind, element.name)
        self._elements[element.name] = element
        if self._realized:
            self._configure(element)
        return element

    def maybe_create(self, name: str, factory: Callable[[str], T]) -> T:
        existing = self._elements.get(name)
        if existing is not None:
            return existing
        return self.add(factory(name))

    def named(self, name: str) -> T:
        try:
            return self._elements[name]
        except KeyError:
            raise UnknownDomainObjectError(self._kind, name, tuple(self._elements))

    def find(self, name: str) -> T | None:
        return self._elements.get(name)

    def with_type(self, of_type: type[_S]) -> tuple[_S, ...]:
        return tuple(e for e in self._elements.values() if isinstance(e, of_type))

    def names(self) -> tuple[str, ...]:
        return tuple(self._elements)

    def configure_each(self, action: Callable[[T], None], of_type: type | None = None) -> None:
        self._actions.append((of_type, action))
        if self._realized:
            for element in list(self._elements.values()):
                self._run_action(of_type, action, element)

    def realize(self) -> None:
        if self._realized:
            return
        self._realized = True
        logger.debug("Realizing %d %s(s).", len(self._elements), self._kind)
        for element in list(self._elements.values()):
            self._configure(element)

    def _configure(self, element: T) -> None:
        for of_type, action in list(self._actions):
            self._run_action(of_type, action, element)

    @staticmethod
    def _run_action(of_type: type | None, action: Callable[[T], None], element: T) -> None:
        if of_type is None or isinstance(element, of_type):
            action(element)

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind}: {', '.join(self._elements)})"
