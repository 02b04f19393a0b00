# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Iterable, Mapping

from checkerframework.option.config import Config
from checkerframework.option.errors import ParseError
from checkerframework.option.option_types import OptionsInfo


@total_ordering
class Rank(Enum):
    # The ranked value sources. Higher ranks override lower ones.
    NONE = (0, "NONE")  # The value None.
    HARDCODED = (1, "HARDCODED")  # The default provided at option registration.
    CONFIG = (2, "CONFIG")  # The value from the relevant section of the config file.
    FLAG = (3, "FLAG")  # The value from the appropriately-named invocation flag.

    _rank: int

    def __new__(cls, rank: int, display: str) -> Rank:
        member: Rank = object.__new__(cls)
        member._value_ = display
        member._rank = rank
        return member

    def __lt__(self, other: Any) -> bool:
        if type(other) != Rank:
            return NotImplemented
        return self._rank < other._rank


@dataclass(frozen=True)
class RankedValue:
    """An option value, together with a rank inferred from its source."""

    rank: Rank
    value: Any


class Options:
    """The option values for one build invocation.

    Values are ranked: an invocation flag beats the config file, which beats the registered
    default. Nothing is resolved until a value is read, so flags set after a subsystem was created
    are still honored.
    """

    def __init__(
        self,
        config: Config | None = None,
        flags: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self._config = config or Config(())
        self._flags: dict[str, dict[str, Any]] = {
            scope: dict(values) for scope, values in (flags or {}).items()
        }

    @property
    def config(self) -> Config:
        return self._config

    def set_flag(self, scope: str, dest: str, value: Any) -> None:
        self._flags.setdefault(scope, {})[dest] = value

    def ranked_value(self, scope: str, info: OptionsInfo) -> RankedValue:
        flag_values = self._flags.get(scope, {})
        if info.dest in flag_values:
            return RankedValue(Rank.FLAG, self._parse(scope, info, flag_values[info.dest]))
        config_values = self._config.get(scope, info.dest)
        if config_values:
            return RankedValue(Rank.CONFIG, self._parse(scope, info, config_values[-1]))
        if info.default is None:
            return RankedValue(Rank.NONE, None)
        return RankedValue(Rank.HARDCODED, self._parse(scope, info, info.default))

    @staticmethod
    def _parse(scope: str, info: OptionsInfo, raw_value: Any) -> Any:
        try:
            return info.parse(raw_value)
        except ParseError as e:
            raise ParseError(f"Error computing value for {info.flag_name} in scope {scope}: {e}")

    def for_scope(self, scope: str, registrations: Iterable[OptionsInfo]) -> OptionValueContainer:
        return OptionValueContainer(self, scope, {info.dest: info for info in registrations})

    def verify_config(
        self,
        scope_to_registrations: Mapping[str, Iterable[OptionsInfo]],
        *,
        strict_sections: bool = True,
    ) -> None:
        self._config.verify(
            {
                scope: {info.dest for info in registrations}
                for scope, registrations in scope_to_registrations.items()
            },
            strict_sections=strict_sections,
        )


class OptionValueContainer:
    """A lazily-evaluated view of the option values registered on one scope."""

    def __init__(
        self, options: Options, scope: str, registrations: Mapping[str, OptionsInfo]
    ) -> None:
        self._options = options
        self._scope = scope
        self._registrations = dict(registrations)

    @property
    def scope(self) -> str:
        return self._scope

    def __getattr__(self, dest: str) -> Any:
        # NB: `__getattr__` is only consulted for attributes that are not found normally.
        if dest.startswith("_"):
            raise AttributeError(dest)
        try:
            info = self._registrations[dest]
        except KeyError:
            raise AttributeError(f"No option `{dest}` is registered in scope `{self._scope}`.")
        return self._options.ranked_value(self._scope, info).value

    def __iter__(self):
        return iter(sorted(self._registrations))
