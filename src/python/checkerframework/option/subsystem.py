# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import ClassVar, TypeVar

from checkerframework.option.errors import OptionsError
from checkerframework.option.option_types import OptionsInfo, collect_options_info
from checkerframework.option.options import Options, OptionValueContainer

_SubsystemT = TypeVar("_SubsystemT", bound="Subsystem")


class Subsystem:
    """A holder of options registered under one scope.

    Subclasses declare their options as class attributes using the descriptors in
    `checkerframework.option.option_types`; reading such an attribute on an instance returns the
    current ranked value for the option.
    """

    options_scope: ClassVar[str]
    help: ClassVar[str] = ""

    def __init__(self, options: OptionValueContainer) -> None:
        self.options = options

    @classmethod
    def registrations(cls) -> tuple[OptionsInfo, ...]:
        return tuple(collect_options_info(cls))

    @classmethod
    def create(cls: type[_SubsystemT], options: Options) -> _SubsystemT:
        if not getattr(cls, "options_scope", None):
            raise OptionsError(f"{cls.__name__} must set `options_scope`.")
        return cls(options.for_scope(cls.options_scope, cls.registrations()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scope={self.options.scope!r})"
