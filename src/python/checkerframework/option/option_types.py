# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import ast
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar, Union, cast, overload

from checkerframework.option.errors import BooleanConversionError, ListConversionError


@dataclass(frozen=True)
class OptionsInfo:
    """Registration data for one option: its flag name, destination attribute and parser."""

    flag_name: str
    dest: str
    default: Any
    help: str
    parse: Callable[[Any], Any]


def collect_options_info(cls: type) -> Iterator[OptionsInfo]:
    """Yields the ordered options info from the MRO of the provided class."""
    for class_ in reversed(inspect.getmro(cls)):
        for attrname in class_.__dict__.keys():
            # NB: We use getattr to trigger descriptors.
            attr = getattr(cls, attrname)
            if isinstance(attr, OptionsInfo):
                yield attr


_OptT = TypeVar("_OptT")
_DefaultT = TypeVar("_DefaultT")
# A "dynamic" default takes the subsystem type, so base subsystems can be subclassed with more
# specific values. E.g. `prop = StrOption(default=lambda cls: cls.default_version, ...)`.
_DynamicDefaultT = Callable[[Any], Any]
_MaybeDynamicT = Union[_DynamicDefaultT, _DefaultT]


def _eval_maybe_dynamic(val: Any, subsystem_cls: Any) -> Any:
    return val(subsystem_cls) if inspect.isfunction(val) else val


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise BooleanConversionError(f"Got {value!r}. Expected 'True' or 'False'.")


def parse_str(value: Any) -> str:
    return str(value)


def parse_str_list(value: Any) -> tuple[str, ...]:
    """Accepts a real list, a list literal such as `['a', 'b']`, or a comma-separated string."""
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    if not isinstance(value, str):
        raise ListConversionError(f"Got {value!r}. Expected a list of strings.")
    stripped = value.strip()
    if not stripped:
        return ()
    if stripped.startswith("["):
        try:
            parsed = ast.literal_eval(stripped)
        except (ValueError, SyntaxError) as e:
            raise ListConversionError(f"Could not parse {value!r} as a list: {e}")
        if not isinstance(parsed, list):
            raise ListConversionError(f"Got {value!r}. Expected a list of strings.")
        return tuple(str(v) for v in parsed)
    return tuple(item.strip() for item in stripped.split(",") if item.strip())


class _OptionBase(Generic[_OptT, _DefaultT]):
    """Descriptor base for subsystem options.

    Clients shouldn't use this class directly, instead use one of the concrete classes below.

    This class serves two purposes:
        - Collect registration values for your option.
        - Provide a typed property for Python usage, read lazily from the subsystem's options.
    """

    _flag_name: str | None
    _dest: str | None

    def __new__(
        cls,
        flag_name: str | None = None,
        *,
        default: _MaybeDynamicT[_DefaultT],
        help: str,
    ):
        self = super().__new__(cls)
        self._flag_name = flag_name
        self._dest = None
        self._default = default
        self._help = help
        return self

    def __set_name__(self, owner, name) -> None:
        self._dest = name.strip("_")
        if self._flag_name is None:
            self._flag_name = f"--{self._dest.replace('_', '-')}"

    def _parse_(self, val: Any) -> _OptT:
        return cast("_OptT", val)

    @overload
    def __get__(self, obj: None, objtype: Any) -> OptionsInfo:
        ...

    @overload
    def __get__(self, obj: object, objtype: Any) -> _OptT | _DefaultT:
        ...

    def __get__(self, obj, objtype):
        assert self._flag_name is not None and self._dest is not None
        if obj is None:
            return OptionsInfo(
                flag_name=self._flag_name,
                dest=self._dest,
                default=_eval_maybe_dynamic(self._default, objtype),
                help=self._help,
                parse=self._parse_,
            )
        return getattr(obj.options, self._dest)


class StrOption(_OptionBase[str, _DefaultT]):
    """A string option."""

    def _parse_(self, val: Any) -> str:
        return parse_str(val)


class BoolOption(_OptionBase[bool, _DefaultT]):
    """A bool option.

    If you don't provide a `default` value, this becomes a "tri-bool" where the property will return
    `None` if unset by the user.
    """

    def __new__(cls, flag_name: str | None = None, *, default: Any = None, help: str):
        return super().__new__(cls, flag_name, default=default, help=help)

    def _parse_(self, val: Any) -> bool:
        return parse_bool(val)


class StrListOption(_OptionBase["tuple[str, ...]", "tuple[str, ...]"]):
    """A homogenous list of string options.

    The default value will always be an empty list, and the Python property always returns a tuple
    (for immutability).
    """

    def __new__(
        cls,
        flag_name: str | None = None,
        *,
        default: _MaybeDynamicT[list[str]] | None = None,
        help: str,
    ):
        return super().__new__(cls, flag_name, default=default or (), help=help)

    def _parse_(self, val: Any) -> tuple[str, ...]:
        return parse_str_list(val)
