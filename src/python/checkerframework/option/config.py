# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Iterable, Mapping

import toml
from typing_extensions import Protocol

from checkerframework.option.errors import (
    ConfigError,
    ConfigValidationError,
    InterpolationMissingOptionError,
)
from checkerframework.util.strutil import softwrap

logger = logging.getLogger(__name__)


class ConfigSource(Protocol):
    """A protocol that matches `FileContent`: anything with a path and raw bytes."""

    @property
    def path(self) -> str:
        raise NotImplementedError()

    @property
    def content(self) -> bytes:
        raise NotImplementedError()


@dataclass(frozen=True)
class FileContent:
    path: str
    content: bytes


DEFAULT_SECTION = "DEFAULT"

_INTERPOLATION_RE = re.compile(r"%\(([a-zA-Z_0-9.]+)\)s")


@dataclass(frozen=True, eq=False)
class Config:
    """Encapsulates config file loading and access, including support for multiple config files.

    Supports variable substitution using old-style Python format strings. E.g., %(var_name)s will be
    replaced with the value of var_name, looked up in the same section, then in the DEFAULT section
    and the seed values (`buildroot`, `homedir` and `env.<NAME>`).
    """

    values: tuple[_ConfigValues, ...]

    @classmethod
    def load(
        cls,
        file_contents: Iterable[ConfigSource],
        *,
        buildroot: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Config:
        """Loads config from the given payloads, with later payloads overriding earlier ones."""
        seed_values = cls._determine_seed_values(buildroot=buildroot, env=env)
        config_values = []
        for file_content in file_contents:
            try:
                toml_values = toml.loads(file_content.content.decode())
            except Exception as e:
                raise ConfigError(
                    f"Config file {file_content.path} could not be parsed as TOML:\n  {e}"
                )
            config_values.append(
                _ConfigValues(
                    file_content.path,
                    toml_values,
                    {**seed_values, **toml_values.get(DEFAULT_SECTION, {})},
                )
            )
        return cls(tuple(config_values))

    @staticmethod
    def _determine_seed_values(
        *, buildroot: str | None = None, env: Mapping[str, str] | None = None
    ) -> dict[str, Any]:
        all_seed_values: dict[str, Any] = {
            "buildroot": buildroot or os.getcwd(),
            "homedir": os.path.expanduser("~"),
        }
        if env:
            all_seed_values["env"] = SimpleNamespace(**env)
        return all_seed_values

    def verify(
        self, section_to_valid_options: dict[str, set[str]], *, strict_sections: bool = True
    ) -> None:
        """Raises ConfigValidationError for any option not registered in its section.

        With `strict_sections=False`, sections missing from `section_to_valid_options` are left
        alone, so a caller can verify only the sections it owns.
        """
        error_log = []
        for config_values in self.values:
            error_log.extend(
                config_values.get_verification_errors(
                    section_to_valid_options, strict_sections=strict_sections
                )
            )
        if error_log:
            for error in error_log:
                logger.error(error)
            raise ConfigValidationError(
                softwrap(
                    """
                    Invalid config entries detected. See log for details on which entries to update
                    or remove.
                    """
                )
            )

    def get(self, section: str, option: str) -> list[Any]:
        """Retrieves an option value from each config file in which it appears."""
        available_vals = []
        for vals in self.values:
            val = vals.get_value(section, option)
            if val is not None:
                available_vals.append(val)
        return available_vals

    def sources(self) -> list[str]:
        """Returns the sources of this config as a list of filenames."""
        return [vals.path for vals in self.values]


@dataclass(frozen=True)
class _ConfigValues:
    """The parsed contents of a TOML config file."""

    path: str
    section_to_values: dict[str, dict[str, Any]]
    seed_values: dict[str, Any]

    def _interpolate(self, raw_value: str, *, option: str, section: str) -> str:
        section_values = self.section_to_values.get(section, {})

        def format_str(value: str) -> str:
            # Escape embedded { and } characters, so that .format() does not act on them.
            escaped_str = value.replace("{", "{{").replace("}", "}}")
            new_style_format_str = _INTERPOLATION_RE.sub(r"{\1}", escaped_str)
            try:
                return new_style_format_str.format(**{**self.seed_values, **section_values})
            except (KeyError, AttributeError) as e:
                bad_reference = e.args[0] if e.args else value
                raise InterpolationMissingOptionError(option, section, raw_value, bad_reference)

        value = raw_value
        # It's possible to interpolate with a value that itself has an interpolation.
        while _INTERPOLATION_RE.search(value):
            value = format_str(value)
        return value

    def get_value(self, section: str, option: str) -> Any:
        section_values = self.section_to_values.get(section)
        if section_values is None or option not in section_values:
            return None
        value = section_values[option]
        if isinstance(value, str):
            return self._interpolate(value, option=option, section=section)
        if isinstance(value, list):
            return [
                self._interpolate(item, option=option, section=section)
                if isinstance(item, str)
                else item
                for item in value
            ]
        return value

    def get_verification_errors(
        self, section_to_valid_options: dict[str, set[str]], *, strict_sections: bool = True
    ) -> list[str]:
        error_log = []
        for section, vals in self.section_to_values.items():
            if section == DEFAULT_SECTION:
                continue
            try:
                valid_options_in_section = section_to_valid_options[section]
            except KeyError:
                if strict_sections:
                    error_log.append(f"Invalid section [{section}] in {self.path}")
            else:
                for option in sorted(set(vals.keys()) - valid_options_in_section):
                    error_log.append(f"Invalid option '{option}' under [{section}] in {self.path}")
        return error_log
