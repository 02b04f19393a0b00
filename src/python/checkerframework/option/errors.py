# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from checkerframework.base.exceptions import CheckerFrameworkException
from checkerframework.util.strutil import softwrap


class OptionsError(CheckerFrameworkException):
    """An options system-related error."""


# -----------------------------------------------------------------------
# Flag parsing errors
# -----------------------------------------------------------------------


class ParseError(OptionsError):
    """An error at flag parsing time."""


class BooleanConversionError(ParseError):
    """Indicates a value other than 'True' or 'False' when attempting to parse a bool."""


class ListConversionError(ParseError):
    """Indicates a value that could not be read as a list of strings."""


# -----------------------------------------------------------------------
# Config parsing errors
# -----------------------------------------------------------------------


class ConfigError(OptionsError):
    """An error encountered while parsing a config file."""


class ConfigValidationError(ConfigError):
    """A config file is invalid."""


class InterpolationMissingOptionError(ConfigError):
    def __init__(self, option, section, rawval, reference):
        super().__init__(
            softwrap(
                f"""
                Bad value substitution: option {option} in section {section} contains an
                interpolation key {reference} which is not a valid option name.

                Raw value: {rawval}
                """
            ),
        )
