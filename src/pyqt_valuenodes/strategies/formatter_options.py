"""Formatter and refresh option flags computed from settings."""

from __future__ import annotations

from enum import Flag, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyqt_valuenodes.config.value_nodes_settings import (
        DebuggerSettings,
        FormatterSettings,
    )


class ValueFormatterOptions(Flag):
    """Options used when formatting a value column."""

    NONE = 0
    DISPLAY = auto()
    DECIMAL = auto()
    FUNC_EVAL = auto()
    TO_STRING = auto()
    DECLARING_TYPES = auto()
    NAMESPACES = auto()
    INTRINSIC_TYPE_KEYWORDS = auto()
    TOKENS = auto()


class TypeFormatterOptions(Flag):
    """Options used when formatting a type column."""

    NONE = 0
    DECLARING_TYPES = auto()
    NAMESPACES = auto()
    INTRINSIC_TYPE_KEYWORDS = auto()
    TOKENS = auto()


class RefreshNodeOptions(Flag):
    """Which parts of a node a refresh re-renders."""

    NONE = 0
    REFRESH_NAME = auto()
    REFRESH_NAME_CONTROL = auto()
    REFRESH_VALUE = auto()
    REFRESH_VALUE_CONTROL = auto()
    REFRESH_TYPE = auto()
    REFRESH_TYPE_CONTROL = auto()
    ALL = (
        REFRESH_NAME | REFRESH_NAME_CONTROL
        | REFRESH_VALUE | REFRESH_VALUE_CONTROL
        | REFRESH_TYPE | REFRESH_TYPE_CONTROL
    )


# Refresh presets for the different kinds of settings changes
REFRESH_VALUE_FIELDS = (
    RefreshNodeOptions.REFRESH_VALUE | RefreshNodeOptions.REFRESH_VALUE_CONTROL
)
REFRESH_VALUE_AND_TYPE_FIELDS = (
    REFRESH_VALUE_FIELDS
    | RefreshNodeOptions.REFRESH_TYPE
    | RefreshNodeOptions.REFRESH_TYPE_CONTROL
)
REFRESH_THEME_FIELDS = (
    RefreshNodeOptions.REFRESH_NAME_CONTROL
    | RefreshNodeOptions.REFRESH_VALUE_CONTROL
    | RefreshNodeOptions.REFRESH_TYPE_CONTROL
)


def get_value_formatter_options(
    debugger_settings: "DebuggerSettings",
    formatter_settings: "FormatterSettings",
    *,
    is_display: bool,
) -> ValueFormatterOptions:
    """Build value formatter flags from the current settings."""
    flags = ValueFormatterOptions.NONE
    if is_display:
        flags |= ValueFormatterOptions.DISPLAY
    if not debugger_settings.use_hexadecimal:
        flags |= ValueFormatterOptions.DECIMAL
    if debugger_settings.property_eval_and_function_calls:
        flags |= ValueFormatterOptions.FUNC_EVAL
    if debugger_settings.use_string_conversion_function:
        flags |= ValueFormatterOptions.TO_STRING
    if formatter_settings.show_declaring_types:
        flags |= ValueFormatterOptions.DECLARING_TYPES
    if formatter_settings.show_namespaces:
        flags |= ValueFormatterOptions.NAMESPACES
    if formatter_settings.show_intrinsic_type_keywords:
        flags |= ValueFormatterOptions.INTRINSIC_TYPE_KEYWORDS
    if formatter_settings.show_tokens:
        flags |= ValueFormatterOptions.TOKENS
    return flags


def get_type_formatter_options(
    formatter_settings: "FormatterSettings",
) -> TypeFormatterOptions:
    """Build type formatter flags from the current settings."""
    flags = TypeFormatterOptions.NONE
    if formatter_settings.show_declaring_types:
        flags |= TypeFormatterOptions.DECLARING_TYPES
    if formatter_settings.show_namespaces:
        flags |= TypeFormatterOptions.NAMESPACES
    if formatter_settings.show_intrinsic_type_keywords:
        flags |= TypeFormatterOptions.INTRINSIC_TYPE_KEYWORDS
    if formatter_settings.show_tokens:
        flags |= TypeFormatterOptions.TOKENS
    return flags
