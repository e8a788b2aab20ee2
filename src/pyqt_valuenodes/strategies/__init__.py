"""Formatter and refresh option strategies."""

from .formatter_options import (
    ValueFormatterOptions,
    TypeFormatterOptions,
    RefreshNodeOptions,
    REFRESH_VALUE_FIELDS,
    REFRESH_VALUE_AND_TYPE_FIELDS,
    REFRESH_THEME_FIELDS,
    get_value_formatter_options,
    get_type_formatter_options,
)

__all__ = [
    'ValueFormatterOptions',
    'TypeFormatterOptions',
    'RefreshNodeOptions',
    'REFRESH_VALUE_FIELDS',
    'REFRESH_VALUE_AND_TYPE_FIELDS',
    'REFRESH_THEME_FIELDS',
    'get_value_formatter_options',
    'get_type_formatter_options',
]
