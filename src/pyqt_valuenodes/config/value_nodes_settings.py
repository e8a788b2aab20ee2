"""
Settings consumed by value nodes views.

Settings objects are plain QObjects: each setting is a Python property and
assigning a different value emits ``property_changed`` with the setting name.
Listeners may live on any thread; views marshal the notification onto the UI
thread themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class _Setting:
    """Property that stores its value on the owner and notifies on change."""

    def __init__(self, default: bool) -> None:
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.name, self.default)

    def __set__(self, instance: Any, value: bool) -> None:
        if instance._values.get(self.name, self.default) == value:
            return
        instance._values[self.name] = value
        logger.debug(f"{type(instance).__name__}.{self.name} = {value!r}")
        instance.property_changed.emit(self.name)


class _SettingsBase(QObject):
    """Common storage and change signal for settings objects."""

    property_changed = pyqtSignal(str)

    def __init__(self, parent: QObject | None = None, **values: bool) -> None:
        super().__init__(parent)
        self._values: Dict[str, Any] = {}
        for name, value in values.items():
            if not isinstance(getattr(type(self), name, None), _Setting):
                raise ValueError(f"Unknown {type(self).__name__} setting '{name}'")
            self._values[name] = value

    @classmethod
    def setting_names(cls) -> tuple[str, ...]:
        return tuple(
            name for name, attr in vars(cls).items() if isinstance(attr, _Setting)
        )


class DebuggerSettings(_SettingsBase):
    """Debugger-wide display settings."""

    use_hexadecimal = _Setting(False)
    syntax_highlight = _Setting(True)
    property_eval_and_function_calls = _Setting(True)
    use_string_conversion_function = _Setting(True)


class FormatterSettings(_SettingsBase):
    """Type formatting settings for evaluated values."""

    show_declaring_types = _Setting(False)
    show_namespaces = _Setting(True)
    show_intrinsic_type_keywords = _Setting(True)
    show_tokens = _Setting(False)


@dataclass(frozen=True)
class ValueNodesViewOptions:
    """Static configuration of one value nodes view."""

    tree_view_id: str = "value-nodes"
    name_column_name: str = "Name"
    value_column_name: str = "Value"
    type_column_name: str = "Type"
    # Run the structural check after every reconciliation (tests/diagnostics)
    verify_children: bool = False

    def __post_init__(self) -> None:
        for attr in ("name_column_name", "value_column_name", "type_column_name"):
            if not getattr(self, attr).strip():
                raise ValueError(f"ValueNodesViewOptions.{attr} must be non-empty")

    @property
    def header_labels(self) -> list[str]:
        return [self.name_column_name, self.value_column_name, self.type_column_name]
