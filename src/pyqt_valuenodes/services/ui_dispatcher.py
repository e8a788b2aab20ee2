"""UI-thread affinity checks and cross-thread callback marshalling."""

from __future__ import annotations

import threading
from typing import Callable

from PyQt6.QtCore import QObject, Qt, pyqtSignal, pyqtSlot


class UIDispatcher(QObject):
    """Owns the notion of "the UI thread" for a group of views.

    Must be created on the UI thread. ``ui()`` may be called from any thread.
    """

    _invoke = pyqtSignal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._ui_thread_ident = threading.get_ident()
        self._invoke.connect(self._run, Qt.ConnectionType.QueuedConnection)

    def check_access(self) -> bool:
        return threading.get_ident() == self._ui_thread_ident

    def verify_access(self) -> None:
        """Raise RuntimeError unless called on the UI thread."""
        if not self.check_access():
            raise RuntimeError(
                f"Called from thread '{threading.current_thread().name}', "
                f"but this object may only be accessed on the UI thread"
            )

    def ui(self, callback: Callable[[], None]) -> None:
        """Run callback on the UI thread: now if already there, else queued."""
        if self.check_access():
            callback()
            return
        self._invoke.emit(callback)

    @pyqtSlot(object)
    def _run(self, callback: Callable[[], None]) -> None:
        callback()
