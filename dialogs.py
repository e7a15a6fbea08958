"""File pickers backed by QFileDialog."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

try:
    from PySide6.QtWidgets import QFileDialog, QWidget
except Exception:  # pragma: no cover
    QFileDialog = None  # type: ignore
    QWidget = object  # type: ignore


class QtFileDialogs:
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        if QFileDialog is None:
            raise RuntimeError("PySide6 is not installed")
        self._parent = parent
        self._last_dir = ""

    def set_parent(self, parent: QWidget) -> None:
        self._parent = parent

    def pick_input_file(self) -> Optional[Path]:
        path, _ = QFileDialog.getOpenFileName(self._parent, "", self._last_dir)
        return self._remember(path)

    def pick_output_file(self, default_name: str) -> Optional[Path]:
        start = str(Path(self._last_dir) / default_name) if self._last_dir else default_name
        path, _ = QFileDialog.getSaveFileName(self._parent, "", start)
        return self._remember(path)

    def _remember(self, path: str) -> Optional[Path]:
        # Empty string means the dialog was cancelled.
        if not path:
            return None
        chosen = Path(path)
        self._last_dir = str(chosen.parent)
        return chosen
