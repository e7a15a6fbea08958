"""Application entrypoint."""

from __future__ import annotations

import logging
import sys

from clipboard import PyperclipClipboardService
from config import DEFAULT_CONFIG
from conversion_controller import ConversionController
from dialogs import QtFileDialogs
from main_window import MainWindow
from models import ControllerState

try:
    from PySide6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

logger = logging.getLogger(__name__)


class App:
    def __init__(self) -> None:
        self.app = QApplication(sys.argv)
        self.app.setApplicationName(DEFAULT_CONFIG.window_title)
        self.dialogs = QtFileDialogs()
        self.controller = ConversionController(
            dialogs=self.dialogs,
            clipboard=PyperclipClipboardService(),
            config=DEFAULT_CONFIG,
            on_state_change=self._on_state_change,
        )
        self.window = MainWindow(self.controller, DEFAULT_CONFIG)
        self.dialogs.set_parent(self.window)

    def _on_state_change(self, from_state: ControllerState, to_state: ControllerState) -> None:
        logger.debug("controller %s -> %s", from_state.value, to_state.value)

    def run(self) -> int:
        self.window.show()
        # In-flight workers are daemon threads and are abandoned on exit.
        return self.app.exec()


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
