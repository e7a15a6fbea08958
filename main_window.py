"""Main converter window."""

from __future__ import annotations

from typing import Optional

import registry
from config import DEFAULT_CONFIG, AppConfig
from conversion_controller import ConversionController
from models import Language, Mode

try:
    from PySide6.QtCore import QTimer
    from PySide6.QtWidgets import (
        QButtonGroup,
        QComboBox,
        QFrame,
        QHBoxLayout,
        QLabel,
        QPlainTextEdit,
        QPushButton,
        QStackedWidget,
        QVBoxLayout,
        QWidget,
    )
except Exception:  # pragma: no cover
    QTimer = None  # type: ignore
    QButtonGroup = None  # type: ignore
    QComboBox = None  # type: ignore
    QFrame = None  # type: ignore
    QHBoxLayout = None  # type: ignore
    QLabel = None  # type: ignore
    QPlainTextEdit = None  # type: ignore
    QPushButton = None  # type: ignore
    QStackedWidget = None  # type: ignore
    QVBoxLayout = None  # type: ignore
    QWidget = object  # type: ignore


def _separator() -> QFrame:
    line = QFrame()
    line.setFrameShape(QFrame.HLine)
    line.setFrameShadow(QFrame.Sunken)
    return line


class MainWindow(QWidget):
    def __init__(self, controller: ConversionController, config: AppConfig = DEFAULT_CONFIG) -> None:
        if QTimer is None:
            raise RuntimeError("PySide6 is not installed")
        super().__init__()
        self._controller = controller
        self.setWindowTitle(config.window_title)
        self.resize(config.window_width, config.window_height)

        # Language
        self._zh_button = QPushButton("中文")
        self._en_button = QPushButton("EN")
        self._zh_button.clicked.connect(lambda: self._set_language(Language.ZH))
        self._en_button.clicked.connect(lambda: self._set_language(Language.EN))
        lang_row = QHBoxLayout()
        lang_row.addWidget(self._zh_button)
        lang_row.addWidget(self._en_button)
        lang_row.addStretch(1)

        # Mode
        self._text_mode_button = QPushButton()
        self._file_mode_button = QPushButton()
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        for button, mode in ((self._text_mode_button, Mode.TEXT), (self._file_mode_button, Mode.FILE)):
            button.setCheckable(True)
            self._mode_group.addButton(button)
            button.clicked.connect(lambda _checked=False, m=mode: self._set_mode(m))
        mode_row = QHBoxLayout()
        mode_row.addWidget(self._text_mode_button)
        mode_row.addWidget(self._file_mode_button)
        mode_row.addStretch(1)

        # Codecs
        self._from_label = QLabel()
        self._to_label = QLabel()
        self._from_combo = QComboBox()
        self._to_combo = QComboBox()
        for combo in (self._from_combo, self._to_combo):
            combo.addItems(registry.labels())
            combo.setMaxVisibleItems(16)
        self._from_combo.currentIndexChanged.connect(controller.set_source)
        self._to_combo.currentIndexChanged.connect(controller.set_target)
        self._swap_button = QPushButton()
        self._swap_button.clicked.connect(lambda: self._swap_codecs())
        codec_row = QHBoxLayout()
        codec_row.addWidget(self._from_label)
        codec_row.addWidget(self._from_combo)
        codec_row.addWidget(self._swap_button)
        codec_row.addWidget(self._to_label)
        codec_row.addWidget(self._to_combo)
        codec_row.addStretch(1)

        self._pages = QStackedWidget()
        self._pages.addWidget(self._build_text_page())
        self._pages.addWidget(self._build_file_page())

        layout = QVBoxLayout()
        layout.addLayout(lang_row)
        layout.addWidget(_separator())
        layout.addLayout(mode_row)
        layout.addWidget(_separator())
        layout.addLayout(codec_row)
        layout.addWidget(_separator())
        layout.addWidget(self._pages, 1)
        self.setLayout(layout)

        self._sync_selections()
        self._retranslate()

        # Per-frame update callback; never blocks.
        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self._on_frame)
        self._frame_timer.start(config.frame_interval_ms)

    def _build_text_page(self) -> QWidget:
        page = QWidget()
        self._input_label = QLabel()
        self._input_edit = QPlainTextEdit()
        self._input_edit.textChanged.connect(self._on_input_changed)
        self._text_start_button = QPushButton()
        self._text_start_button.clicked.connect(lambda: self._controller.start_text())
        self._output_label = QLabel()
        self._output_edit = QPlainTextEdit()
        self._output_edit.setReadOnly(True)
        self._copy_button = QPushButton()
        self._copy_button.clicked.connect(lambda: self._controller.copy_output())
        self._text_status = QLabel()

        buttons = QHBoxLayout()
        buttons.addWidget(self._text_start_button)
        buttons.addWidget(self._copy_button)
        buttons.addStretch(1)

        layout = QVBoxLayout()
        layout.addWidget(self._input_label)
        layout.addWidget(self._input_edit, 1)
        layout.addLayout(buttons)
        layout.addWidget(_separator())
        layout.addWidget(self._output_label)
        layout.addWidget(self._output_edit, 1)
        layout.addWidget(self._text_status)
        page.setLayout(layout)
        return page

    def _build_file_page(self) -> QWidget:
        page = QWidget()
        self._select_input_button = QPushButton()
        self._select_input_button.clicked.connect(lambda: self._controller.choose_input_file())
        self._input_path_label = QLabel()
        self._select_output_button = QPushButton()
        self._select_output_button.clicked.connect(lambda: self._controller.choose_output_file())
        self._output_path_label = QLabel()
        self._file_start_button = QPushButton()
        self._file_start_button.clicked.connect(lambda: self._controller.start_file())
        self._file_status = QLabel()
        self._file_status.setWordWrap(True)

        input_row = QHBoxLayout()
        input_row.addWidget(self._select_input_button)
        input_row.addWidget(self._input_path_label, 1)
        output_row = QHBoxLayout()
        output_row.addWidget(self._select_output_button)
        output_row.addWidget(self._output_path_label, 1)

        layout = QVBoxLayout()
        layout.addLayout(input_row)
        layout.addLayout(output_row)
        layout.addWidget(self._file_start_button)
        layout.addWidget(_separator())
        layout.addWidget(self._file_status)
        layout.addStretch(1)
        page.setLayout(layout)
        return page

    # ------------------------------------------------------------------
    # UI handlers
    # ------------------------------------------------------------------

    def _set_language(self, lang: Language) -> None:
        self._controller.set_language(lang)
        self._retranslate()

    def _set_mode(self, mode: Mode) -> None:
        self._controller.set_mode(mode)
        self._sync_selections()

    def _swap_codecs(self) -> None:
        self._controller.swap_codecs()
        self._sync_selections()

    def _on_input_changed(self) -> None:
        self._controller.input_text = self._input_edit.toPlainText()

    def _on_frame(self) -> None:
        result = self._controller.poll()
        if result is not None and result.mode == Mode.TEXT:
            self._output_edit.setPlainText(self._controller.output_text)
        self._refresh_dynamic()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _sync_selections(self) -> None:
        controller = self._controller
        for combo, index in ((self._from_combo, controller.source), (self._to_combo, controller.target)):
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)
        is_text = controller.mode == Mode.TEXT
        self._text_mode_button.setChecked(is_text)
        self._file_mode_button.setChecked(not is_text)
        self._pages.setCurrentIndex(0 if is_text else 1)

    def _retranslate(self) -> None:
        label = self._controller.label
        self._text_mode_button.setText(label("text"))
        self._file_mode_button.setText(label("file"))
        self._from_label.setText(label("from"))
        self._to_label.setText(label("to"))
        self._swap_button.setText(label("swap"))
        self._input_label.setText(label("input"))
        self._output_label.setText(label("output"))
        self._text_start_button.setText(label("start"))
        self._copy_button.setText(label("copy"))
        self._select_input_button.setText(label("select_input"))
        self._select_output_button.setText(label("select_output"))
        self._file_start_button.setText(label("start"))
        self._refresh_dynamic()

    def _refresh_dynamic(self) -> None:
        controller = self._controller
        self._set_if_changed(self._input_path_label, self._path_text(controller.input_file))
        self._set_if_changed(self._output_path_label, self._path_text(controller.output_file))
        self._set_if_changed(self._file_status, controller.status)
        self._set_if_changed(self._text_status, controller.status)

    def _path_text(self, path: Optional[object]) -> str:
        if path is None:
            return self._controller.label("not_selected")
        return str(path)

    @staticmethod
    def _set_if_changed(widget: QLabel, text: str) -> None:
        if widget.text() != text:
            widget.setText(text)
