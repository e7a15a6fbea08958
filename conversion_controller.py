"""Session state and background dispatch for conversions."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from queue import Empty, Queue
from typing import Callable, Optional

import registry
from config import DEFAULT_CONFIG, AppConfig
from interfaces import ClipboardService, FileDialogs
from models import (
    ControllerState,
    ConversionRequest,
    ConversionResult,
    CopyResult,
    Language,
    Mode,
)
from transcode import run_request
from translations import t

logger = logging.getLogger(__name__)

StateCallback = Callable[[ControllerState, ControllerState], None]
Runner = Callable[[ConversionRequest], ConversionResult]


class ConversionController:
    """Everything the window remembers between frames.

    Only one result slot exists. Starting a conversion while another is in
    flight replaces the slot, so the older worker's result is never seen.
    All methods are meant to be called from the UI thread; workers only
    touch the queue they were handed.
    """

    def __init__(
        self,
        dialogs: FileDialogs,
        clipboard: ClipboardService,
        config: AppConfig = DEFAULT_CONFIG,
        runner: Runner = run_request,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        self._dialogs = dialogs
        self._clipboard = clipboard
        self._config = config
        self._runner = runner
        self._on_state_change = on_state_change

        self.lang = config.language
        self.mode = config.mode
        self.source = config.source_index
        self.target = config.target_index
        self.input_text = ""
        self.output_text = ""
        self.input_file: Optional[Path] = None
        self.output_file: Optional[Path] = None

        self._status_key: Optional[str] = "idle"
        self._status_message = ""
        self._state = ControllerState.IDLE
        self._slot: Optional[Queue[ConversionResult]] = None

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def status(self) -> str:
        if self._status_key is not None:
            return t(self._status_key, self.lang)
        return self._status_message

    def label(self, key: str) -> str:
        return t(key, self.lang)

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------

    def set_language(self, lang: Language) -> None:
        self.lang = lang

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode

    def set_source(self, index: int) -> None:
        self.source = index

    def set_target(self, index: int) -> None:
        self.target = index

    def swap_codecs(self) -> None:
        self.source, self.target = self.target, self.source

    def choose_input_file(self) -> Optional[Path]:
        path = self._dialogs.pick_input_file()
        if path is not None:
            self.input_file = path
        return path

    def choose_output_file(self) -> Optional[Path]:
        path = self._dialogs.pick_output_file(self.default_output_name())
        if path is not None:
            self.output_file = path
        return path

    def default_output_name(self) -> str:
        if self.input_file is None:
            return self._config.default_output_name
        label = registry.lookup(self.target).label
        return f"{self.input_file.stem}.{label}{self.input_file.suffix}"

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        if self.mode == Mode.TEXT:
            return self.start_text()
        return self.start_file()

    def start_text(self) -> bool:
        request = ConversionRequest(
            mode=Mode.TEXT,
            source=self.source,
            target=self.target,
            text=self.input_text,
        )
        self._dispatch(request)
        return True

    def start_file(self) -> bool:
        if self.input_file is None or self.output_file is None:
            logger.info(
                "file conversion not started: input=%s output=%s",
                self.input_file,
                self.output_file,
            )
            self._set_status_key("no_file")
            return False
        request = ConversionRequest(
            mode=Mode.FILE,
            source=self.source,
            target=self.target,
            input_path=self.input_file,
            output_path=self.output_file,
        )
        self._set_status_key("working")
        self._dispatch(request)
        return True

    def poll(self) -> Optional[ConversionResult]:
        """Non-blocking check of the result slot; call once per frame."""
        slot = self._slot
        if slot is None:
            return None
        try:
            result = slot.get_nowait()
        except Empty:
            return None
        self._slot = None
        if result.mode == Mode.TEXT:
            self.output_text = result.text
        else:
            self._set_status_message(result.message)
        logger.debug("delivered %s result, success=%s", result.mode.value, result.success)
        self._transition(ControllerState.IDLE)
        return result

    def copy_output(self) -> CopyResult:
        result = self._clipboard.copy_text(self.output_text)
        if result.success:
            self._set_status_key("copied")
        else:
            self._set_status_message(result.reason)
        return result

    def _dispatch(self, request: ConversionRequest) -> None:
        if self._slot is not None:
            logger.info("replacing pending result slot, earlier conversion will be ignored")
        slot: Queue[ConversionResult] = Queue(maxsize=1)
        self._slot = slot
        logger.debug(
            "dispatching %s conversion %s -> %s",
            request.mode.value,
            registry.lookup(request.source).label,
            registry.lookup(request.target).label,
        )
        self._transition(ControllerState.WORKING)
        threading.Thread(
            target=self._work,
            args=(request, slot),
            name="transcode-worker",
            daemon=True,
        ).start()

    def _work(self, request: ConversionRequest, slot: Queue[ConversionResult]) -> None:
        slot.put_nowait(self._runner(request))

    def _set_status_key(self, key: str) -> None:
        self._status_key = key
        self._status_message = ""

    def _set_status_message(self, message: str) -> None:
        self._status_key = None
        self._status_message = message

    def _transition(self, to_state: ControllerState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        self._state = to_state
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
