from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Optional

import registry
from config import AppConfig
from conversion_controller import ConversionController
from models import (
    ControllerState,
    ConversionRequest,
    ConversionResult,
    CopyResult,
    Language,
    Mode,
)


class FakeDialogs:
    def __init__(self, input_path: Optional[Path] = None, output_path: Optional[Path] = None) -> None:
        self.input_path = input_path
        self.output_path = output_path
        self.default_names: list[str] = []

    def pick_input_file(self) -> Optional[Path]:
        return self.input_path

    def pick_output_file(self, default_name: str) -> Optional[Path]:
        self.default_names.append(default_name)
        return self.output_path


class FakeClipboard:
    def __init__(self, success: bool = True) -> None:
        self.success = success
        self.calls: list[str] = []

    def copy_text(self, text: str) -> CopyResult:
        self.calls.append(text)
        if self.success:
            return CopyResult(success=True, reason="ok")
        return CopyResult(success=False, reason="no clipboard")


def _poll_until(controller: ConversionController, timeout_s: float = 2.0) -> Optional[ConversionResult]:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        result = controller.poll()
        if result is not None:
            return result
        time.sleep(0.01)
    return None


def _make_controller(**kwargs) -> ConversionController:  # noqa: ANN003
    kwargs.setdefault("dialogs", FakeDialogs())
    kwargs.setdefault("clipboard", FakeClipboard())
    return ConversionController(**kwargs)


def test_defaults_match_config() -> None:
    controller = _make_controller()

    assert controller.lang == Language.ZH
    assert controller.mode == Mode.TEXT
    assert registry.lookup(controller.source).label == "UTF-8"
    assert registry.lookup(controller.target).label == "GBK"
    assert controller.state == ControllerState.IDLE
    assert controller.status == "暂无状态"
    assert controller.poll() is None


def test_text_conversion_is_delivered_by_poll() -> None:
    transitions: list[tuple[ControllerState, ControllerState]] = []
    controller = _make_controller(on_state_change=lambda f, t: transitions.append((f, t)))
    controller.input_text = "hello"

    assert controller.start() is True
    result = _poll_until(controller)

    assert result is not None
    assert result.success is True
    assert controller.output_text == "hello"
    assert controller.state == ControllerState.IDLE
    assert transitions == [
        (ControllerState.IDLE, ControllerState.WORKING),
        (ControllerState.WORKING, ControllerState.IDLE),
    ]
    assert controller.poll() is None


def test_file_conversion_updates_status(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes("你好".encode("gbk"))
    controller = _make_controller(dialogs=FakeDialogs(src, dst))
    controller.set_mode(Mode.FILE)
    controller.set_source(registry.index_of("GBK"))
    controller.set_target(registry.index_of("UTF-8"))
    controller.choose_input_file()
    controller.choose_output_file()

    assert controller.start() is True
    assert controller.status == "正在转码..."
    result = _poll_until(controller)

    assert result is not None
    assert result.success is True
    assert controller.status == f"Done: {dst}"
    assert dst.read_bytes() == "你好".encode("utf-8")


def test_file_conversion_error_is_shown_as_status(tmp_path: Path) -> None:
    controller = _make_controller(
        dialogs=FakeDialogs(tmp_path / "missing.txt", tmp_path / "out.txt")
    )
    controller.set_mode(Mode.FILE)
    controller.choose_input_file()
    controller.choose_output_file()

    controller.start()
    result = _poll_until(controller)

    assert result is not None
    assert result.success is False
    assert controller.status == result.message
    assert not (tmp_path / "out.txt").exists()


def test_start_file_without_paths_does_nothing() -> None:
    calls: list[ConversionRequest] = []

    def runner(request: ConversionRequest) -> ConversionResult:
        calls.append(request)
        return ConversionResult(mode=request.mode, success=True)

    controller = _make_controller(runner=runner)
    controller.set_language(Language.EN)

    assert controller.start_file() is False
    assert controller.state == ControllerState.IDLE
    assert controller.status == "Choose input and output files first"
    time.sleep(0.05)
    assert calls == []


def test_second_conversion_replaces_first_result() -> None:
    release_first = threading.Event()
    first_done = threading.Event()

    def runner(request: ConversionRequest) -> ConversionResult:
        if request.text == "first":
            release_first.wait(timeout=2.0)
            first_done.set()
        return ConversionResult(mode=Mode.TEXT, success=True, text=request.text.upper())

    controller = _make_controller(runner=runner)
    controller.input_text = "first"
    controller.start_text()
    controller.input_text = "second"
    controller.start_text()

    result = _poll_until(controller)
    assert result is not None
    assert controller.output_text == "SECOND"

    release_first.set()
    assert first_done.wait(timeout=2.0)
    time.sleep(0.05)

    assert controller.poll() is None
    assert controller.output_text == "SECOND"


def test_result_is_routed_by_request_mode() -> None:
    controller = _make_controller()
    controller.input_text = "hello"
    controller.start_text()
    controller.set_mode(Mode.FILE)

    _poll_until(controller)

    assert controller.output_text == "hello"
    assert controller.status == "暂无状态"


def test_status_follows_language() -> None:
    controller = _make_controller()
    controller.set_language(Language.EN)
    assert controller.status == "Idle"
    assert controller.label("start") == "Start"


def test_swap_codecs() -> None:
    controller = _make_controller(config=AppConfig(source_label="BIG5", target_label="UTF-8"))
    controller.swap_codecs()

    assert registry.lookup(controller.source).label == "UTF-8"
    assert registry.lookup(controller.target).label == "BIG5"


def test_output_dialog_default_name() -> None:
    dialogs = FakeDialogs(input_path=Path("/data/notes.txt"))
    controller = _make_controller(dialogs=dialogs)

    controller.choose_output_file()
    controller.choose_input_file()
    controller.choose_output_file()

    assert dialogs.default_names == ["output.txt", "notes.GBK.txt"]


def test_cancelled_dialog_keeps_previous_choice() -> None:
    dialogs = FakeDialogs(input_path=Path("a.txt"), output_path=Path("b.txt"))
    controller = _make_controller(dialogs=dialogs)
    controller.choose_input_file()
    controller.choose_output_file()

    dialogs.input_path = None
    dialogs.output_path = None

    assert controller.choose_input_file() is None
    assert controller.choose_output_file() is None
    assert controller.input_file == Path("a.txt")
    assert controller.output_file == Path("b.txt")


def test_copy_output_success() -> None:
    clipboard = FakeClipboard(success=True)
    controller = _make_controller(clipboard=clipboard)
    controller.output_text = "converted"

    result = controller.copy_output()

    assert result.success is True
    assert clipboard.calls == ["converted"]
    assert controller.status == "已复制到剪贴板"


def test_copy_output_failure_shows_reason() -> None:
    controller = _make_controller(clipboard=FakeClipboard(success=False))
    controller.output_text = "converted"

    result = controller.copy_output()

    assert result.success is False
    assert controller.status == "no clipboard"
