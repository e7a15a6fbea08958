from __future__ import annotations

import clipboard
from clipboard import PyperclipClipboardService
from errors import CLIPBOARD_UNAVAILABLE


class _FakePyperclip:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("no display")
        self.copied.append(text)


def test_copy_returns_failure_when_dependency_missing(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", None)

    result = PyperclipClipboardService().copy_text("hello")

    assert result.success is False
    assert result.reason.startswith(CLIPBOARD_UNAVAILABLE)


def test_copy_returns_failure_on_empty_text() -> None:
    result = PyperclipClipboardService().copy_text("")

    assert result.success is False


def test_copy_puts_text_on_clipboard(monkeypatch) -> None:  # noqa: ANN001
    fake = _FakePyperclip()
    monkeypatch.setattr(clipboard, "pyperclip", fake)

    result = PyperclipClipboardService().copy_text("你好")

    assert result.success is True
    assert fake.copied == ["你好"]


def test_copy_reports_backend_error(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(clipboard, "pyperclip", _FakePyperclip(fail=True))

    result = PyperclipClipboardService().copy_text("hello")

    assert result.success is False
    assert "no display" in result.reason
