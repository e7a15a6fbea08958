"""Clipboard service for copying converted text."""

from __future__ import annotations

import logging

from errors import CLIPBOARD_UNAVAILABLE
from models import CopyResult

try:
    import pyperclip
except Exception:  # pragma: no cover
    pyperclip = None  # type: ignore

logger = logging.getLogger(__name__)


class PyperclipClipboardService:
    def copy_text(self, text: str) -> CopyResult:
        if not text:
            return CopyResult(success=False, reason="empty text")
        if pyperclip is None:
            return CopyResult(success=False, reason=f"{CLIPBOARD_UNAVAILABLE}: pyperclip missing")
        try:
            pyperclip.copy(text)
        except Exception as exc:
            logger.warning("clipboard copy failed: %s", exc)
            return CopyResult(success=False, reason=f"{CLIPBOARD_UNAVAILABLE}: {exc}")
        return CopyResult(success=True, reason="ok")
