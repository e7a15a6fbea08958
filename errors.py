"""Shared error codes and user-facing messages."""

from __future__ import annotations

READ_FAILED = "READ_FAILED"
WRITE_FAILED = "WRITE_FAILED"
WORKER_FAILED = "WORKER_FAILED"
CLIPBOARD_UNAVAILABLE = "CLIPBOARD_UNAVAILABLE"

ERROR_MESSAGES = {
    READ_FAILED: "Cannot read the input file.",
    WRITE_FAILED: "Cannot write the output file.",
    WORKER_FAILED: "Conversion stopped unexpectedly.",
    CLIPBOARD_UNAVAILABLE: "Clipboard is not available.",
}


def describe(code: str, detail: str = "") -> str:
    message = ERROR_MESSAGES.get(code, code)
    if detail:
        return f"{message} {detail}"
    return message
