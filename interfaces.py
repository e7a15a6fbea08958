"""Protocol interfaces used by ConversionController."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from models import CopyResult


class FileDialogs(Protocol):
    def pick_input_file(self) -> Optional[Path]: ...

    def pick_output_file(self, default_name: str) -> Optional[Path]: ...


class ClipboardService(Protocol):
    def copy_text(self, text: str) -> CopyResult: ...
