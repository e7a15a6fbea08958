"""In-process application defaults.

Nothing here is read from or written to disk; every launch starts from
``DEFAULT_CONFIG``.
"""

from __future__ import annotations

from dataclasses import dataclass

import registry
from models import Language, Mode


@dataclass(frozen=True)
class AppConfig:
    window_title: str = "EncodeConverter"
    language: Language = Language.ZH
    mode: Mode = Mode.TEXT
    source_label: str = "UTF-8"
    target_label: str = "GBK"
    default_output_name: str = "output.txt"
    frame_interval_ms: int = 16
    window_width: int = 640
    window_height: int = 520

    @property
    def source_index(self) -> int:
        return registry.index_of(self.source_label)

    @property
    def target_index(self) -> int:
        return registry.index_of(self.target_label)


DEFAULT_CONFIG = AppConfig()
