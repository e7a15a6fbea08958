"""Core data models for the app."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Mode(str, Enum):
    TEXT = "text"
    FILE = "file"


class Language(str, Enum):
    ZH = "zh"
    EN = "en"


class ControllerState(str, Enum):
    IDLE = "IDLE"
    WORKING = "WORKING"


@dataclass(frozen=True)
class CodecEntry:
    handle: str
    label: str


@dataclass(frozen=True)
class ConversionRequest:
    mode: Mode
    source: int
    target: int
    text: str = ""
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None


@dataclass
class ConversionResult:
    mode: Mode
    success: bool
    text: str = ""
    message: str = ""
    code: str = ""


@dataclass
class CopyResult:
    success: bool
    reason: str
