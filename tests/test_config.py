from __future__ import annotations

from config import DEFAULT_CONFIG, AppConfig
from models import Language
from translations import LABELS, t


def test_default_config() -> None:
    assert DEFAULT_CONFIG.window_title == "EncodeConverter"
    assert DEFAULT_CONFIG.language == Language.ZH
    assert DEFAULT_CONFIG.source_index == 0
    assert DEFAULT_CONFIG.target_index == 3
    assert DEFAULT_CONFIG.default_output_name == "output.txt"


def test_custom_labels_resolve_to_indices() -> None:
    config = AppConfig(source_label="Shift_JIS", target_label="utf-8")

    assert config.source_index == 6
    assert config.target_index == 0


def test_both_languages_share_keys() -> None:
    assert set(LABELS[Language.ZH]) == set(LABELS[Language.EN])


def test_unknown_label_key_falls_back_to_key() -> None:
    assert t("start", Language.EN) == "Start"
    assert t("start", Language.ZH) == "开始转码"
    assert t("missing_key", Language.EN) == "missing_key"
