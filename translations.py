"""UI labels for the two supported languages."""

from __future__ import annotations

from models import Language

LABELS: dict[Language, dict[str, str]] = {
    Language.ZH: {
        "text": "文本转码",
        "file": "文件转码",
        "from": "来源编码",
        "to": "目标编码",
        "swap": "交换",
        "start": "开始转码",
        "input": "输入文本",
        "output": "输出结果",
        "copy": "复制结果",
        "copied": "已复制到剪贴板",
        "select_input": "选择输入文件",
        "select_output": "选择输出文件",
        "no_file": "请先选择输入和输出文件",
        "not_selected": "未选择",
        "working": "正在转码...",
        "idle": "暂无状态",
    },
    Language.EN: {
        "text": "Text",
        "file": "File",
        "from": "From",
        "to": "To",
        "swap": "Swap",
        "start": "Start",
        "input": "Input Text",
        "output": "Output",
        "copy": "Copy",
        "copied": "Copied to clipboard",
        "select_input": "Select Input File",
        "select_output": "Select Output File",
        "no_file": "Choose input and output files first",
        "not_selected": "Not selected",
        "working": "Working...",
        "idle": "Idle",
    },
}


def t(key: str, lang: Language) -> str:
    """Return the label for ``key``, or the key itself when it is unknown."""
    return LABELS[lang].get(key, key)
