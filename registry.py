"""Static table of selectable encodings.

Each entry pairs a Python codec name with the label shown in the UI.
Selections are plain indices into ``ENCODINGS``; the window only ever
offers indices that exist here.
"""

from __future__ import annotations

from models import CodecEntry

ENCODINGS: tuple[CodecEntry, ...] = (
    CodecEntry("utf-8", "UTF-8"),
    CodecEntry("utf-16-le", "UTF-16LE"),
    CodecEntry("utf-16-be", "UTF-16BE"),
    CodecEntry("gbk", "GBK"),
    CodecEntry("gb18030", "GB18030"),
    CodecEntry("big5", "BIG5"),
    CodecEntry("shift_jis", "Shift_JIS"),
    CodecEntry("euc_jp", "EUC-JP"),
    CodecEntry("iso2022_jp", "ISO-2022-JP"),
    CodecEntry("euc_kr", "EUC-KR"),
    CodecEntry("cp1250", "Windows-1250"),
    CodecEntry("cp1251", "Windows-1251"),
    CodecEntry("cp1252", "Windows-1252"),
    CodecEntry("cp1253", "Windows-1253"),
    CodecEntry("cp1254", "Windows-1254"),
    CodecEntry("cp1255", "Windows-1255"),
    CodecEntry("cp1256", "Windows-1256"),
    CodecEntry("cp1257", "Windows-1257"),
    CodecEntry("cp1258", "Windows-1258"),
    CodecEntry("iso8859_2", "ISO-8859-2"),
    CodecEntry("iso8859_3", "ISO-8859-3"),
    CodecEntry("iso8859_4", "ISO-8859-4"),
    CodecEntry("iso8859_5", "ISO-8859-5"),
    CodecEntry("iso8859_6", "ISO-8859-6"),
    CodecEntry("iso8859_7", "ISO-8859-7"),
    CodecEntry("iso8859_8", "ISO-8859-8"),
    CodecEntry("iso8859_10", "ISO-8859-10"),
    CodecEntry("iso8859_13", "ISO-8859-13"),
    CodecEntry("iso8859_14", "ISO-8859-14"),
    CodecEntry("iso8859_15", "ISO-8859-15"),
    CodecEntry("iso8859_16", "ISO-8859-16"),
    CodecEntry("mac_roman", "Macintosh"),
    CodecEntry("koi8_r", "KOI8-R"),
    CodecEntry("koi8_u", "KOI8-U"),
    CodecEntry("cp866", "IBM866"),
)


def lookup(selection: int) -> CodecEntry:
    return ENCODINGS[selection]


def labels() -> list[str]:
    return [entry.label for entry in ENCODINGS]


def index_of(label: str) -> int:
    wanted = label.lower()
    for index, entry in enumerate(ENCODINGS):
        if entry.label.lower() == wanted:
            return index
    raise ValueError(f"unknown encoding label: {label}")
