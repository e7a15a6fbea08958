"""Decode/encode between registry codecs.

Conversions are lossy: malformed input becomes U+FFFD and
characters the target cannot hold become the target's replacement
character. None of the functions here raise for bad input; only file I/O
can fail, and that is reported through ``ConversionResult``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import registry
from errors import READ_FAILED, WORKER_FAILED, WRITE_FAILED, describe
from models import ConversionRequest, ConversionResult, Mode

logger = logging.getLogger(__name__)

# A leading BOM wins over the selected source codec and is dropped.
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "utf-8"),
    (b"\xff\xfe", "utf-16-le"),
    (b"\xfe\xff", "utf-16-be"),
)


def _sniff_bom(data: bytes, handle: str) -> tuple[bytes, str]:
    for bom, bom_handle in _BOMS:
        if data.startswith(bom):
            return data[len(bom):], bom_handle
    return data, handle


def transcode_bytes(data: bytes, source: int, target: int) -> bytes:
    payload, source_handle = _sniff_bom(data, registry.lookup(source).handle)
    decoded = payload.decode(source_handle, errors="replace")
    return decoded.encode(registry.lookup(target).handle, errors="replace")


def transcode_text(input_bytes: Union[bytes, str], source: int, target: int) -> str:
    """Convert typed text or raw bytes and render the result for display.

    A ``str`` is taken as the UTF-8 bytes the text box holds. The target
    bytes are shown as UTF-8 with replacement, so anything outside ASCII in
    a non UTF-8 target shows up as replacement characters.
    """
    if isinstance(input_bytes, str):
        input_bytes = input_bytes.encode("utf-8", errors="replace")
    encoded = transcode_bytes(input_bytes, source, target)
    return encoded.decode("utf-8", errors="replace")


def transcode_file(
    input_path: Path,
    output_path: Path,
    source: int,
    target: int,
) -> ConversionResult:
    input_path = Path(input_path)
    output_path = Path(output_path)
    try:
        data = input_path.read_bytes()
    except OSError as exc:
        logger.warning("read failed for %s: %s", input_path, exc)
        return ConversionResult(
            mode=Mode.FILE,
            success=False,
            message=describe(READ_FAILED, str(exc)),
            code=READ_FAILED,
        )

    encoded = transcode_bytes(data, source, target)

    try:
        output_path.write_bytes(encoded)
    except OSError as exc:
        logger.warning("write failed for %s: %s", output_path, exc)
        return ConversionResult(
            mode=Mode.FILE,
            success=False,
            message=describe(WRITE_FAILED, str(exc)),
            code=WRITE_FAILED,
        )

    logger.info(
        "converted %s (%s) -> %s (%s), %d bytes",
        input_path,
        registry.lookup(source).label,
        output_path,
        registry.lookup(target).label,
        len(encoded),
    )
    return ConversionResult(mode=Mode.FILE, success=True, message=f"Done: {output_path}")


def run_request(request: ConversionRequest) -> ConversionResult:
    """Worker body: run one request to completion and never raise."""
    try:
        if request.mode == Mode.TEXT:
            output = transcode_text(request.text, request.source, request.target)
            return ConversionResult(mode=Mode.TEXT, success=True, text=output)
        assert request.input_path is not None and request.output_path is not None
        return transcode_file(
            request.input_path, request.output_path, request.source, request.target
        )
    except Exception as exc:
        logger.exception("conversion worker failed")
        message = describe(WORKER_FAILED, str(exc))
        if request.mode == Mode.TEXT:
            return ConversionResult(
                mode=Mode.TEXT, success=False, text=message, message=message, code=WORKER_FAILED
            )
        return ConversionResult(
            mode=Mode.FILE, success=False, message=message, code=WORKER_FAILED
        )
