"""Stage 0: Binary content and raw UTF-16 detection."""

from __future__ import annotations

from jpdetect.pipeline import BINARY_RESULT, UTF16_LIKE_RAW_RESULT, DetectionResult


def _is_control_like(byte: int) -> bool:
    return byte <= 0x06 or byte in (0x7F, 0xFF)


def detect_binary(data: bytes) -> DetectionResult | None:
    """Classify *data* as binary or raw UTF-16, or return ``None``.

    Any byte in 0x00-0x06, 0x7F or 0xFF marks the buffer as binary, but a
    NUL followed by a byte <= 0x7F looks like UTF-16 text and wins as soon
    as it is seen.  A NUL in the last position has no successor and only
    counts toward the binary verdict.

    :param data: The raw byte data to examine.
    :returns: A :class:`DetectionResult`, or ``None`` for text-like data.
    """
    length = len(data)
    binary = False
    for i in range(length):
        byte = data[i]
        if not _is_control_like(byte):
            continue
        binary = True
        # NUL + ASCII smells like raw UTF-16
        if byte == 0x00 and i < length - 1 and data[i + 1] <= 0x7F:
            return UTF16_LIKE_RAW_RESULT
    if binary:
        return BINARY_RESULT
    return None
