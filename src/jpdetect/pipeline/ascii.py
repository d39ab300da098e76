"""Stage 1: Pure ASCII detection."""

from __future__ import annotations

from jpdetect.pipeline import ASCII_RESULT, DetectionResult

# Every 7-bit byte except ESC (0x1B).  bytes.translate deletes these from the
# input; anything left over is either ESC or a high byte, so the data may be
# Japanese.
_ASCII_NO_ESCAPE: bytes = bytes(b for b in range(0x80) if b != 0x1B)


def detect_ascii(data: bytes) -> DetectionResult | None:
    """Return an ASCII result if *data* holds no ESC and no byte >= 0x80.

    The empty buffer is vacuously ASCII.

    :param data: The raw byte data to examine.
    :returns: A :class:`DetectionResult` for ASCII, or ``None``.
    """
    if data.translate(None, _ASCII_NO_ESCAPE):
        return None
    return ASCII_RESULT
