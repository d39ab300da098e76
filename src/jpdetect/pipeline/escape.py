"""Stage 2: ISO-2022-JP escape sequence detection.

Each ESC (0x1B) in the buffer is tested against the designator sequences
below, in table order.  The first ESC that introduces a known sequence
decides the result; later escapes are never looked at.
"""

from __future__ import annotations

from jpdetect.enums import Encoding, JisVariant
from jpdetect.pipeline import DetectionResult

_ESC = 0x1B

_DESIGNATORS: tuple[tuple[bytes, JisVariant], ...] = (
    (b"\x1b$@", JisVariant.JIS0208_1978),
    (b"\x1b$B", JisVariant.JIS0208_1983),
    (b"\x1b(B", JisVariant.JIS_ASCII),
    (b"\x1b(J", JisVariant.JIS_ASCII),
    (b"\x1b(I", JisVariant.JIS_KANA),
    (b"\x1b$(D", JisVariant.JIS0212),
    (b"\x1b&@\x1b$B", JisVariant.JIS0208_1990),
)

_RESULTS: dict[JisVariant, DetectionResult] = {
    variant: DetectionResult(Encoding.JIS, variant) for variant in JisVariant
}


def match_designator(data: bytes, pos: int) -> JisVariant | None:
    """Return the JIS variant whose designator starts at *pos*, if any."""
    for sequence, variant in _DESIGNATORS:
        if data.startswith(sequence, pos):
            return variant
    return None


def detect_escape_encoding(data: bytes) -> DetectionResult | None:
    """Detect ISO-2022-JP from the first recognised escape sequence.

    :param data: The raw byte data to examine.
    :returns: A JIS :class:`DetectionResult`, or ``None``.
    """
    pos = data.find(_ESC)
    while pos != -1:
        variant = match_designator(data, pos)
        if variant is not None:
            return _RESULTS[variant]
        pos = data.find(_ESC, pos + 1)
    return None
