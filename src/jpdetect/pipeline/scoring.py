"""Stage 3: Weighted byte-pattern scoring for Shift-JIS, EUC-JP and UTF-8.

Each encoding gets its own forward scan over the whole buffer.  A scan adds
the width of every byte pattern it recognises and then skips past the
matched bytes, so a pattern never overlaps itself.  The scans do not know
about each other: the same bytes can count toward several encodings.
"""

from __future__ import annotations

import dataclasses

from jpdetect.enums import Encoding
from jpdetect.pipeline import UNDETERMINED_RESULT, DetectionResult

_SHIFT_JIS_RESULT = DetectionResult(Encoding.SHIFT_JIS)
_EUC_JP_RESULT = DetectionResult(Encoding.EUC_JP)
_UTF8_RESULT = DetectionResult(Encoding.UTF8)


@dataclasses.dataclass(frozen=True, slots=True)
class ByteScores:
    """Matched byte weights per candidate encoding."""

    sjis: int
    euc: int
    utf8: int

    def winner(self) -> DetectionResult:
        """Return the encoding with a strict maximum, else undetermined."""
        if self.euc > self.sjis and self.euc > self.utf8:
            return _EUC_JP_RESULT
        if self.sjis > self.euc and self.sjis > self.utf8:
            return _SHIFT_JIS_RESULT
        if self.utf8 > self.euc and self.utf8 > self.sjis:
            return _UTF8_RESULT
        return UNDETERMINED_RESULT


def _is_sjis_lead(byte: int) -> bool:
    return 0x81 <= byte <= 0x9F or 0xE0 <= byte <= 0xFC


def _is_sjis_trail(byte: int) -> bool:
    return 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xFC


def _is_euc_byte(byte: int) -> bool:
    return 0xA1 <= byte <= 0xFE


def _is_utf8_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def score_shift_jis(data: bytes) -> int:
    """Count bytes forming Shift-JIS lead/trail pairs."""
    score = 0
    i = 0
    end = len(data) - 1
    while i < end:
        if _is_sjis_lead(data[i]) and _is_sjis_trail(data[i + 1]):
            score += 2
            i += 1
        i += 1
    return score


def score_euc_jp(data: bytes) -> int:
    """Count bytes forming EUC-JP characters.

    Two-byte JIS X 0208 pairs and SS2 half-width kana count 2; SS3
    (0x8F) JIS X 0212 triples count 3.
    """
    score = 0
    i = 0
    length = len(data)
    while i < length - 1:
        b1 = data[i]
        b2 = data[i + 1]
        if (_is_euc_byte(b1) and _is_euc_byte(b2)) or (
            b1 == 0x8E and 0xA1 <= b2 <= 0xDF
        ):
            score += 2
            i += 1
        elif (
            i < length - 2
            and b1 == 0x8F
            and _is_euc_byte(b2)
            and _is_euc_byte(data[i + 2])
        ):
            score += 3
            i += 2
        i += 1
    return score


def score_utf8(data: bytes) -> int:
    """Count bytes forming two- and three-byte UTF-8 sequences.

    Four-byte sequences are not recognised.
    """
    score = 0
    i = 0
    length = len(data)
    while i < length - 1:
        b1 = data[i]
        if 0xC0 <= b1 <= 0xDF and _is_utf8_continuation(data[i + 1]):
            score += 2
            i += 1
        elif (
            i < length - 2
            and 0xE0 <= b1 <= 0xEF
            and _is_utf8_continuation(data[i + 1])
            and _is_utf8_continuation(data[i + 2])
        ):
            score += 3
            i += 2
        i += 1
    return score


def compute_scores(data: bytes) -> ByteScores:
    """Run the three scans over *data*."""
    return ByteScores(
        sjis=score_shift_jis(data),
        euc=score_euc_jp(data),
        utf8=score_utf8(data),
    )

