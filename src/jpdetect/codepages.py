"""Mapping from classifier results to Python codec names.

The classifier only reports *what kind* of bytes it saw.  Turning that into
something :meth:`bytes.decode` accepts happens here, at the boundary, so the
pipeline stages never deal with codec names.

All ISO-2022-JP variants share one codec.  ``iso2022_jp_ext`` understands
JIS X 0208 (1978 and 1983), JIS X 0212 and JIS X 0201 katakana, which
covers every designator the escape stage recognises.
"""

from __future__ import annotations

from jpdetect.enums import Encoding
from jpdetect.pipeline import DetectionResult

CODEC_NAMES: dict[Encoding, str] = {
    Encoding.UTF16_LIKE_RAW: "utf-16-le",
    Encoding.ASCII: "ascii",
    Encoding.JIS: "iso2022_jp_ext",
    Encoding.SHIFT_JIS: "cp932",
    Encoding.EUC_JP: "euc_jp",
    Encoding.UTF8: "utf-8",
}


def codec_for(result: DetectionResult) -> str | None:
    """Return the codec name for *result*, or ``None`` if there is none.

    Binary and undetermined results have no codec.
    """
    return CODEC_NAMES.get(result.encoding)

