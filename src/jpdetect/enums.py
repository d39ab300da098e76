"""Enumerations for jpdetect."""

import enum


class Encoding(enum.Enum):
    """Outcome categories of the classifier."""

    BINARY = "binary"
    UTF16_LIKE_RAW = "utf16-like-raw"
    ASCII = "ascii"
    JIS = "jis"
    SHIFT_JIS = "shift-jis"
    EUC_JP = "euc-jp"
    UTF8 = "utf-8"
    UNDETERMINED = "undetermined"


class JisVariant(enum.Enum):
    """Which ISO-2022-JP escape sequence identified a JIS buffer."""

    JIS0208_1978 = "jis0208-1978"
    JIS0208_1983 = "jis0208-1983"
    JIS_ASCII = "jis-ascii"
    JIS_KANA = "jis-kana"
    JIS0212 = "jis0212"
    JIS0208_1990 = "jis0208-1990"


# Results the converter never rewrites.
NON_TEXT: frozenset[Encoding] = frozenset(
    {Encoding.BINARY, Encoding.UTF16_LIKE_RAW, Encoding.UNDETERMINED}
)
