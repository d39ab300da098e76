"""Japanese-aware character encoding classifier."""

from __future__ import annotations

from jpdetect._utils import _as_bytes
from jpdetect.codepages import codec_for
from jpdetect.enums import Encoding, JisVariant
from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "DetectionResult",
    "Encoding",
    "JisVariant",
    "classify",
    "detect",
]


def classify(byte_str: bytes | bytearray | memoryview) -> DetectionResult:
    """Classify the encoding of the given byte string.

    Pass the complete text; several rules look ahead past the current byte
    and give different answers on a truncated buffer.  Never raises for
    bytes-like input: anything unrecognised is
    :attr:`Encoding.UNDETERMINED`.
    """
    return run_pipeline(_as_bytes(byte_str))


def detect(byte_str: bytes | bytearray | memoryview) -> dict[str, str | None]:
    """Classify *byte_str* and return a plain dict.

    The dict has an ``'encoding'`` key holding a Python codec name (``None``
    for binary or undetermined input) plus the ``'kind'`` and
    ``'jis_variant'`` keys of :meth:`DetectionResult.to_dict`.
    """
    result = classify(byte_str)
    return {"encoding": codec_for(result), **result.to_dict()}
