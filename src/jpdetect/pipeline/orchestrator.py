"""Pipeline orchestrator: runs the classification stages in sequence."""

from __future__ import annotations

import logging

from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.ascii import detect_ascii
from jpdetect.pipeline.binary import detect_binary
from jpdetect.pipeline.escape import detect_escape_encoding
from jpdetect.pipeline.scoring import compute_scores

logger = logging.getLogger(__name__)


def run_pipeline(data: bytes) -> DetectionResult:
    """Classify *data* by running every stage until one decides.

    Stage order is the priority order: control bytes invalidate every text
    rule, escape sequences are unambiguous, and byte scoring is the
    fallback for everything else.

    :param data: The complete raw byte buffer.
    :returns: The :class:`DetectionResult` of the first deciding stage.
    """
    result = detect_binary(data)
    if result is not None:
        logger.debug("binary stage: %s", result.encoding.value)
        return result

    result = detect_ascii(data)
    if result is not None:
        logger.debug("ascii stage: %s", result.encoding.value)
        return result

    result = detect_escape_encoding(data)
    if result is not None:
        logger.debug("escape stage: %s", result.jis_variant.value)
        return result

    scores = compute_scores(data)
    logger.debug(
        "sjis = %d, euc = %d, utf8 = %d", scores.sjis, scores.euc, scores.utf8
    )
    return scores.winner()
