"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from jpdetect.enums import NON_TEXT, Encoding, JisVariant


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single classification result.

    Frozen dataclass holding the detected :class:`Encoding` and, for
    ISO-2022-JP input, the escape sequence that identified it.
    """

    encoding: Encoding
    jis_variant: JisVariant | None = None

    def __post_init__(self) -> None:
        if (self.encoding is Encoding.JIS) != (self.jis_variant is not None):
            msg = "jis_variant must be set for JIS results and only for them"
            raise ValueError(msg)

    @property
    def is_text(self) -> bool:
        """Whether the result names a concrete text encoding."""
        return self.encoding not in NON_TEXT

    def to_dict(self) -> dict[str, str | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'kind'`` and ``'jis_variant'`` keys holding
            enum values (or ``None``).
        """
        return {
            "kind": self.encoding.value,
            "jis_variant": self.jis_variant.value if self.jis_variant else None,
        }


BINARY_RESULT = DetectionResult(Encoding.BINARY)
UTF16_LIKE_RAW_RESULT = DetectionResult(Encoding.UTF16_LIKE_RAW)
ASCII_RESULT = DetectionResult(Encoding.ASCII)
UNDETERMINED_RESULT = DetectionResult(Encoding.UNDETERMINED)
