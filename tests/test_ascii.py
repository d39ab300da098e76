from __future__ import annotations

from jpdetect.pipeline import ASCII_RESULT
from jpdetect.pipeline.ascii import detect_ascii


def test_pure_ascii():
    assert detect_ascii(b"Hello, world! 123") == ASCII_RESULT


def test_ascii_with_common_whitespace():
    assert detect_ascii(b"Hello\n\tworld\r\n") == ASCII_RESULT


def test_empty_input_is_ascii():
    assert detect_ascii(b"") == ASCII_RESULT


def test_high_byte_not_ascii():
    assert detect_ascii(b"Hello \x80 world") is None


def test_escape_not_ascii():
    assert detect_ascii(b"Hello \x1b world") is None


def test_every_seven_bit_byte_except_escape():
    data = bytes(b for b in range(0x80) if b != 0x1B)
    assert detect_ascii(data) == ASCII_RESULT


def test_utf8_multibyte_not_ascii():
    assert detect_ascii("Héllo".encode()) is None
