"""Rewrite Japanese and legacy-encoded source files as UTF-8.

This is the file-level glue around the classifier: pick eligible files,
classify their bytes, and re-encode them as UTF-8 without a byte order
mark, normalising CRLF line endings to LF along the way.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from jpdetect._utils import (
    DEFAULT_EXTENSIONS,
    DEFAULT_ROOTS,
    UTF8_BOM,
    _validate_extensions,
    _validate_roots,
)
from jpdetect.codepages import codec_for
from jpdetect.enums import Encoding
from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.orchestrator import run_pipeline

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """Raised when bytes cannot be decoded with the detected codec."""


@dataclasses.dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Which files the converter is allowed to touch.

    :param extensions: File suffixes, including the leading dot.
    :param roots: Project-relative directory prefixes.  A trailing ``/`` is
        added when missing so ``"Assets"`` does not match ``"AssetsOld/"``.
    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    roots: tuple[str, ...] = DEFAULT_ROOTS

    def __post_init__(self) -> None:
        _validate_extensions(self.extensions)
        _validate_roots(self.roots)
        roots = tuple(r if r.endswith("/") else r + "/" for r in self.roots)
        object.__setattr__(self, "roots", roots)

    def accepts(self, path: Path, project_root: Path) -> bool:
        """Return True if *path* lies under an allowed root with an allowed suffix."""
        if path.suffix not in self.extensions:
            return False
        # abspath normalises without following symlinked package directories
        absolute = Path(os.path.abspath(path))
        try:
            relative = absolute.relative_to(os.path.abspath(project_root))
        except ValueError:
            return False
        relative_path = relative.as_posix()
        return any(relative_path.startswith(root) for root in self.roots)


@dataclasses.dataclass(frozen=True, slots=True)
class ConversionOutcome:
    """What :func:`convert_file` did with one file."""

    path: Path
    result: DetectionResult
    converted: bool


def should_convert(result: DetectionResult, data: bytes) -> bool:
    """Return True if bytes classified as *result* need rewriting.

    Non-text results are left alone, and so is UTF-8 that already starts
    with a byte order mark.
    """
    if not result.is_text:
        return False
    return not (result.encoding is Encoding.UTF8 and data.startswith(UTF8_BOM))


def transcode(data: bytes, result: DetectionResult) -> bytes | None:
    """Re-encode *data* as UTF-8 (no BOM) with LF line endings.

    :param data: The complete file contents.
    :param result: The classification of *data*.
    :returns: The new file contents, or ``None`` when no rewrite applies.
    :raises ConversionError: If *data* does not decode with the detected codec.
    """
    if not should_convert(result, data):
        return None
    codec = codec_for(result)
    try:
        text = data.decode(codec)
    except UnicodeDecodeError as e:
        msg = f"cannot decode as {codec}: {e.reason} at byte {e.start}"
        raise ConversionError(msg) from e
    return text.replace("\r\n", "\n").encode("utf-8")


def convert_file(path: str | Path) -> ConversionOutcome:
    """Classify *path* and rewrite it as UTF-8 when needed.

    The file is only written when the new contents differ from the old.

    :raises OSError: If the file cannot be read or written.
    :raises ConversionError: If the contents do not decode with the
        detected codec; the file is left untouched.
    """
    path = Path(path)
    data = path.read_bytes()
    result = run_pipeline(data)
    output = transcode(data, result)
    if output is None or output == data:
        logger.debug("%s: left as %s", path, result.encoding.value)
        return ConversionOutcome(path, result, converted=False)
    path.write_bytes(output)
    logger.info("%s: converted from %s to utf-8", path, codec_for(result))
    return ConversionOutcome(path, result, converted=True)


def iter_eligible_files(
    project_root: str | Path, config: ConverterConfig | None = None
) -> Iterator[Path]:
    """Yield every file under *project_root* that *config* accepts.

    Symlinked directories are followed.  Files are sorted within each
    directory, and a file reachable through overlapping roots is yielded
    once.

    :raises OSError: If a directory under an allowed root cannot be listed.
    """
    config = config or ConverterConfig()
    project_root = Path(project_root)
    seen: set[Path] = set()
    for root in config.roots:
        base = project_root / root
        if not base.is_dir():
            continue
        for dirpath, dirnames, filenames in os.walk(
            base, onerror=_raise_walk_error, followlinks=True
        ):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath, name)
                if path in seen or not config.accepts(path, project_root):
                    continue
                seen.add(path)
                yield path


def _raise_walk_error(error: OSError) -> None:
    raise error


def convert_tree(
    project_root: str | Path, config: ConverterConfig | None = None
) -> Iterator[ConversionOutcome]:
    """Convert every eligible file under *project_root*.

    Errors are raised as they happen; files visited before the error have
    already been rewritten.
    """
    for path in iter_eligible_files(project_root, config):
        yield convert_file(path)
