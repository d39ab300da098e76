"""Command-line interface for jpdetect."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jpdetect
from jpdetect.codepages import codec_for
from jpdetect.convert import ConversionError, convert_file, iter_eligible_files
from jpdetect.pipeline import DetectionResult


def _describe(result: DetectionResult) -> str:
    kind = result.encoding.value
    if result.jis_variant is not None:
        kind = f"{kind}, {result.jis_variant.value}"
    return f"{codec_for(result)} ({kind})"


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.DEBUG if verbosity > 1 else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _detect_files(files: list[str], minimal: bool) -> bool:
    ok = True
    for filepath in files:
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            print(f"jpdetect: {filepath}: {e}", file=sys.stderr)
            ok = False
            continue
        result = jpdetect.classify(data)
        if minimal:
            print(codec_for(result))
        else:
            print(f"{filepath}: {_describe(result)}")
    return ok


def _convert_files(files: list[Path]) -> bool:
    ok = True
    for filepath in files:
        try:
            outcome = convert_file(filepath)
        except (OSError, ConversionError) as e:
            print(f"jpdetect: {filepath}: {e}", file=sys.stderr)
            ok = False
            continue
        if outcome.converted:
            print(f"{filepath}: converted from {codec_for(outcome.result)}")
        else:
            print(f"{filepath}: unchanged")
    return ok


def main(argv: list[str] | None = None) -> None:
    """Run the ``jpdetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect Japanese text encodings and convert files to UTF-8."
    )
    parser.add_argument("files", nargs="*", help="Files to examine")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the codec name"
    )
    parser.add_argument(
        "--convert",
        action="store_true",
        help="Rewrite files as UTF-8 without BOM and with LF line endings",
    )
    parser.add_argument(
        "--project-root",
        default=".",
        help="Project directory searched by --convert when no files are given",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log progress"
    )
    parser.add_argument(
        "--version", action="version", version=f"jpdetect {jpdetect.__version__}"
    )

    args = parser.parse_args(argv)
    if args.convert and args.minimal:
        parser.error("--minimal cannot be combined with --convert")
    _configure_logging(args.verbose)

    if args.convert:
        if args.files:
            ok = _convert_files([Path(f) for f in args.files])
        else:
            try:
                targets = list(iter_eligible_files(args.project_root))
            except OSError as e:
                print(f"jpdetect: {args.project_root}: {e}", file=sys.stderr)
                sys.exit(1)
            ok = _convert_files(targets)
    elif args.files:
        ok = _detect_files(args.files, args.minimal)
    else:
        data = sys.stdin.buffer.read()
        result = jpdetect.classify(data)
        if args.minimal:
            print(codec_for(result))
        else:
            print(f"stdin: {_describe(result)}")
        ok = True

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
