"""Internal shared utilities for jpdetect."""

from __future__ import annotations

#: File extensions eligible for conversion by default.
DEFAULT_EXTENSIONS: tuple[str, ...] = (".cs", ".js", ".boo")

#: Project-relative roots whose files are eligible for conversion by default.
DEFAULT_ROOTS: tuple[str, ...] = ("Assets/", "Packages/")

#: UTF-8 byte order mark.
UTF8_BOM: bytes = b"\xef\xbb\xbf"


def _as_bytes(byte_str: bytes | bytearray | memoryview) -> bytes:
    """Return *byte_str* as an immutable ``bytes`` object."""
    return byte_str if isinstance(byte_str, bytes) else bytes(byte_str)


def _validate_extensions(extensions: tuple[str, ...]) -> None:
    """Raise ValueError unless *extensions* is a non-empty tuple of ``.ext`` names."""
    if not extensions:
        msg = "extensions must not be empty"
        raise ValueError(msg)
    for ext in extensions:
        if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
            msg = f"invalid extension {ext!r}: expected a name like '.cs'"
            raise ValueError(msg)


def _validate_roots(roots: tuple[str, ...]) -> None:
    """Raise ValueError unless *roots* is a non-empty tuple of relative prefixes."""
    if not roots:
        msg = "roots must not be empty"
        raise ValueError(msg)
    for root in roots:
        if not isinstance(root, str) or not root or root.startswith("/"):
            msg = f"invalid root {root!r}: expected a project-relative prefix"
            raise ValueError(msg)
