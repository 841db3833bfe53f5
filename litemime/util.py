"""MIME type detection and small utilities."""

from __future__ import annotations

import os
import random
import subprocess
import tempfile
import time
from dataclasses import dataclass

FILE_COMMAND = ("file", "--brief", "--mime")
RAND_MAX = 2**31 - 1

_rng = random.Random(int(time.time()) ^ os.getpid())


@dataclass
class MimeInfo:
    """MIME type and encoding as reported by the ``file`` tool."""

    mime_type: str | None = None
    mime_encoding: str | None = None
    combined: str | None = None

    @classmethod
    def from_combined(cls, combined: str) -> MimeInfo:
        """Split a ``type; charset=encoding`` string."""
        mime_type, sep, rest = combined.partition(";")
        if not sep:
            raise ValueError(f"no ';' in mime description: {combined!r}")
        _, sep, encoding = rest.partition("=")
        if not sep:
            raise ValueError(f"no '=' in mime description: {combined!r}")
        return cls(mime_type=mime_type, mime_encoding=encoding, combined=combined)


def get_mimetype(filename: str | os.PathLike[str]) -> str | None:
    """Return the first line of the ``file`` tool's output, or None."""
    try:
        result = subprocess.run(
            [*FILE_COMMAND, os.fspath(filename)],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError:
        return None
    if not result.stdout:
        return None
    return result.stdout.splitlines()[0]


def info_from_string(s: str | bytes) -> MimeInfo | None:
    """Detect MIME type and encoding of the given content, or None."""
    data = s.encode("utf-8", "surrogateescape") if isinstance(s, str) else bytes(s)
    if not data:
        return None
    handle, path = tempfile.mkstemp(prefix="litemime_")
    try:
        with os.fdopen(handle, "wb") as stream:
            stream.write(data)
        combined = get_mimetype(path)
    finally:
        os.remove(path)
    if combined is None:
        return None
    if ";" in combined:
        return MimeInfo.from_combined(combined)
    return MimeInfo(combined=combined)


def info_from_file(filename: str | os.PathLike[str]) -> MimeInfo | None:
    """Detect MIME type and encoding of a file, or None."""
    combined = get_mimetype(filename)
    if combined is None:
        return None
    return MimeInfo.from_combined(combined)


def random_int() -> int:
    """Return a random integer from 0 to RAND_MAX."""
    return _rng.randint(0, RAND_MAX)