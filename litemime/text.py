"""String helpers: whitespace handling, 7/8 bit checks and RFC 2047 words."""

from __future__ import annotations

import base64
from enum import Enum

from litemime import qp, util

_C_WHITESPACE = " \t\n\v\f\r"


class EncodingType(Enum):
    """Encodings available for RFC 2047 encoded words."""

    B64 = "b"
    QP = "q"


def strip(s: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return s.strip(_C_WHITESPACE)


def chomp(s: str) -> str:
    """Remove a trailing line ending from ``s``.

    A trailing newline is removed together with everything from the last
    carriage return on, if the string holds one. A trailing carriage return
    or form feed is removed on its own.
    """
    if not s:
        return s
    last = s[-1]
    if last == "\n":
        cut = s.rfind("\r")
        return s[:cut] if cut != -1 else s[:-1]
    if last in ("\r", "\x0c"):
        return s[:-1]
    return s


def is_7bit(s: str | bytes) -> bool:
    """Return True if every character of ``s`` is in the 7 bit range."""
    return s.isascii()


def is_8bit(s: str | bytes) -> bool:
    """Return True if ``s`` contains any character outside the 7 bit range."""
    return not s.isascii()


def encode_to_7bit(s: str, encoding: EncodingType) -> str:
    """Turn ``s`` into an RFC 2047 encoded word unless it is plain ASCII.

    The charset is taken from the ``file`` tool's view of the content.
    Raises ValueError if the charset cannot be determined.
    """
    if not isinstance(encoding, EncodingType):
        raise ValueError(f"unsupported encoding type: {encoding!r}")
    info = util.info_from_string(s)
    if info is None or info.mime_encoding is None:
        raise ValueError("could not determine the charset of the string")
    if info.mime_encoding == "us-ascii":
        return s
    if encoding is EncodingType.B64:
        payload = base64.b64encode(s.encode("utf-8", "surrogateescape")).decode("ascii")
    else:
        payload = chomp(qp.encode(s, None))
    return f"=?{info.mime_encoding}?{encoding.value}?{payload}?="