"""Quoted-printable encoding and decoding helpers."""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

_HEX_VALUES = {byte: int(chr(byte), 16) for byte in b"0123456789abcdefABCDEF"}

_WHITESPACE = b"\t "
_LINE_BREAK = b"\r\n"
_DEFAULT_TERMINATOR = b"\r\n"


def _encode_byte(byte: int) -> bytes:
    if byte < 0x20 or byte == 0x3D or byte > 0x7E:
        return b"=%02X" % byte
    return bytes((byte,))


_ENCODE_TABLE = tuple(_encode_byte(byte) for byte in range(256))


class DecodeMode(IntEnum):
    """How underscores are treated while decoding."""

    DEFAULT = 0
    ISO = 1


def _to_bytes(value: str | bytes) -> tuple[bytes, bool]:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape"), True
    return bytes(value), False


def _from_bytes(data: bytes, as_text: bool) -> str | bytes:
    if as_text:
        return data.decode("utf-8", "surrogateescape")
    return data


def _escape_byte(esc_char: str | bytes | int) -> int:
    if isinstance(esc_char, int):
        return esc_char
    raw = esc_char.encode("ascii") if isinstance(esc_char, str) else bytes(esc_char)
    if len(raw) != 1:
        raise ValueError("escape character must be a single character")
    return raw[0]


def decode(
    line_in: str | bytes,
    mode: DecodeMode | int = DecodeMode.DEFAULT,
    esc_char: str | bytes | int = "=",
) -> str | bytes:
    """Decode quoted-printable data; returns the same type that was given.

    Soft line breaks (escape, optional blanks, line break) are removed.
    An escape with fewer than two characters after it ends the output.
    Invalid hex escapes are kept verbatim. In ISO mode '_' becomes a space.
    """
    data, as_text = _to_bytes(line_in)
    esc = _escape_byte(esc_char)
    out = bytearray()
    size = len(data)
    pos = 0
    while pos < size:
        byte = data[pos]
        if byte == esc:
            if pos + 2 >= size:
                break
            ahead = pos + 1
            while ahead < size and data[ahead] in _WHITESPACE:
                ahead += 1
            if ahead < size and data[ahead] in _LINE_BREAK:
                ahead += 1
                if ahead < size and data[ahead] in _LINE_BREAK:
                    ahead += 1
                pos = ahead
                continue
            high = _HEX_VALUES.get(data[pos + 1])
            low = _HEX_VALUES.get(data[pos + 2])
            if high is None or low is None:
                logger.warning("invalid character for quoted-printable detected")
            else:
                byte = high * 16 + low
                pos += 2
        elif byte == 0x5F and mode == DecodeMode.ISO:
            byte = 0x20
        out.append(byte)
        pos += 1
    return _from_bytes(bytes(out), as_text)


def decode_text(line_in: str | bytes) -> str | bytes:
    """Decode quoted-printable text using '=' as escape."""
    return decode(line_in, DecodeMode.DEFAULT, "=")


def decode_iso(line_in: str | bytes) -> str | bytes:
    """Decode quoted-printable text of an ISO encoded word using '=' as escape."""
    return decode(line_in, DecodeMode.DEFAULT, "=")


def decode_multipart(line_in: str | bytes) -> str | bytes:
    """Decode quoted-printable data using '%' as escape."""
    return decode(line_in, DecodeMode.DEFAULT, "%")


def _split_lines(data: bytes, terminator: bytes) -> list[bytes]:
    if not data:
        return [b""]
    pieces = data.split(terminator)
    lines = [piece + terminator for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def encode(line_in: str | bytes, lt: str | bytes | None = None) -> str | bytes:
    """Encode data as quoted-printable; returns the same type that was given.

    The input is split after each occurrence of the line terminator ``lt``
    (CRLF by default). Every byte of a line, the terminator included, is
    encoded and the encoded line is followed by the terminator. The output
    carries no soft line breaks.
    """
    data, as_text = _to_bytes(line_in)
    terminator = _DEFAULT_TERMINATOR if lt is None else _to_bytes(lt)[0]
    if not terminator:
        raise ValueError("line terminator must not be empty")
    out = bytearray()
    for line in _split_lines(data, terminator):
        out += b"".join(_ENCODE_TABLE[byte] for byte in line)
        out += terminator
    return _from_bytes(bytes(out), as_text)


def remove_charset_encoding(line_in: str) -> str:
    """Strip the ``=?charset?enc?`` ... ``?=`` wrapping of encoded words.

    The text of Q and B encoded words is kept as it is, without decoding.
    For other encodings the ``=?charset?x`` prefix is dropped.
    """
    out: list[str] = []
    size = len(line_in)
    pos = 0
    while pos < size:
        char = line_in[pos]
        if char == "=" and pos + 1 < size and line_in[pos + 1] == "?":
            charset_end = line_in.find("?", pos + 2)
            if charset_end == -1:
                out.append(line_in[pos:])
                break
            enc_pos = charset_end + 1
            if enc_pos < size and line_in[enc_pos].lower() in ("q", "b"):
                start = enc_pos + 2
                if start >= size:
                    break
                end = line_in.find("?", start + 1)
                if end == -1:
                    out.append(line_in[start:])
                    break
                out.append(line_in[start:end])
                pos = end + 2
                continue
            pos = enc_pos + 1
            continue
        out.append(char)
        pos += 1
    return "".join(out)