"""Lightweight MIME helpers: quoted-printable, encoded words and content type detection."""

__version__ = "0.2.0"
__all__ = ["qp", "text", "util"]