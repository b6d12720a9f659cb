"""Byte/text codecs: standard Base64, URL-safe Base64 and Base62."""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod

from xtoolkit.base62 import B62_STD_ENCODING

_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


def _strip_newlines(text: str | bytes) -> str | bytes:
    if isinstance(text, str):
        return text.replace("\r", "").replace("\n", "")
    return bytes(text).replace(b"\r", b"").replace(b"\n", b"")


class Codec(ABC):
    """Encodes bytes to text and back; the s_ variants work on text."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes to text."""

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode text to bytes; raises ValueError on malformed input."""

    def s_encode(self, text: str) -> str:
        """Encode the UTF-8 bytes of a string."""
        return self.encode(text.encode(_TEXT_ENCODING, _TEXT_ERRORS))

    def s_decode(self, text: str) -> str:
        """Decode to bytes and read them as UTF-8."""
        return self.decode(text).decode(_TEXT_ENCODING, _TEXT_ERRORS)


class Base64Codec(Codec):
    """Standard padded Base64; CR and LF in input are ignored."""

    def encode(self, data: bytes) -> str:
        return base64.b64encode(bytes(data)).decode("ascii")

    def decode(self, text: str) -> bytes:
        return base64.b64decode(_strip_newlines(text), validate=True)


class Base64UrlCodec(Codec):
    """URL-safe padded Base64; CR and LF in input are ignored."""

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(bytes(data)).decode("ascii")

    def decode(self, text: str) -> bytes:
        cleaned = _strip_newlines(text)
        marks = ("+", "/") if isinstance(cleaned, str) else (b"+", b"/")
        if any(mark in cleaned for mark in marks):
            raise binascii.Error("Non-base64 digit found")
        return base64.b64decode(cleaned, altchars=b"-_", validate=True)


class Base62Codec(Codec):
    """The 62-symbol codec from ``xtoolkit.base62``."""

    def encode(self, data: bytes) -> str:
        return B62_STD_ENCODING.encode(data)

    def decode(self, text: str) -> bytes:
        return B62_STD_ENCODING.decode(text)


BASE64 = Base64Codec()
BASE64_URL = Base64UrlCodec()
BASE62 = Base62Codec()