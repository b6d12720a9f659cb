"""Hex digests, HMACs and a plain-hash sign/verify method."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any


class VerificationError(ValueError):
    """Raised when a signature does not match the data."""

    def __init__(self, message: str = "verification error") -> None:
        super().__init__(message)


def _to_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def md5_hex(data: str | bytes) -> str:
    """MD5 of text or bytes, as lower-case hex."""
    return hashlib.md5(_to_bytes(data)).hexdigest()


def sha1_hex(data: str | bytes) -> str:
    """SHA-1 of text or bytes, as lower-case hex."""
    return hashlib.sha1(_to_bytes(data)).hexdigest()


def sha256_hex(data: str | bytes) -> str:
    """SHA-256 of text or bytes, as lower-case hex."""
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def sha512_hex(data: str | bytes) -> str:
    """SHA-512 of text or bytes, as lower-case hex."""
    return hashlib.sha512(_to_bytes(data)).hexdigest()


def hmac_hex(digestmod: Any, key: str | bytes, data: str | bytes) -> str:
    """HMAC with the given hash name or constructor, as lower-case hex."""
    return hmac.new(_to_bytes(key), _to_bytes(data), digestmod).hexdigest()


def hmac_sha1(key: str | bytes, data: str | bytes) -> str:
    return hmac_hex(hashlib.sha1, key, data)


def hmac_sha256(key: str | bytes, data: str | bytes) -> str:
    return hmac_hex(hashlib.sha256, key, data)


def hmac_md5(key: str | bytes, data: str | bytes) -> str:
    return hmac_hex(hashlib.md5, key, data)


class HashMethod:
    """Signs data with a bare hash digest and verifies such signatures."""

    def __init__(self, hash_name: str = "md5") -> None:
        hashlib.new(hash_name)  # raises ValueError for an unknown hash
        self._hash_name = hash_name

    def sign(self, data: bytes) -> bytes:
        """The raw digest of the data."""
        return hashlib.new(self._hash_name, _to_bytes(data)).digest()

    def verify(self, data: bytes, signature: bytes) -> None:
        """Raise VerificationError unless signature is the digest of data."""
        if not hmac.compare_digest(self.sign(data), bytes(signature)):
            raise VerificationError()