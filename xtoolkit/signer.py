"""Canonical encoding of parameters and signing/verifying them with a pluggable method."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Protocol, Union

from xtoolkit.hashing import HashMethod

Values = Mapping[str, Union[str, Iterable[str]]]


class Method(Protocol):
    """Something that signs bytes and verifies signatures over them."""

    def sign(self, data: bytes) -> bytes: ...

    def verify(self, data: bytes, signature: bytes) -> None: ...


@dataclass
class SignOptions:
    """Text placed before and after the encoded data, and keys left out of it."""

    prefix: str = ""
    suffix: str = ""
    ignores: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.ignores = {key for key in self.ignores if key}


class DefaultEncoder:
    """Encodes parameters as sorted ``key=value`` pairs joined with ``&``."""

    def encode_values(self, values: Optional[Values], options: Optional[SignOptions] = None) -> Optional[bytes]:
        """Sort the non-empty, trimmed ``key=value`` pairs and join them with ``&``.

        Returns None when values is None.
        """
        if values is None:
            return None
        options = options or SignOptions()
        pairs = []
        for key, raw in values.items():
            if key in options.ignores:
                continue
            items = [raw] if isinstance(raw, str) else raw
            for value in items:
                trimmed = value.strip()
                if trimmed:
                    pairs.append(f"{key}={trimmed}")
        pairs.sort()
        return (options.prefix + "&".join(pairs) + options.suffix).encode("utf-8")

    def encode_bytes(self, data: Optional[bytes], options: Optional[SignOptions] = None) -> Optional[bytes]:
        """Wrap data in the prefix and suffix; returns None when data is None."""
        if data is None:
            return None
        options = options or SignOptions()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return options.prefix.encode("utf-8") + bytes(data) + options.suffix.encode("utf-8")


class Signer:
    """Signs and verifies encoded data; defaults to an MD5 digest and ``DefaultEncoder``."""

    def __init__(self, method: Optional[Method] = None, encoder: Optional[DefaultEncoder] = None) -> None:
        self.method = method if method is not None else HashMethod("md5")
        self.encoder = encoder if encoder is not None else DefaultEncoder()

    def _encode_values(self, values: Optional[Values], options: Optional[SignOptions]) -> bytes:
        return self.encoder.encode_values(values, options or SignOptions()) or b""

    def _encode_bytes(self, data: Optional[bytes], options: Optional[SignOptions]) -> bytes:
        return self.encoder.encode_bytes(data, options or SignOptions()) or b""

    def sign_values(self, values: Optional[Values], options: Optional[SignOptions] = None) -> bytes:
        return self.method.sign(self._encode_values(values, options))

    def sign_bytes(self, data: Optional[bytes], options: Optional[SignOptions] = None) -> bytes:
        return self.method.sign(self._encode_bytes(data, options))

    def verify_values(
        self, values: Optional[Values], signature: bytes, options: Optional[SignOptions] = None
    ) -> None:
        """Raise the method's verification error unless the signature matches."""
        self.method.verify(self._encode_values(values, options), signature)

    def verify_bytes(self, data: Optional[bytes], signature: bytes, options: Optional[SignOptions] = None) -> None:
        """Raise the method's verification error unless the signature matches."""
        self.method.verify(self._encode_bytes(data, options), signature)