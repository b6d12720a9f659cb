"""Block padding schemes used by the block cipher helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaddingError(ValueError):
    """Raised when padded data does not carry valid padding."""


def _pad_length(data: bytes, block_size: int) -> int:
    return block_size - len(data) % block_size


class Pad(ABC):
    """A padding scheme: extends data to a whole number of blocks and back."""

    @abstractmethod
    def padding(self, data: bytes, block_size: int) -> bytes:
        """Return data padded to a multiple of block_size."""

    @abstractmethod
    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        """Return data with its padding removed."""


class NoPad(Pad):
    """Leaves data untouched in both directions."""

    def padding(self, data: bytes, block_size: int) -> bytes:
        return bytes(data)

    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        return bytes(padded)


class Pkcs7(Pad):
    """PKCS#5/PKCS#7: every pad byte holds the pad length."""

    def padding(self, data: bytes, block_size: int) -> bytes:
        length = _pad_length(data, block_size)
        return bytes(data) + bytes([length]) * length

    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        padded = bytes(padded)
        if not padded:
            raise PaddingError("invalid padding")
        length = padded[-1]
        if length > block_size or length > len(padded):
            raise PaddingError("invalid padding")
        return padded[: len(padded) - length]


class ZeroPad(Pad):
    """Null padding: zero bytes appended up to the block size."""

    def padding(self, data: bytes, block_size: int) -> bytes:
        return bytes(data) + b"\x00" * _pad_length(data, block_size)

    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        padded = bytes(padded)
        if not padded or padded[-1] != 0:
            raise PaddingError("invalid zero padding")
        # The pad length is read from the last byte, which is zero here.
        return padded[: len(padded) - padded[-1]]


class AnsiX923(Pad):
    """ANSI X.923 style padding, filled with the pad length."""

    def padding(self, data: bytes, block_size: int) -> bytes:
        length = _pad_length(data, block_size)
        return bytes(data) + bytes([length]) * length

    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        padded = bytes(padded)
        if not padded:
            raise PaddingError("invalid X.923 padding")
        length = padded[-1]
        if length > len(padded):
            raise PaddingError("invalid X.923 padding")
        return padded[: len(padded) - length]


class Iso7816(Pad):
    """ISO/IEC 7816-4: a 0x80 byte followed by zero bytes."""

    def padding(self, data: bytes, block_size: int) -> bytes:
        length = _pad_length(data, block_size)
        return bytes(data) + b"\x80" + b"\x00" * (length - 1)

    def unpadding(self, padded: bytes, block_size: int) -> bytes:
        padded = bytes(padded)
        if not padded or padded[0] != 0x80:
            raise PaddingError("invalid ISO/IEC 7816-4 padding")
        for index, value in enumerate(padded[1:], start=1):
            if value != 0:
                return padded[:index]
        raise PaddingError("invalid ISO/IEC 7816-4 padding")


NO_PAD = NoPad()
PKCS7 = Pkcs7()
PKCS5 = PKCS7
ZERO = ZeroPad()
ANSI_X923 = AnsiX923()
ISO7816 = Iso7816()