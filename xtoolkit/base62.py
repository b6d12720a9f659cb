"""A base64-layout codec over a 62-symbol alphabet, with stream helpers."""

from __future__ import annotations

from typing import BinaryIO

_INVALID = 0xFF
_PAD = ord("=")
_OUT_CHUNK = 1024


class CorruptInputError(ValueError):
    """Raised when encoded input is malformed at a given byte offset."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"illegal base64 data at input byte {offset}")
        self.offset = offset


class B62Encoding:
    """Encodes 3-byte groups into 4 symbols; 6-bit values of 62 or 63 cannot be encoded."""

    def __init__(self, alphabet: str) -> None:
        if not alphabet.isascii():
            raise ValueError("encoding alphabet must be ASCII")
        symbols = alphabet.encode("ascii")
        if len(symbols) != 62:
            raise ValueError("encoding alphabet is not 62 bytes long")
        if b"\n" in symbols or b"\r" in symbols:
            raise ValueError("encoding alphabet contains newline character")
        self._encode = symbols
        decode_map = bytearray([_INVALID]) * 256
        for index, symbol in enumerate(symbols):
            decode_map[symbol] = index
        self._decode_map = bytes(decode_map)

    def _symbol(self, value: int) -> int:
        if value >= len(self._encode):
            raise ValueError(f"6-bit value {value} has no symbol in a 62-symbol alphabet")
        return self._encode[value]

    def encode(self, src: bytes) -> str:
        """Encode bytes; raises ValueError for groups the alphabet cannot represent."""
        src = bytes(src)
        out = bytearray()
        for start in range(0, len(src), 3):
            chunk = src[start : start + 3]
            used = len(chunk)
            b0, b1, b2 = chunk.ljust(3, b"\x00")
            values = (
                b0 >> 2,
                ((b0 << 4) & 0x3F) | (b1 >> 4),
                ((b1 << 2) & 0x3F) | (b2 >> 6),
                b2 & 0x3F,
            )
            out.extend(self._symbol(value) for value in values[: used + 1])
            out.extend(b"=" * (3 - used))
        return out.decode("ascii")

    def encoded_len(self, n: int) -> int:
        """Length of the encoding of n input bytes."""
        return (n + 2) // 3 * 4

    def _decode_quanta(self, src: bytes) -> tuple[bytes, bool]:
        count = len(src) // 4
        out = bytearray()
        end = False
        for i, start in enumerate(range(0, count * 4, 4)):
            if end:
                break
            quantum = src[start : start + 4]
            values: list[int] = []
            for j, symbol in enumerate(quantum):
                if symbol == _PAD and j >= 2 and i == count - 1:
                    if quantum[3] != _PAD:
                        raise CorruptInputError(start + 2)
                    end = True
                    break
                value = self._decode_map[symbol]
                if value == _INVALID:
                    raise CorruptInputError(start + j)
                values.append(value)
            dlen = len(values)
            v0, v1, v2, v3 = values + [0] * (4 - dlen)
            packed = (
                ((v0 << 2) | (v1 >> 4)) & 0xFF,
                ((v1 << 4) | (v2 >> 2)) & 0xFF,
                ((v2 << 6) | v3) & 0xFF,
            )
            out.extend(packed[: dlen - 1])
        return bytes(out), end

    def decode(self, src: str | bytes) -> bytes:
        """Decode encoded text; raises CorruptInputError on malformed input."""
        data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
        if len(data) % 4:
            raise CorruptInputError(len(data) // 4 * 4)
        decoded, _ = self._decode_quanta(data)
        return decoded

    def decoded_len(self, n: int) -> int:
        """Maximum decoded length of n encoded bytes."""
        return n // 4 * 3


B62_STD_ENCODING = B62Encoding("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")


class B62StreamEncoder:
    """Encodes data written to it and forwards the text, as bytes, to a writer."""

    def __init__(self, encoding: B62Encoding, writer: BinaryIO) -> None:
        self._encoding = encoding
        self._writer = writer
        self._buffer = bytearray()
        self._error: BaseException | None = None

    def _emit(self, text: str) -> None:
        try:
            self._writer.write(text.encode("ascii"))
        except Exception as exc:
            self._error = exc
            raise

    def write(self, data: bytes) -> int:
        """Buffer data, writing out every complete 3-byte group."""
        if self._error is not None:
            raise self._error
        self._buffer.extend(data)
        full = len(self._buffer) // 3 * 3
        if full:
            chunk = bytes(self._buffer[:full])
            del self._buffer[:full]
            self._emit(self._encoding.encode(chunk))
        return len(data)

    def close(self) -> None:
        """Flush a trailing partial group, padded."""
        if self._error is not None:
            raise self._error
        if self._buffer:
            chunk = bytes(self._buffer)
            self._buffer.clear()
            self._emit(self._encoding.encode(chunk))

    def __enter__(self) -> B62StreamEncoder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class B62StreamDecoder:
    """Decodes encoded bytes read from a reader, skipping CR and LF."""

    def __init__(self, encoding: B62Encoding, reader: BinaryIO) -> None:
        self._encoding = encoding
        self._reader = reader
        self._pending = bytearray()
        self._out = bytearray()
        self._eof = False
        self._error: BaseException | None = None

    def _take(self, size: int) -> bytes:
        piece = bytes(self._out[:size])
        del self._out[:size]
        return piece

    def read(self, size: int = -1) -> bytes:
        """Read up to size decoded bytes, or everything when size is negative."""
        if size < 0:
            result = bytearray()
            while piece := self.read(_OUT_CHUNK):
                result.extend(piece)
            return bytes(result)
        if self._out:
            return self._take(size)
        if self._error is not None:
            raise self._error
        while len(self._pending) < 4 and not self._eof:
            want = min(max(4, size // 3 * 4), _OUT_CHUNK)
            chunk = self._reader.read(want)
            if not chunk:
                self._eof = True
            else:
                self._pending.extend(chunk.replace(b"\r", b"").replace(b"\n", b""))
        if len(self._pending) < 4:
            return b""
        ready = len(self._pending) // 4 * 4
        try:
            decoded, _ = self._encoding._decode_quanta(bytes(self._pending[:ready]))
        except CorruptInputError as exc:
            self._error = exc
            raise
        del self._pending[:ready]
        self._out.extend(decoded)
        return self._take(size)