import io

import pytest

from xtoolkit.base62 import (
    B62_STD_ENCODING,
    B62Encoding,
    B62StreamDecoder,
    B62StreamEncoder,
    CorruptInputError,
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
SAMPLES = [b"", b"M", b"Ma", b"Man", b"hello", b"hello world", b"test data"]


def test_known_value():
    assert B62_STD_ENCODING.encode(b"Man") == "TWFu"


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    text = B62_STD_ENCODING.encode(data)
    assert B62_STD_ENCODING.decode(text) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_encoded_len_matches(data):
    text = B62_STD_ENCODING.encode(data)
    assert len(text) == B62_STD_ENCODING.encoded_len(len(data))
    assert B62_STD_ENCODING.decoded_len(len(text)) >= len(data)


def test_padding_characters():
    assert B62_STD_ENCODING.encode(b"M").endswith("==")
    assert B62_STD_ENCODING.encode(b"Ma").endswith("=")
    assert not B62_STD_ENCODING.encode(b"Ma").endswith("==")


def test_decode_accepts_bytes():
    assert B62_STD_ENCODING.decode(B62_STD_ENCODING.encode(b"hello").encode()) == b"hello"


def test_unrepresentable_value_raises():
    with pytest.raises(ValueError):
        B62_STD_ENCODING.encode(b"\xff")


def test_bad_length_raises():
    with pytest.raises(CorruptInputError) as info:
        B62_STD_ENCODING.decode("AAAAA")
    assert info.value.offset == 4
    assert str(info.value) == "illegal base64 data at input byte 4"


def test_invalid_symbol_reports_offset():
    src = "AAAA!AAA"
    with pytest.raises(CorruptInputError) as info:
        B62_STD_ENCODING.decode(src)
    assert info.value.offset == src.index("!")


def test_misplaced_padding_reports_offset():
    src = "AB=A"
    with pytest.raises(CorruptInputError) as info:
        B62_STD_ENCODING.decode(src)
    assert info.value.offset == src.index("=")


def test_padding_in_inner_quantum_is_rejected():
    src = "AB==AAAA"
    with pytest.raises(CorruptInputError) as info:
        B62_STD_ENCODING.decode(src)
    assert info.value.offset == src.index("=")


def test_alphabet_length_checked():
    with pytest.raises(ValueError):
        B62Encoding(ALPHABET[:-1])


def test_alphabet_newline_rejected():
    with pytest.raises(ValueError):
        B62Encoding(ALPHABET[:-1] + "\n")


def test_custom_alphabet_round_trip():
    reversed_encoding = B62Encoding(ALPHABET[::-1])
    text = reversed_encoding.encode(b"hello world")
    assert text != B62_STD_ENCODING.encode(b"hello world")
    assert reversed_encoding.decode(text) == b"hello world"


def test_stream_encoder_matches_one_shot():
    data = b"hello world, test data"
    sink = io.BytesIO()
    with B62StreamEncoder(B62_STD_ENCODING, sink) as encoder:
        assert encoder.write(data[:4]) == 4
        assert encoder.write(data[4:11]) == 7
        encoder.write(data[11:])
    assert sink.getvalue().decode() == B62_STD_ENCODING.encode(data)


def test_stream_decoder_skips_newlines():
    data = b"hello world, test data"
    text = B62_STD_ENCODING.encode(data)
    wrapped = "\r\n".join(text[i : i + 5] for i in range(0, len(text), 5))
    decoder = B62StreamDecoder(B62_STD_ENCODING, io.BytesIO(wrapped.encode()))
    assert decoder.read() == data


def test_stream_decoder_small_reads():
    data = b"hello world"
    decoder = B62StreamDecoder(B62_STD_ENCODING, io.BytesIO(B62_STD_ENCODING.encode(data).encode()))
    pieces = []
    while piece := decoder.read(2):
        assert len(piece) <= 2
        pieces.append(piece)
    assert b"".join(pieces) == data


def test_stream_decoder_raises_on_corrupt_input():
    decoder = B62StreamDecoder(B62_STD_ENCODING, io.BytesIO(b"AA!A"))
    with pytest.raises(CorruptInputError):
        decoder.read()