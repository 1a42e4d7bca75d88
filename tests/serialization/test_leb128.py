import pytest

from jamcodec.serialization import Deserializer, Serializer, TruncatedInputError
from jamcodec.serialization.encoding.leb128 import decode_leb128, encode_leb128


def _do_round_trip_test_with_size(n: int, encoded_size: int) -> None:
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n)
    encoded_n = bytes(se.finalize())
    assert len(encoded_n) == encoded_size
    # every byte but the last one carries the continuation bit
    assert all(b & 0x80 for b in encoded_n[:-1])
    assert not encoded_n[-1] & 0x80
    de = Deserializer.build_bytes_deserializer(encoded_n)
    assert decode_leb128(de) == n
    de.finalize()


EXAMPLES_UNSIGNED_BY_SIZE = {
    1: [
        0,
        1,
        2,
        63,
        64,
        126,
        127,
    ],
    2: [
        128,
        129,
        1000,
        8191,
        8192,
        16383,
    ],
    3: [
        16384,
        100000,
        1048576,
        2097151,
    ],
}


def gen_unsigned_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_UNSIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases, up to what a 64-bit value needs
    for size in range(4, 11):
        n_lo = 1 << (7 * (size - 1))
        n_hi = (1 << (7 * size)) - 1
        test_cases.append((n_lo, size))
        test_cases.append((n_hi, size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_unsigned_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size)


def test_negative_is_rejected():
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_leb128(se, -1)


def test_decode_stops_at_first_terminal_byte():
    de = Deserializer.build_bytes_deserializer(bytes([0x96, 0x01, 0x05]))
    assert decode_leb128(de) == 150
    assert bytes(de.read_all()) == b'\x05'


@pytest.mark.parametrize('data', [b'', b'\x80', b'\xff\xff', b'\x80\x80\x80'])
def test_truncated(data):
    de = Deserializer.build_bytes_deserializer(data)
    with pytest.raises(TruncatedInputError):
        decode_leb128(de)
