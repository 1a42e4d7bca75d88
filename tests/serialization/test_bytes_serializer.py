import pytest

from jamcodec.serialization import Deserializer, Serializer, TrailingDataError, TruncatedInputError
from jamcodec.serialization.adapters import MaxBytesDeserializer, MaxBytesExceededError, MaxBytesSerializer
from jamcodec.serialization.bytes_deserializer import BytesDeserializer
from jamcodec.serialization.bytes_serializer import BytesSerializer


def test_build_helpers():
    assert isinstance(Serializer.build_bytes_serializer(), BytesSerializer)
    assert isinstance(Deserializer.build_bytes_deserializer(b''), BytesDeserializer)


def test_serializer_grows_as_needed():
    se = Serializer.build_bytes_serializer()
    for i in range(10_000):
        se.write_byte(i % 256)
        assert se.cur_pos() == i + 1
    se.write_bytes(b'\x00' * 100_000)
    data = bytes(se.finalize())
    assert len(data) == 110_000
    assert data[:3] == b'\x00\x01\x02'


def test_serializer_rejects_out_of_range_byte():
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_byte(256)


def test_serializer_cannot_be_reused_after_finalize():
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'abc')
    assert bytes(se.finalize()) == b'abc'
    with pytest.raises(AttributeError):
        se.write_byte(0)


def test_struct_round_trip():
    se = Serializer.build_bytes_serializer()
    se.write_struct((1, 2), '<IQ')
    data = bytes(se.finalize())
    assert data == bytes.fromhex('010000000200000000000000')
    de = Deserializer.build_bytes_deserializer(data)
    assert de.read_struct('<IQ') == (1, 2)
    de.finalize()


def test_deserializer_reads():
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    assert not de.is_empty()
    assert de.remaining() == 6
    assert de.read_byte() == ord('a')
    assert bytes(de.read_bytes(2)) == b'bc'
    assert de.remaining() == 3
    assert bytes(de.read_all()) == b'def'
    assert de.is_empty()
    de.finalize()


def test_deserializer_accepts_any_buffer():
    for data in [b'xy', bytearray(b'xy'), memoryview(b'xy')]:
        de = Deserializer.build_bytes_deserializer(data)
        assert bytes(de.read_bytes(2)) == b'xy'
        de.finalize()


def test_deserializer_truncated():
    de = Deserializer.build_bytes_deserializer(b'ab')
    with pytest.raises(TruncatedInputError):
        de.read_bytes(3)
    # nothing was consumed by the failed read
    assert de.remaining() == 2
    de.read_bytes(2)
    with pytest.raises(TruncatedInputError):
        de.read_byte()


def test_deserializer_trailing_data():
    de = Deserializer.build_bytes_deserializer(b'abc')
    de.read_byte()
    with pytest.raises(TrailingDataError) as exc_info:
        de.finalize()
    assert exc_info.value.remaining == 2


def test_max_bytes_serializer():
    se = Serializer.build_bytes_serializer()
    limited = se.with_max_bytes(3)
    assert isinstance(limited, MaxBytesSerializer)
    limited.write_byte(1)
    limited.write_bytes(b'\x02\x03')
    with pytest.raises(MaxBytesExceededError):
        limited.write_byte(4)


def test_max_bytes_serializer_checks_before_writing():
    se = Serializer.build_bytes_serializer()
    limited = se.with_max_bytes(2)
    with pytest.raises(MaxBytesExceededError):
        limited.write_bytes(b'abc')
    assert se.cur_pos() == 0


def test_optional_max_bytes():
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    assert isinstance(se.with_optional_max_bytes(10), MaxBytesSerializer)

    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
    assert isinstance(de.with_optional_max_bytes(10), MaxBytesDeserializer)


def test_max_bytes_deserializer():
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    limited = de.with_max_bytes(4)
    assert limited.read_byte() == ord('a')
    assert bytes(limited.read_bytes(3)) == b'bcd'
    with pytest.raises(MaxBytesExceededError):
        limited.read_byte()
    # the limit only applies to reads made through the adapter
    assert bytes(de.read_all()) == b'ef'


def test_max_bytes_deserializer_read_all():
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    with pytest.raises(MaxBytesExceededError):
        de.with_max_bytes(5).read_all()


def test_finalize_does_not_copy():
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'abc')
    view = se.finalize()
    # a view over the buffer that was written to, not a snapshot of it
    assert isinstance(view.obj, bytearray)
    assert bytes(view) == b'abc'
