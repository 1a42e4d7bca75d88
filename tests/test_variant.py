import dataclasses

import pytest

from jamcodec import encode
from jamcodec.serialization import (
    Deserializer,
    OutOfRangeError,
    SerializationError,
    Serializer,
    UnsupportedShapeError,
)
from jamcodec.serialization.compound_encoding.variant import decode_variant, encode_variant
from jamcodec.serialization.consts import UINT32_MAX, UINT64_MAX
from jamcodec.variant import (
    INDEX_BY_SHAPE,
    SHAPE_BY_INDEX,
    VariantA,
    VariantB,
    VariantC,
    VariantIndex,
    variant_index,
)


def _encode(variant) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_variant(se, variant)
    return bytes(se.finalize())


def _decode(data: bytes):
    de = Deserializer.build_bytes_deserializer(data)
    variant = decode_variant(de)
    de.finalize()
    return variant


def test_indexes_are_fixed():
    assert VariantIndex.A == 15
    assert VariantIndex.B == 1
    assert VariantIndex.C == 2


def test_tables_are_inverse():
    assert len(INDEX_BY_SHAPE) == len(SHAPE_BY_INDEX) == len(VariantIndex) == 3
    for shape, index in INDEX_BY_SHAPE.items():
        assert SHAPE_BY_INDEX[index] is shape


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        INDEX_BY_SHAPE[VariantA] = VariantIndex.B  # type: ignore[index]


def test_variant_index():
    assert variant_index(VariantA()) is VariantIndex.A
    assert variant_index(VariantB((0, 0))) is VariantIndex.B
    assert variant_index(VariantC(a=0, b=0)) is VariantIndex.C
    with pytest.raises(KeyError):
        variant_index(object())  # type: ignore[arg-type]


def test_variants_are_immutable_values():
    c = VariantC(a=1, b=2)
    assert c == VariantC(a=1, b=2)
    assert hash(c) == hash(VariantC(a=1, b=2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.a = 3  # type: ignore[misc]


@pytest.mark.parametrize('variant, encoded_hex', [
    (VariantA(), '0f'),
    (VariantB((1, 2)), '01' '01000000' '0200000000000000'),
    (VariantC(a=1, b=2), '02' '01000000' '0200000000000000'),
    (VariantB((UINT32_MAX, UINT64_MAX)), '01' 'ffffffff' 'ffffffffffffffff'),
    (VariantC(a=0x01020304, b=0x0102030405060708), '02' '04030201' '0807060504030201'),
])
def test_payload_layout(variant, encoded_hex):
    data = _encode(variant)
    assert data.hex() == encoded_hex
    assert _decode(data) == variant


def test_payload_is_fixed_size():
    # no varints inside the payload, so the size never depends on the values
    assert len(_encode(VariantB((0, 0)))) == len(_encode(VariantB((UINT32_MAX, UINT64_MAX)))) == 13


@pytest.mark.parametrize('variant', [
    VariantB((UINT32_MAX + 1, 0)),
    VariantB((0, UINT64_MAX + 1)),
    VariantB((-1, 0)),
    VariantC(a=UINT32_MAX + 1, b=0),
    VariantC(a=0, b=-1),
])
def test_out_of_range_fields(variant):
    with pytest.raises(OutOfRangeError):
        _encode(variant)


@pytest.mark.parametrize('variant, field_type', [
    (VariantB((1.5, 2)), float),  # type: ignore[arg-type]
    (VariantB((1, None)), type(None)),  # type: ignore[arg-type]
    (VariantC(a='x', b=1), str),  # type: ignore[arg-type]
    (VariantC(a=1, b=True), bool),
])
def test_non_int_fields(variant, field_type):
    se = Serializer.build_bytes_serializer()
    with pytest.raises(UnsupportedShapeError) as exc_info:
        encode_variant(se, variant)
    assert exc_info.value.value_type is field_type
    # rejected before anything is written
    assert se.cur_pos() == 0


def test_non_int_fields_through_encode():
    with pytest.raises(SerializationError):
        encode(VariantB((1.5, 2)))  # type: ignore[arg-type]


@pytest.mark.parametrize('variant', [
    VariantB((1, 2, 3)),  # type: ignore[arg-type]
    VariantB(5),  # type: ignore[arg-type]
])
def test_malformed_payload(variant):
    with pytest.raises(UnsupportedShapeError):
        _encode(variant)


def test_unknown_shape():
    @dataclasses.dataclass(frozen=True)
    class VariantD:
        pass

    with pytest.raises(UnsupportedShapeError):
        _encode(VariantD())  # type: ignore[arg-type]


def test_subclass_is_not_a_known_shape():
    class MyA(VariantA):
        pass

    with pytest.raises(UnsupportedShapeError):
        _encode(MyA())
