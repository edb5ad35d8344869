import pytest

from rasset import CapacityError, DecodeError
from rasset.varint import encode_var, decode_var, required_space


@pytest.mark.parametrize("value,encoded", [
    (0, b"\x00"),
    (1, b"\x01"),
    (127, b"\x7f"),
    (128, b"\x80\x01"),
    (300, b"\xac\x02"),
    (500, b"\xf4\x03"),
    (65535, b"\xff\xff\x03"),
    (2**64 - 1, b"\xff" * 9 + b"\x01"),
])
def test_encode_known_values(value, encoded):
    assert encode_var(value) == encoded
    assert required_space(value) == len(encoded)
    assert decode_var(encoded) == (value, len(encoded))


def test_smaller_values_use_fewer_bytes():
    sizes = [len(encode_var(1 << shift)) for shift in range(0, 64, 7)]
    assert sizes == sorted(sizes)
    assert sizes[0] == 1
    assert sizes[-1] == 10


def test_capacity_error_instead_of_truncation():
    assert encode_var(2**14 - 1, 2) == b"\xff\x7f"
    with pytest.raises(CapacityError):
        encode_var(2**14, 2)


def test_negative_value_rejected():
    with pytest.raises(CapacityError):
        encode_var(-1)


def test_decode_from_offset():
    data = b"\xaa" + b"\xac\x02" + b"\x05"
    value, end = decode_var(data, 1)
    assert value == 300
    assert end == 3
    assert decode_var(data, end) == (5, 4)


def test_decode_truncated():
    with pytest.raises(DecodeError):
        decode_var(b"\x80\x80")


def test_decode_too_long():
    with pytest.raises(DecodeError):
        decode_var(b"\x80\x80\x01", capacity=2)


@pytest.mark.parametrize("data", [b"\x80\x00", b"\xff\x80\x00", b"\x81\x00"])
def test_decode_rejects_overlong(data):
    with pytest.raises(DecodeError):
        decode_var(data)
