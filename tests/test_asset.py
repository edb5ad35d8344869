import pytest

from rasset import CapacityError, DecodeError, UnderflowError
from rasset.transfer import Scid, AssetTransfer
from rasset.varint import encode_var


def test_self_baseline_encodes_absolute_value():
    scid = Scid(840000, 12, 1)
    transfer = AssetTransfer(scid, 2, 1000)
    scid_b, target_b, amount_b = transfer.encode(scid)
    assert scid_b == encode_var(scid.to_u64())
    assert scid_b != encode_var(0)
    assert target_b == encode_var(2)
    assert amount_b == encode_var(1000)


def test_other_scid_encodes_offset():
    baseline = Scid(100, 2, 0)
    transfer = AssetTransfer(Scid(100, 3, 1), 0, 7)
    scid_b, target_b, amount_b = transfer.encode(baseline)
    # offset (0, 1, 1) packs to 0x10001
    assert scid_b == b"\x81\x80\x04"
    assert target_b == b"\x00"
    assert amount_b == b"\x07"


def test_encode_is_deterministic():
    baseline = Scid(5, 5, 5)
    transfer = AssetTransfer(Scid(6, 7, 8), 3, 2**40)
    assert transfer.encode(baseline) == transfer.encode(baseline)


def test_widest_values_fit():
    scid = Scid(2**24 - 1, 2**24 - 1, 65535)
    scid_b, target_b, amount_b = AssetTransfer(scid, 65535, 2**64 - 1).encode(scid)
    assert len(scid_b) == 10
    assert len(target_b) == 3
    assert len(amount_b) == 10


@pytest.mark.parametrize("target_output,amount", [
    (65536, 1),
    (-1, 1),
    (0, 2**64),
    (0, -5),
])
def test_field_out_of_width(target_output, amount):
    scid = Scid(1, 1, 1)
    with pytest.raises(CapacityError):
        AssetTransfer(scid, target_output, amount).encode(scid)


def test_encode_underflow_propagates():
    baseline = Scid(100, 0, 0)
    with pytest.raises(UnderflowError):
        AssetTransfer(Scid(99, 0, 0), 0, 1).encode(baseline)


def test_decode_inverts_encode():
    baseline = Scid(100, 2, 0)
    first = AssetTransfer(baseline, 1, 500)
    second = AssetTransfer(Scid(120, 9, 4), 2, 2**63)
    assert AssetTransfer.decode(first.encode(baseline)) == first
    assert AssetTransfer.decode(second.encode(baseline), baseline) == second
    assert AssetTransfer.decode(first.encode(baseline), baseline) == first


def test_decode_rejects_padded_field():
    with pytest.raises(DecodeError):
        AssetTransfer.decode((b"\x00\x00", b"\x01", b"\x01"))


def test_decode_rejects_wide_target():
    with pytest.raises(DecodeError):
        AssetTransfer.decode((b"\x00", encode_var(65536), b"\x01"))


def test_decode_rejects_overflowing_offset():
    baseline = Scid(2**24 - 1, 0, 0)
    with pytest.raises(DecodeError):
        AssetTransfer.decode((encode_var(1 << 40), b"\x00", b"\x01"), baseline)


def test_value_semantics():
    a = AssetTransfer(Scid(1, 2, 3), 4, 5)
    assert a == AssetTransfer(Scid(1, 2, 3), 4, 5)
    assert a != AssetTransfer(Scid(1, 2, 3), 4, 6)
    assert hash(a) == hash(AssetTransfer(Scid(1, 2, 3), 4, 5))
    assert repr(a) == "AssetTransfer(Scid(1, 2, 3), 4, 5)"
