from .. import CapacityError, ConstructionError, DecodeError
from .. import varint

from .scid import Scid

__all__ = ['AssetTransfer']

AMOUNT_BITS = 64   # bump only together with the protocol tag

SCID_FIELD_SIZE   = 10   # varint of 64 bits
TARGET_FIELD_SIZE = 3    # varint of 16 bits
AMOUNT_FIELD_SIZE = 10   # varint of AMOUNT_BITS

_MASK_16 = 0xffff
_MASK_AMOUNT = (1 << AMOUNT_BITS) - 1

class AssetTransfer(object):
  ''' Move `amount` of the asset identified by `scid` to output number
  `target_output` of the current transaction. '''

  __slots__ = ('_scid', '_target_output', '_amount')

  def __init__(self, scid, target_output, amount):
    self._scid = scid
    self._target_output = target_output
    self._amount = amount

  scid = property(lambda s: s._scid)
  target_output = property(lambda s: s._target_output)
  amount = property(lambda s: s._amount)

  def _key(self):
    return (self._scid,self._target_output,self._amount)

  def __eq__(self, other):
    if not isinstance(other,AssetTransfer): return NotImplemented
    return self._key() == other._key()

  def __ne__(self, other):
    if not isinstance(other,AssetTransfer): return NotImplemented
    return self._key() != other._key()

  def __hash__(self):
    return hash(self._key())

  def __repr__(self):
    return 'AssetTransfer(%r, %i, %i)' % self._key()

  def scid_value(self, baseline):
    'Get the number carried by the scid field: absolute for the baseline itself, else the offset.'

    if self._scid == baseline:
      return self._scid.to_u64()
    return self._scid.difference(baseline).to_u64()

  def encode(self, baseline):
    'Encode to (scid_bytes, target_output_bytes, amount_bytes) against the baseline scid.'

    if self._target_output < 0 or (self._target_output & _MASK_16) != self._target_output:
      raise CapacityError('target_output does not fit 16 bits: %r' % (self._target_output,))
    if self._amount < 0 or (self._amount & _MASK_AMOUNT) != self._amount:
      raise CapacityError('amount does not fit %i bits: %r' % (AMOUNT_BITS,self._amount))

    return ( varint.encode_var(self.scid_value(baseline),SCID_FIELD_SIZE),
             varint.encode_var(self._target_output,TARGET_FIELD_SIZE),
             varint.encode_var(self._amount,AMOUNT_FIELD_SIZE) )

  @classmethod
  def decode(cls, fields, baseline=None):
    ''' Decode a (scid, target_output, amount) byte triple. Without a baseline
    the scid field is taken as absolute, this is how the first record of a
    script is read. Otherwise a value equal to the packed baseline is the
    baseline itself and anything else is an offset from it. '''

    if len(fields) != 3:
      raise DecodeError('transfer record needs 3 fields, got %i' % (len(fields),))

    values = []
    for (data,size) in zip(fields,(SCID_FIELD_SIZE,TARGET_FIELD_SIZE,AMOUNT_FIELD_SIZE)):
      (n,end) = varint.decode_var(data,0,size)
      if end != len(data):
        raise DecodeError('extra bytes after varint: %r' % (bytes(data),))
      values.append(n)
    (scid_n,target_output,amount) = values

    if target_output > _MASK_16:
      raise DecodeError('target_output does not fit 16 bits: %i' % (target_output,))
    if amount > _MASK_AMOUNT:
      raise DecodeError('amount does not fit %i bits: %i' % (AMOUNT_BITS,amount))
    if scid_n >> 64:
      raise DecodeError('scid field does not fit 64 bits: %i' % (scid_n,))

    try:
      if baseline is None or scid_n == baseline.to_u64():
        scid = Scid.from_u64(scid_n)
      else: scid = baseline.apply_offset(scid_n)
    except ConstructionError as e:
      raise DecodeError('invalid scid field: %s' % (e,))
    return cls(scid,target_output,amount)
