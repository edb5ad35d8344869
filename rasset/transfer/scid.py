from .. import ConstructionError, UnderflowError

__all__ = ['Scid']

_MASK_24 = 0xffffff
_MASK_16 = 0xffff
_MASK_64 = 0xffffffffffffffff

def _check(value, mask, name):
  if value < 0 or (value & mask) != value:
    raise ConstructionError('%s is out of range: %r' % (name,value))
  return value

class Scid(object):
  ''' Short coin id, refers to one output of one transaction on chain.

  Packed as 64 bits: block_height(24) + tx_index(24) + output_index(16).
  The same shape also carries an offset between two ids, see difference()
  and apply_offset(). '''

  __slots__ = ('_block_height', '_tx_index', '_output_index')

  def __init__(self, block_height, tx_index, output_index):
    self._block_height = _check(block_height,_MASK_24,'block_height')
    self._tx_index = _check(tx_index,_MASK_24,'tx_index')
    self._output_index = _check(output_index,_MASK_16,'output_index')

  block_height = property(lambda s: s._block_height)
  tx_index = property(lambda s: s._tx_index)
  output_index = property(lambda s: s._output_index)

  def _key(self):
    return (self._block_height,self._tx_index,self._output_index)

  def __eq__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() == other._key()

  def __ne__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() != other._key()

  def __lt__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() < other._key()

  def __le__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() <= other._key()

  def __gt__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() > other._key()

  def __ge__(self, other):
    if not isinstance(other,Scid): return NotImplemented
    return self._key() >= other._key()

  def __hash__(self):
    return hash(self._key())

  def __repr__(self):
    return 'Scid(%i, %i, %i)' % self._key()

  def __str__(self):
    return '%i:%i:%i' % self._key()

  def to_u64(self):
    'Pack into the 64-bit layout.'

    return (self._block_height << 40) | (self._tx_index << 16) | self._output_index

  @classmethod
  def from_u64(cls, packed):
    'Unpack from the 64-bit layout.'

    if packed < 0 or (packed & _MASK_64) != packed:
      raise ConstructionError('packed scid is out of range: %r' % (packed,))
    return cls((packed >> 40) & _MASK_24, (packed >> 16) & _MASK_24, packed & _MASK_16)

  @classmethod
  def parse(cls, text):
    'Parse the "height:index:output" form.'

    b = str(text).strip().split(':')
    if len(b) != 3:
      raise ConstructionError('invalid scid: %r' % (text,))
    try:
      fields = [int(s) for s in b]
    except ValueError:
      raise ConstructionError('invalid scid: %r' % (text,))
    return cls(*fields)

  def difference(self, other):
    'Fieldwise self - other, fails when any field of self is the smaller one.'

    if ( self._block_height < other._block_height or
         self._tx_index < other._tx_index or
         self._output_index < other._output_index ):
      raise UnderflowError('can not offset %s against %s' % (self,other))
    return Scid( self._block_height - other._block_height,
                 self._tx_index - other._tx_index,
                 self._output_index - other._output_index )

  def apply_offset(self, offset):
    'Add a packed 64-bit offset to self fieldwise, inverse of difference().'

    if isinstance(offset,Scid):
      offset = offset.to_u64()
    if offset < 0 or (offset & _MASK_64) != offset:
      raise ConstructionError('offset is out of range: %r' % (offset,))
    return Scid( ((offset >> 40) & _MASK_24) + self._block_height,
                 ((offset >> 16) & _MASK_24) + self._tx_index,
                 (offset & _MASK_16) + self._output_index )
