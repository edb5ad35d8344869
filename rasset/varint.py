from . import CapacityError, DecodeError

__all__ = ['encode_var', 'decode_var', 'required_space', 'MAX_VARINT_LEN']

MAX_VARINT_LEN = 10    # 64 bits in 7-bit groups

def required_space(n):
  'Number of bytes the varint encoding of n occupies.'
  
  size = 1
  while n >= 0x80:
    n >>= 7
    size += 1
  return size

def encode_var(n, capacity=MAX_VARINT_LEN):
  'Encode an unsigned integer as base-128 varint, low group first.'
  
  if n < 0:
    raise CapacityError('negative value can not be encoded: %i' % (n,))
  
  size = required_space(n)
  if size > capacity:
    raise CapacityError('varint needs %i bytes, capacity is %i' % (size,capacity))
  
  b = bytearray()
  while n >= 0x80:
    b.append((n & 0x7f) | 0x80)
    n >>= 7
  b.append(n)
  return bytes(b)

def decode_var(data, offset=0, capacity=MAX_VARINT_LEN):
  ''' Decode a varint from data[offset:], return (value, next_offset).
  Only the shortest encoding is accepted, a multi-byte varint may not end
  with a 0x00 group. '''
  
  n = 0; shift = 0
  i = offset
  while True:
    if i >= len(data):
      raise DecodeError('truncated varint at offset %i' % (offset,))
    if i - offset >= capacity:
      raise DecodeError('varint longer than %i bytes at offset %i' % (capacity,offset))
    ch = data[i]
    n |= (ch & 0x7f) << shift
    shift += 7
    i += 1
    if not (ch & 0x80): break
  if ch == 0 and i - offset > 1:
    raise DecodeError('overlong varint at offset %i' % (offset,))
  return (n, i)
