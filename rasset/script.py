import struct
from binascii import hexlify

from . import CapacityError, DecodeError

__all__ = ['Builder', 'Tokenizer', 'MAX_SCRIPT_ELEMENT_SIZE']

OP_0         = 0x00
OP_PUSHDATA1 = 0x4c
OP_PUSHDATA2 = 0x4d
OP_PUSHDATA4 = 0x4e
OP_1NEGATE   = 0x4f
OP_1         = 0x51
OP_16        = 0x60
OP_NOP       = 0x61
OP_RETURN    = 0x6a

MAX_SCRIPT_ELEMENT_SIZE = 520

_OPCODE_NAMES = {
  OP_0: 'OP_0',
  OP_PUSHDATA1: 'OP_PUSHDATA1',
  OP_PUSHDATA2: 'OP_PUSHDATA2',
  OP_PUSHDATA4: 'OP_PUSHDATA4',
  OP_1NEGATE: 'OP_1NEGATE',
  OP_NOP: 'OP_NOP',
  OP_RETURN: 'OP_RETURN',
}
for _i in range(1,17):
  _OPCODE_NAMES[OP_1 + _i - 1] = 'OP_%i' % (_i,)

def opcode_name(opcode):
  return _OPCODE_NAMES.get(opcode,'OP_UNKNOWN(0x%02x)' % (opcode,))

def push_prefix(size):
  'Get the opcode bytes that introduce a data push of size bytes.'

  if size < OP_PUSHDATA1:
    return bytes(bytearray((size,)))
  elif size <= 0xff:
    return struct.pack('<BB',OP_PUSHDATA1,size)
  elif size <= 0xffff:
    return struct.pack('<BH',OP_PUSHDATA2,size)
  elif size <= 0xffffffff:
    return struct.pack('<BI',OP_PUSHDATA4,size)
  else: raise CapacityError('push data too large (%i bytes)' % (size,))

class Builder(object):
  ''' Append-only output script builder.

  Data pushes are never rewritten as small-integer opcodes, a one byte
  push is always encoded as 0x01 followed by that byte. '''

  def __init__(self, max_element=MAX_SCRIPT_ELEMENT_SIZE):
    self._max_element = max_element
    self._buf = bytearray()

  def __len__(self):
    return len(self._buf)

  def push_opcode(self, opcode):
    if (opcode & 0xff) != opcode:
      raise ValueError('invalid opcode: %r' % (opcode,))
    self._buf.append(opcode)
    return self

  def push_data(self, data):
    data = bytes(data)
    if self._max_element is not None and len(data) > self._max_element:
      raise CapacityError('push of %i bytes exceeds element limit %i' % (len(data),self._max_element))
    self._buf.extend(push_prefix(len(data)))
    self._buf.extend(data)
    return self

  def into_script(self):
    return bytes(self._buf)

class Tokenizer(object):
  ''' Walk a script as a sequence of (opcode, data) items. data is None for
  plain opcodes and the pushed bytes for push operations. '''

  def __init__(self, script):
    self._script = bytes(script)
    self._items = None

  def _parse(self):
    script = self._script
    items = []
    i = 0; size = len(script)
    while i < size:
      opcode = script[i]
      i += 1
      if opcode == OP_0:
        items.append((opcode,b''))
        continue

      if opcode < OP_PUSHDATA1:
        n = opcode
      elif opcode == OP_PUSHDATA1:
        if i + 1 > size: raise DecodeError('truncated OP_PUSHDATA1')
        n = script[i]; i += 1
      elif opcode == OP_PUSHDATA2:
        if i + 2 > size: raise DecodeError('truncated OP_PUSHDATA2')
        n = struct.unpack('<H',script[i:i+2])[0]; i += 2
      elif opcode == OP_PUSHDATA4:
        if i + 4 > size: raise DecodeError('truncated OP_PUSHDATA4')
        n = struct.unpack('<I',script[i:i+4])[0]; i += 4
      else:
        items.append((opcode,None))
        continue

      if i + n > size:
        raise DecodeError('push of %i bytes runs past end of script' % (n,))
      items.append((opcode,script[i:i+n]))
      i += n
    return items

  @property
  def items(self):
    if self._items is None:
      self._items = self._parse()
    return self._items

  script = property(lambda s: s._script)

  def __iter__(self):
    return iter(self.items)

  def __len__(self):
    return len(self.items)

  def __getitem__(self, index):
    return self.items[index]

  def __str__(self):
    b = []
    for (opcode,data) in self.items:
      if data is None:
        b.append(opcode_name(opcode))
      elif not data:
        b.append('OP_0')
      else: b.append(hexlify(data).decode('latin-1'))
    return ' '.join(b)
