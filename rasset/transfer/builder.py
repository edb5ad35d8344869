from binascii import hexlify

from .. import DecodeError
from .. import script
from ..log import logger, LOG_LEVEL_DEBUG, LOG_LEVEL_INFO

from .asset import AssetTransfer

__all__ = ['build_transfer_script', 'parse_transfer_script', 'is_transfer_script']

PROTOCOL_TAG = b'R'

_PROTOCOL_PREFIX = script.Builder().push_opcode(script.OP_RETURN).push_data(PROTOCOL_TAG).into_script()

def build_transfer_script(transfers):
  ''' Assemble the OP_RETURN output script for a batch of transfers.

  Every scid is encoded against the scid of transfers[0]; each transfer
  adds three pushes in order: scid field, target_output field, amount
  field. Any error aborts the whole build. '''

  transfers = list(transfers)
  builder = script.Builder().push_opcode(script.OP_RETURN).push_data(PROTOCOL_TAG)

  if transfers:
    baseline = transfers[0].scid
    baseline_b = None
    for (idx,transfer) in enumerate(transfers):
      (scid_b,target_b,amount_b) = transfer.encode(baseline)
      if idx == 0:
        baseline_b = scid_b
      elif scid_b == baseline_b and transfer.scid != baseline:
        logger.log('transfer %i: offset of %s equals the baseline %s, readers will see the baseline' % (idx,transfer.scid,baseline),level=LOG_LEVEL_INFO)

      builder.push_data(scid_b).push_data(target_b).push_data(amount_b)

  ret = builder.into_script()
  logger.log('transfer script built: %i transfer(s), %i bytes, %s' % (len(transfers),len(ret),hexlify(ret).decode('latin-1')),level=LOG_LEVEL_DEBUG)
  return ret

def is_transfer_script(script_bytes):
  return bytes(script_bytes[:len(_PROTOCOL_PREFIX)]) == _PROTOCOL_PREFIX

def parse_transfer_script(script_bytes):
  'Read the transfers back from a script made by build_transfer_script().'

  script_bytes = bytes(script_bytes)
  if not is_transfer_script(script_bytes):
    raise DecodeError('not a transfer script')

  items = script.Tokenizer(script_bytes).items[2:]   # skip OP_RETURN and tag
  pushes = []
  for (opcode,data) in items:
    if data is None:
      raise DecodeError('unexpected opcode in transfer script: %s' % (script.opcode_name(opcode),))
    pushes.append(data)
  if len(pushes) % 3:
    raise DecodeError('%i trailing push(es) do not make a transfer record' % (len(pushes) % 3,))

  transfers = []
  baseline = None
  for i in range(0,len(pushes),3):
    transfer = AssetTransfer.decode(pushes[i:i+3],baseline)
    if baseline is None: baseline = transfer.scid
    transfers.append(transfer)
  return transfers
