from .scid import Scid
from .asset import AssetTransfer, AMOUNT_BITS
from .builder import build_transfer_script, parse_transfer_script, is_transfer_script, PROTOCOL_TAG

__all__ = [
  'Scid', 'AssetTransfer', 'AMOUNT_BITS', 'PROTOCOL_TAG',
  'build_transfer_script', 'parse_transfer_script', 'is_transfer_script',
]
