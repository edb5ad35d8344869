import sys
from binascii import hexlify

from rasset import TransferError
from rasset import script
from rasset.transfer import Scid, AssetTransfer, build_transfer_script

def parse_transfer(arg):
  b = arg.split(',')
  if len(b) != 3:
    raise ValueError('invalid transfer: %s (should be height:index:output,target,amount)' % (arg,))
  return AssetTransfer(Scid.parse(b[0]),int(b[1]),int(b[2]))

def main(argv=None):
  args = sys.argv[1:] if argv is None else argv
  if not args:
    print('usage: python make_transfer.py height:index:output,target,amount [...]')
    return 1
  
  try:
    transfers = [parse_transfer(arg) for arg in args]
    script_bytes = build_transfer_script(transfers)
  except (TransferError, ValueError) as e:
    print('!! error: %s' % (e,))
    return 1
  
  print('make transfer script successful:')
  print('  transfers = %i' % (len(transfers),))
  print('  script    = %s' % (hexlify(script_bytes).decode('latin-1'),))
  print('  asm       = %s' % (script.Tokenizer(script_bytes),))
  return 0

if __name__ == '__main__':
  sys.exit(main())
