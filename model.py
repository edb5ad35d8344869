from binascii import hexlify
from rasset import script


class ModelScid:

    @staticmethod
    def toDict(msg):
        dic = {}
        dic['block_height'] = msg.block_height
        dic['tx_index'] = msg.tx_index
        dic['output_index'] = msg.output_index
        dic['scid'] = str(msg)
        # 64 bits would lose precision in javascript clients
        dic['packed'] = str(msg.to_u64())
        return dic


class ModelAssetTransfer:

    @staticmethod
    def toDict(msg):
        dic = {}
        dic['scid'] = str(msg.scid)
        dic['target_output'] = msg.target_output
        dic['amount'] = str(msg.amount)
        return dic


class ModelTransferScript:

    @staticmethod
    def toDict(script_bytes, transfers=None):
        dic = {}
        dic['script'] = hexlify(script_bytes).decode('latin-1')
        dic['asm'] = str(script.Tokenizer(script_bytes))
        dic['size'] = len(script_bytes)
        if transfers is not None:
            dic['transfers'] = [ModelAssetTransfer.toDict(t) for t in transfers]
        return dic
