import json
import sys
import traceback

from flask import Flask, request
from binascii import unhexlify

from rasset import TransferError
from rasset.config import config
from rasset.log import logger, level_from_name, LOG_LEVEL_INFO, LOG_LEVEL_ERROR
from rasset.transfer import Scid, AssetTransfer, build_transfer_script, parse_transfer_script

from model import *

# local startup by: python server.py -CFG port=3001 -ENV loglevel=debug
config.load_env()
config.load_argv()  # sys.argv will overwrite os.environ  # -ENV name=value -CFG name=value

host_ = config.get('CFG/host', '0.0.0.0')
port_ = config.get_int('CFG/port', 3001)
logger.log_level = level_from_name(config.get('ENV/loglevel'))

app = Flask(__name__)


class BadRequest(Exception):
    pass


@app.after_request
def after_request(response):
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Methods'] = 'PUT,GET,POST,DELETE'
    response.headers[
        'Access-Control-Allow-Headers'] = 'Content-Type,Authorization'
    return response


def http_result(code, d):
    sRet = json.dumps(d)
    return app.response_class(sRet, status=code,
                              mimetype='application/json')


def http_error(code, sErr):
    logger.log('http %i: %s' % (code, sErr), level=LOG_LEVEL_ERROR)
    return http_result(code, {'error': sErr})


def http_input():
    param = request.get_json(silent=True)
    if param is None:
        param = request.form.to_dict()
    if not isinstance(param, dict):
        raise BadRequest('invalid parameter')
    return param


def int_param(value, name):
    if isinstance(value, bool) or isinstance(value, float):
        raise BadRequest('%s should be an integer: %r' % (name, value))
    if isinstance(value, str):
        if not value.isdigit():
            raise BadRequest('%s should be an integer: %r' % (name, value))
        return int(value)
    if not isinstance(value, int):
        raise BadRequest('%s should be an integer: %r' % (name, value))
    return value


def transfer_from_param(item):
    if not isinstance(item, dict):
        raise BadRequest('invalid transfer: %r' % (item, ))
    try:
        scid = item['scid']
        target_output = int_param(item['target_output'], 'target_output')
        amount = int_param(item['amount'], 'amount')
        if isinstance(scid, dict):
            scid = Scid(int_param(scid['block_height'], 'block_height'),
                        int_param(scid['tx_index'], 'tx_index'),
                        int_param(scid['output_index'], 'output_index'))
        else:
            scid = Scid.parse(scid)
    except KeyError as e:
        raise BadRequest('missing field: %s' % (e, ))
    return AssetTransfer(scid, target_output, amount)


@app.route('/')
def hello():
    return 'hello'


@app.route('/transfer/build', methods=['POST'])
def transfer_build():
    try:
        param = http_input()
        items = param.get('transfers', [])
        if isinstance(items, str):
            items = json.loads(items)
        if not isinstance(items, list):
            raise BadRequest('transfers should be a list')

        transfers = [transfer_from_param(item) for item in items]
        script_bytes = build_transfer_script(transfers)
        logger.log('>>> build %i transfer(s)' % (len(transfers), ),
                   level=LOG_LEVEL_INFO)
        return http_result(200, ModelTransferScript.toDict(script_bytes))
    except (BadRequest, TransferError, ValueError) as e:
        return http_error(400, str(e))
    except Exception as e:
        traceback.print_exc()
        return http_error(500, str(e))


@app.route('/transfer/parse', methods=['POST'])
def transfer_parse():
    try:
        param = http_input()
        sHex = param.get('script', '')
        if not sHex:
            raise BadRequest('invalid parameter')
        try:
            script_bytes = unhexlify(sHex)
        except (TypeError, ValueError):
            raise BadRequest('script is not hex')

        transfers = parse_transfer_script(script_bytes)
        return http_result(
            200, ModelTransferScript.toDict(script_bytes, transfers))
    except (BadRequest, TransferError) as e:
        return http_error(400, str(e))
    except Exception as e:
        traceback.print_exc()
        return http_error(500, str(e))


@app.route('/scid/<int:packed>')
def scid_get(packed):
    try:
        return http_result(200, ModelScid.toDict(Scid.from_u64(packed)))
    except TransferError as e:
        return http_error(400, str(e))


@app.route('/scid/offset', methods=['POST'])
def scid_offset():
    try:
        param = http_input()
        scid = Scid.parse(param.get('scid', ''))
        base = Scid.parse(param.get('base', ''))
        return http_result(200, ModelScid.toDict(scid.difference(base)))
    except (BadRequest, TransferError) as e:
        return http_error(400, str(e))
    except Exception as e:
        traceback.print_exc()
        return http_error(500, str(e))


if __name__ == "__main__":
    print('Server starting...')
    app.run(host=host_, port=port_, debug=('--debug' in sys.argv))
