#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# crypto-coininfo and crypto-keypath, as nested inside crypto-hdkey
#
import pytest

from urhdkey.coin_info import CoinInfo
from urhdkey.key_path import KeyPath, PathComponent
from urhdkey.constants import NETWORK_MAINNET, NETWORK_TESTNET, COIN_TYPE_BTC
from urhdkey.exceptions import FieldTypeError, MissingFieldError, MalformedCBORError
from urhdkey.registry import lookup, COININFO, KEYPATH, HDKEY
from urhdkey.utils import B2A, wrap_tagged, unwrap_tagged, HARDENED


def test_registry():
    assert lookup(303) == HDKEY
    assert lookup('crypto-keypath') == KEYPATH
    assert lookup(305).name == 'crypto-coininfo'
    assert lookup(999) is None
    assert CoinInfo.registry_type == COININFO
    assert KeyPath.registry_type.tag == 304

def test_coin_info_encode():
    assert B2A(CoinInfo(network=NETWORK_TESTNET).to_bytes()).upper() == 'A10201'
    assert B2A(CoinInfo().to_bytes()).upper() == 'A0'
    assert B2A(CoinInfo(coin_type=60, network=0).to_bytes()).upper() == 'A201183C0200'

def test_coin_info_defaults():
    ci = CoinInfo.from_bytes(bytes.fromhex('A0'))
    assert ci.coin_type == COIN_TYPE_BTC
    assert ci.network == NETWORK_MAINNET
    assert not ci.is_testnet()
    assert ci == CoinInfo(coin_type=0, network=0)

    ci = CoinInfo.from_bytes(bytes.fromhex('A10201'))
    assert ci.is_testnet()
    # absent values stay absent, so bytes are the same going back out
    assert ci.to_bytes() == bytes.fromhex('A10201')

@pytest.mark.parametrize('value, field', [
    ({1: 'btc'}, 'coin_type'),
    ({1: -1}, 'coin_type'),
    ({2: 2}, 'network'),
    ({2: True}, 'network'),
])
def test_coin_info_errors(value, field):
    with pytest.raises(FieldTypeError) as err:
        CoinInfo.from_cbor(value)
    assert err.value.field == field

def test_key_path_encode():
    kp = KeyPath.from_path("44'/1'/1'/0/1")
    assert B2A(kp.to_bytes()).upper() == 'A1018A182CF501F501F500F401F4'
    assert wrap_tagged(kp).tag == 304

    kp = KeyPath.from_path("m/0/*")
    assert B2A(kp.to_bytes()).upper() == 'A1018400F480F4'

def test_key_path_decode():
    kp = KeyPath.from_bytes(bytes.fromhex('A1018A182CF501F501F500F401F4'))
    assert kp.path == "44'/1'/1'/0/1"
    assert len(kp) == 5
    assert kp.components[0] == PathComponent(44, True)
    assert kp.components[-1].canonical_index == 1
    assert kp.source_fingerprint is None
    assert kp.depth is None

def test_key_path_extras():
    kp = KeyPath.from_path("84h/0h/0h", source_fingerprint=bytes.fromhex('37b5eed4'), depth=3)
    got = KeyPath.from_cbor(kp.to_cbor())
    assert got == kp
    assert got.source_fingerprint.hex() == '37b5eed4'
    assert got.depth == 3
    assert kp.to_cbor()[2] == 0x37b5eed4

@pytest.mark.parametrize('text, path', [
    ("m/44'/0'/0'", "44'/0'/0'"),
    ("84h/0H/0p/1/2", "84'/0'/0'/1/2"),
    ("m", ""),
    ("0/*", "0/*"),
    ("1/*'", "1/*'"),
    ("m//7/", "7"),
])
def test_key_path_text(text, path):
    assert KeyPath.from_path(text).path == path

def test_path_component():
    assert PathComponent(0, True).canonical_index == HARDENED
    assert PathComponent(5, False).canonical_index == 5
    assert PathComponent(None, True).canonical_index is None
    assert PathComponent(None, False).is_wildcard()
    assert str(PathComponent(44, True)) == "44'"
    with pytest.raises(ValueError):
        PathComponent(HARDENED, False)
    with pytest.raises(ValueError):
        PathComponent(-1, True)

@pytest.mark.parametrize('value, err, field', [
    ([], MalformedCBORError, None),
    ({}, MissingFieldError, 'components'),
    ({1: 44}, FieldTypeError, 'components'),
    ({1: [44, True, 1]}, FieldTypeError, 'components'),
    ({1: [44, 1]}, FieldTypeError, 'components'),
    ({1: [HARDENED, False]}, FieldTypeError, 'components'),
    ({1: [True, False]}, FieldTypeError, 'components'),
    ({1: [[0, 9], False]}, FieldTypeError, 'components'),
    ({1: [], 2: 2**32}, FieldTypeError, 'source_fingerprint'),
    ({1: [], 2: b'abcd'}, FieldTypeError, 'source_fingerprint'),
    ({1: [], 3: 256}, FieldTypeError, 'depth'),
])
def test_key_path_errors(value, err, field):
    with pytest.raises(err) as exc:
        KeyPath.from_cbor(value)
    assert exc.value.field == field

def test_unwrap_tagged():
    kp = KeyPath.from_path("0/1")
    assert unwrap_tagged(KeyPath, wrap_tagged(kp), 'origin') == kp

    ci = CoinInfo(network=NETWORK_TESTNET)
    assert unwrap_tagged(CoinInfo, wrap_tagged(ci), 'use_info') == ci

# EOF
