#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# System constants.
#

# UR registry types: (type name, CBOR tag) - see BCR-2020-006
CRYPTO_HDKEY = ('crypto-hdkey', 303)
CRYPTO_KEYPATH = ('crypto-keypath', 304)
CRYPTO_COININFO = ('crypto-coininfo', 305)

# crypto-hdkey map keys, by field name
HDKEY_KEYS = {
    'is_master': 1,
    'is_private_key': 2,
    'key': 3,
    'chain_code': 4,
    'use_info': 5,
    'origin': 6,
    'children': 7,
    'parent_fingerprint': 8,
    'name': 9,
    'note': 10,
}

# crypto-keypath map keys
KEYPATH_KEYS = {
    'components': 1,
    'source_fingerprint': 2,
    'depth': 3,
}

# crypto-coininfo map keys
COININFO_KEYS = {
    'coin_type': 1,
    'network': 2,
}

# SLIP-44 coin type for bitcoin; the default when absent
COIN_TYPE_BTC = 0

# networks understood by crypto-coininfo
NETWORK_MAINNET = 0
NETWORK_TESTNET = 1

# BIP-32 extended key version numbers (mainnet only are produced by default)
XPRV_VERSION = 0x0488ADE4
XPUB_VERSION = 0x0488B21E
TPRV_VERSION = 0x04358394
TPUB_VERSION = 0x043587CF

# serialized extended key: 4+1+4+4+32+33
BIP32_PAYLOAD_SIZE = 78

# filler used when fields are absent at serialization time
EMPTY_FINGERPRINT = bytes(4)
EMPTY_CHAIN_CODE = bytes(32)
EMPTY_KEY = bytes(33)

# EOF
