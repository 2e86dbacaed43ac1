import pytest

# BIP-32 test vector 1, chain m
MASTER_KEY = '00e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35'
MASTER_CHAIN_CODE = '873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508'
MASTER_CBOR = 'A301F503582100E8F32E723DECF4051AEFAC8E2C93C9C5B214313817CDB01A1494B917C8436B35045820873DFF81C02F525623FD1FE5167EAC3A55A049DE3D314BB42EE227FFED37D508'
MASTER_XPRV = 'xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi'

# testnet account key at 44'/1'/1'/0/1
EXT_KEY = '026fe2355745bb2db3630bbc80ef5d58951c963c841f54170ba6e5c12be7fc12a6'
EXT_CHAIN_CODE = 'ced155c72456255881793514edc5bd9447e7f74abb88c6d6b6480fd016ee8c85'
EXT_PARENT_FP = 'e9181cf3'
EXT_PATH = "44'/1'/1'/0/1"
EXT_CBOR = 'A5035821026FE2355745BB2DB3630BBC80EF5D58951C963C841F54170BA6E5C12BE7FC12A6045820CED155C72456255881793514EDC5BD9447E7F74ABB88C6D6B6480FD016EE8C8505D90131A1020106D90130A1018A182CF501F501F500F401F4081AE9181CF3'
EXT_XPUB = 'xpub6H8Qkexp9BdSgEwPAnhiEjp7NMXVEZWoAFWwon5mSwbuPZMfSUTpPwAP1Q2q2kYMRgRQ8udBpEj89wburY1vW7AWDuYpByteGogpB6pPprX'

@pytest.fixture
def master_key():
    from urhdkey.hd_key import HDKey
    return HDKey.master_key(bytes.fromhex(MASTER_KEY), bytes.fromhex(MASTER_CHAIN_CODE))

@pytest.fixture
def extended_key():
    # the derived public key, with every field the test vector carries
    from urhdkey.hd_key import HDKey
    from urhdkey.coin_info import CoinInfo
    from urhdkey.key_path import KeyPath, PathComponent
    from urhdkey.constants import NETWORK_TESTNET

    origin = KeyPath([
        PathComponent(44, True),
        PathComponent(1, True),
        PathComponent(1, True),
        PathComponent(0, False),
        PathComponent(1, False),
    ])

    return HDKey.extended_key(
        bytes.fromhex(EXT_KEY),
        chain_code=bytes.fromhex(EXT_CHAIN_CODE),
        use_info=CoinInfo(network=NETWORK_TESTNET),
        origin=origin,
        parent_fingerprint=bytes.fromhex(EXT_PARENT_FP))

# EOF
