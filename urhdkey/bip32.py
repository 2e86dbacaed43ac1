#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# BIP-32 extended key serialization: the familiar xpub/xprv strings.
#
import base58
from collections import namedtuple

from .constants import BIP32_PAYLOAD_SIZE


ExtendedKeyFields = namedtuple('ExtendedKeyFields',
                    ['version', 'depth', 'parent_fingerprint', 'index', 'chain_code', 'key'])


def int_to_big_endian(n: int, length: int) -> bytes:
    """
    Represents integer in big endian byteorder.

    :param n: integer
    :param length: byte length
    :return: big endian
    """
    return n.to_bytes(length, "big")


def serialize(version: int, depth: int, parent_fingerprint: bytes, index: int,
              chain_code: bytes, key: bytes) -> bytes:
    """
    Build the 78-byte extended key payload.

    Byte strings are used as given: a chain code or key of the wrong size
    shifts everything after it.

    :param version: 4-byte version number (0x0488B21E for xpub, 0x0488ADE4 for xprv)
    :param depth: 0x00 for master nodes, 0x01 for level-1 derived keys, ...
    :param parent_fingerprint: fingerprint of the parent key (zeros if master)
    :param index: child number, high bit set when hardened
    :param chain_code: 32 bytes
    :param key: 33 bytes, serP(K) for public or 0x00 || ser256(k) for private
    :return: serialized extended key
    """
    # 4 byte: version bytes
    result = int_to_big_endian(version, 4)
    # 1 byte: depth, truncated to fit
    result += int_to_big_endian(depth & 0xff, 1)
    # 4 bytes: the fingerprint of the parent key
    result += parent_fingerprint
    # 4 bytes: child number
    result += int_to_big_endian(index, 4)
    # 32 bytes: the chain code
    result += chain_code
    # 33 bytes: the public key or private key data
    result += key
    return result


def encode_extended_key(payload: bytes) -> str:
    # base58 with 4-byte double-sha256 checksum appended
    return base58.b58encode_check(payload).decode('ascii')


def extended_key(version, depth, parent_fingerprint, index, chain_code, key) -> str:
    return encode_extended_key(serialize(version, depth, parent_fingerprint,
                                         index, chain_code, key))


def parse_extended_key(s: str) -> ExtendedKeyFields:
    """
    Split an xpub/xprv (or testnet equivalent) string into its fields.

    :param s: base58-check string
    :return: the six fields of the payload
    """
    raw = base58.b58decode_check(s)
    if len(raw) != BIP32_PAYLOAD_SIZE:
        raise ValueError(f"Extended key payload is {len(raw)} bytes, "
                         f"expected {BIP32_PAYLOAD_SIZE}")

    return ExtendedKeyFields(
        version=int.from_bytes(raw[0:4], 'big'),
        depth=raw[4],
        parent_fingerprint=raw[5:9],
        index=int.from_bytes(raw[9:13], 'big'),
        chain_code=raw[13:45],
        key=raw[45:78],
    )

# EOF
