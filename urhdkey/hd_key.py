#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# hd_key.py
#
# crypto-hdkey: a BIP-32 master or derived key, as a UR registry item (BCR-2020-007).
#
from .constants import HDKEY_KEYS, XPRV_VERSION, XPUB_VERSION
from .constants import EMPTY_FINGERPRINT, EMPTY_CHAIN_CODE, EMPTY_KEY
from .coin_info import CoinInfo
from .exceptions import FieldTypeError
from .key_path import KeyPath
from .registry import HDKEY
from .utils import B2A, cbor_dumps, cbor_loads, expect_map, pick
from .utils import wrap_tagged, unwrap_tagged, fingerprint_to_int, int_to_fingerprint
from . import bip32

# Change this to see encode/decode details
VERBOSE = False

K = HDKEY_KEYS

def _or(value, default):
    # absent, not merely empty
    return default if value is None else value

class HDKey:
    #
    # Read-only once built. Use master_key() or extended_key() to make one,
    # or from_bytes() / from_cbor() to read one off the wire.
    #
    # Nothing here checks byte lengths: a key or chain code of the wrong
    # size is stored and encoded as given.
    #
    registry_type = HDKEY

    __slots__ = ('_is_master', '_is_private_key', '_key', '_chain_code', '_use_info',
                 '_origin', '_children', '_parent_fingerprint', '_name', '_note')

    def __init__(self, is_master=None, is_private_key=None, key=None, chain_code=None,
                 use_info=None, origin=None, children=None, parent_fingerprint=None,
                 name=None, note=None):
        self._is_master = is_master
        self._is_private_key = is_private_key
        self._key = key
        self._chain_code = chain_code
        self._use_info = use_info
        self._origin = origin
        self._children = children
        self._parent_fingerprint = parent_fingerprint
        self._name = name
        self._note = note

    @classmethod
    def master_key(cls, key: bytes, chain_code: bytes) -> "HDKey":
        return cls(is_master=True, key=key, chain_code=chain_code)

    @classmethod
    def extended_key(cls, key: bytes, is_private_key: bool = None, chain_code: bytes = None,
                     use_info: CoinInfo = None, origin: KeyPath = None,
                     children: KeyPath = None, parent_fingerprint: bytes = None,
                     name: str = None, note: str = None) -> "HDKey":
        return cls(is_master=False, is_private_key=is_private_key, key=key,
                   chain_code=chain_code, use_info=use_info, origin=origin,
                   children=children, parent_fingerprint=parent_fingerprint,
                   name=name, note=note)

    # flags: absent means False
    def is_master(self) -> bool:
        return bool(self._is_master)

    def is_private_key(self) -> bool:
        return bool(self._is_private_key)

    # flags as stored: True, False or None
    @property
    def master(self):
        return self._is_master

    @property
    def private(self):
        return self._is_private_key

    @property
    def key(self):
        return self._key

    @property
    def chain_code(self):
        return self._chain_code

    @property
    def use_info(self):
        return self._use_info

    @property
    def origin(self):
        return self._origin

    @property
    def children(self):
        return self._children

    @property
    def parent_fingerprint(self):
        return self._parent_fingerprint

    @property
    def name(self):
        return self._name

    @property
    def note(self):
        return self._note

    def _fields(self):
        return (self.is_master(), self.is_private_key(), self._key, self._chain_code,
                self._use_info, self._origin, self._children,
                self._parent_fingerprint, self._name, self._note)

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        if self.is_master():
            return '<HDKey master %s>' % B2A(self._key or b'')[0:16]
        kk = 'private' if self.is_private_key() else 'public'
        where = ('m/' + self._origin.path) if self._origin is not None else '?'
        return '<HDKey %s %s: %s>' % (kk, where, B2A(self._key or b'')[0:16])

    #
    # Encoding
    #
    def to_cbor(self):
        # Build the map. Master keys get exactly three entries, and any
        # other fields they might hold are not written.
        if self.is_master():
            assert self._key is not None and self._chain_code is not None, \
                        'master key needs key and chain code'
            return {
                K['is_master']: True,
                K['key']: self._key,
                K['chain_code']: self._chain_code,
            }

        assert self._key is not None, 'key data is required'

        rv = { K['key']: self._key }

        if self._is_private_key is not None:
            rv[K['is_private_key']] = self._is_private_key
        if self._chain_code is not None:
            rv[K['chain_code']] = self._chain_code
        if self._use_info is not None:
            rv[K['use_info']] = wrap_tagged(self._use_info)
        if self._origin is not None:
            rv[K['origin']] = wrap_tagged(self._origin)
        if self._children is not None:
            rv[K['children']] = wrap_tagged(self._children)
        if self._parent_fingerprint is not None:
            rv[K['parent_fingerprint']] = fingerprint_to_int(self._parent_fingerprint)
        if self._name is not None:
            rv[K['name']] = self._name
        if self._note is not None:
            rv[K['note']] = self._note

        return rv

    def to_bytes(self) -> bytes:
        rv = cbor_dumps(self.to_cbor())
        if VERBOSE:
            print(f">> {HDKEY.name}: {B2A(rv).upper()}")
        return rv

    #
    # Decoding
    #
    @classmethod
    def from_cbor(cls, value) -> "HDKey":
        m = expect_map(value, HDKEY.name)

        is_master = pick(m, K, 'is_master', 'bool')

        if is_master:
            # only the key material matters; everything else is ignored
            key = pick(m, K, 'key', 'bytes', required=True)
            chain_code = pick(m, K, 'chain_code', 'bytes', required=True)
            return cls.master_key(key, chain_code)

        key = pick(m, K, 'key', 'bytes', required=True)
        is_private_key = pick(m, K, 'is_private_key', 'bool')
        chain_code = pick(m, K, 'chain_code', 'bytes')

        use_info = origin = children = None
        if K['use_info'] in m:
            use_info = unwrap_tagged(CoinInfo, m[K['use_info']], 'use_info')
        if K['origin'] in m:
            origin = unwrap_tagged(KeyPath, m[K['origin']], 'origin')
        if K['children'] in m:
            children = unwrap_tagged(KeyPath, m[K['children']], 'children')

        parent_fingerprint = pick(m, K, 'parent_fingerprint', 'uint')
        if parent_fingerprint is not None:
            if parent_fingerprint > 0xffff_ffff:
                raise FieldTypeError(f'does not fit in 4 bytes: {parent_fingerprint}',
                                     'parent_fingerprint')
            parent_fingerprint = int_to_fingerprint(parent_fingerprint)

        name = pick(m, K, 'name', 'text')
        note = pick(m, K, 'note', 'text')

        # keep the flag as found: False, or None when the map left it out
        return cls(is_master=is_master, is_private_key=is_private_key, key=key,
                   chain_code=chain_code, use_info=use_info, origin=origin,
                   children=children, parent_fingerprint=parent_fingerprint,
                   name=name, note=note)

    @classmethod
    def from_bytes(cls, data: bytes) -> "HDKey":
        if VERBOSE:
            print(f"<< {HDKEY.name}: {B2A(data).upper()}")
        return cls.from_cbor(cbor_loads(data))

    #
    # BIP-32
    #
    def bip32_fields(self) -> bip32.ExtendedKeyFields:
        """
        Resolve every field of the BIP-32 payload, filling in defaults.

        Only mainnet version numbers are picked; the network in use_info
        does not change them.

        :return: version, depth, parent fingerprint, index, chain code, key
        """
        depth = 0
        index = 0

        if self.is_master():
            version = XPRV_VERSION
        else:
            version = XPRV_VERSION if self.is_private_key() else XPUB_VERSION
            if self._origin is not None and len(self._origin):
                depth = len(self._origin)
                index = self._origin.components[-1].canonical_index or 0

        return bip32.ExtendedKeyFields(
            version=version,
            depth=depth,
            parent_fingerprint=_or(self._parent_fingerprint, EMPTY_FINGERPRINT),
            index=index,
            chain_code=_or(self._chain_code, EMPTY_CHAIN_CODE),
            key=_or(self._key, EMPTY_KEY),
        )

    def bip32_key(self, version: int = None) -> str:
        """
        Render as an extended key string (xpub.../xprv...).

        :param version: version number to use instead of the default (optional)
        :return: base58-check encoded extended key
        """
        f = self.bip32_fields()
        if version is not None:
            f = f._replace(version=version)
        return bip32.extended_key(*f)

# EOF
