# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
import cbor2
from io import BytesIO
from collections.abc import Mapping
from binascii import b2a_hex, a2b_hex
from .exceptions import MalformedCBORError, MissingFieldError, FieldTypeError
from .exceptions import UnexpectedTagError, NestedDecodeError, URDecodeError

# show bytes as hex in a string
B2A = lambda x: b2a_hex(x).decode('ascii')

def A2B(s):
    # hex string to bytes, tolerant of whitespace and 0x prefix
    s = ''.join(s.split())
    if s[0:2].lower() == '0x':
        s = s[2:]
    return a2b_hex(s)

# CBOR in and out
# - output is always canonical: map keys sorted, shortest ints
def cbor_dumps(value):
    return cbor2.dumps(value, canonical=True)

def cbor_loads(data):
    # exactly one item; anything after it is an error
    # - read_size=1 so the decoder never reads past the item
    fp = BytesIO(bytes(data))
    try:
        rv = cbor2.CBORDecoder(fp, read_size=1).decode()
    except cbor2.CBORDecodeError as exc:
        raise MalformedCBORError(f'not valid CBOR: {exc}') from exc

    extra = fp.read()
    if extra:
        raise MalformedCBORError(f'{len(extra)} bytes of trailing data after CBOR item')

    return rv

def expect_map(value, item):
    # registry items are always a CBOR map at top level
    # - maps nested inside tags may come back as frozendict
    if not isinstance(value, Mapping):
        raise MalformedCBORError(f'{item} must be a CBOR map, got {type(value).__name__}')
    return value

# type predicates for map values
# - python's bool is an int, so ints must exclude bools explicitly
_KINDS = {
    'bool': lambda v: isinstance(v, bool),
    'bytes': lambda v: isinstance(v, bytes),
    'text': lambda v: isinstance(v, str),
    'uint': lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 0,
    'array': lambda v: isinstance(v, (list, tuple)),
}

def pick(mapping, keys, field, kind, required=False, item='crypto-hdkey'):
    # Lookup one field of a decoded registry map, checking its type.
    # - returns None when absent and not required
    k = keys[field]
    if k not in mapping:
        if required:
            raise MissingFieldError(field, item)
        return None

    value = mapping[k]
    if not _KINDS[kind](value):
        raise FieldTypeError(f'expected {kind}, got {type(value).__name__}', field)

    return value

# Tagged sub-values. Anything with a "registry_type" (having .tag), a to_cbor()
# and a from_cbor() classmethod can be nested this way.
def wrap_tagged(item):
    return cbor2.CBORTag(item.registry_type.tag, item.to_cbor())

def unwrap_tagged(cls, value, field):
    if not isinstance(value, cbor2.CBORTag):
        raise FieldTypeError(f'expected tagged {cls.registry_type.name}, got {type(value).__name__}', field)

    if value.tag != cls.registry_type.tag:
        raise UnexpectedTagError(field, cls.registry_type.tag, value.tag)

    try:
        return cls.from_cbor(value.value)
    except URDecodeError as exc:
        raise NestedDecodeError(field, exc) from exc


# high bit set in BE32 indicating hardened BIP-32 path component
HARDENED = 0x8000_0000

def path_component_in_range(num: int) -> bool:
    # cannot be less than 0
    # cannot be more than (2 ** 31) - 1
    if 0 <= num < HARDENED:
        return True
    return False

def str2path(path):
    # normalize notation and return list of (index, hardened) pairs
    # - index is None for wildcard "*"
    rv = []

    for i in path.split('/'):
        if i == 'm':
            continue
        if not i:
            # trailing or duplicated slashes
            continue

        orig = i
        hardened = i[-1] in "'phHP"
        if hardened:
            if len(i) < 2:
                raise ValueError(f"Malformed bip32 path component: {i}")
            i = i[:-1]

        if i == '*':
            rv.append((None, hardened))
            continue

        num = int(i, 0)
        if not path_component_in_range(num):
            kind = 'Hardened' if hardened else 'Non-hardened'
            raise ValueError(f"{kind} path component out of range: {orig}")

        rv.append((num, hardened))

    return rv

def fingerprint_to_int(fp: bytes) -> int:
    # 4-byte fingerprint, read as big-endian number for CBOR
    return int.from_bytes(fp, 'big')

def int_to_fingerprint(n: int) -> bytes:
    return n.to_bytes(4, 'big')

# EOF
