#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Registry types: a UR type name and the CBOR tag used when nested.
#
from collections import namedtuple
from .constants import CRYPTO_HDKEY, CRYPTO_KEYPATH, CRYPTO_COININFO

RegistryType = namedtuple('RegistryType', ['name', 'tag'])

HDKEY = RegistryType(*CRYPTO_HDKEY)
KEYPATH = RegistryType(*CRYPTO_KEYPATH)
COININFO = RegistryType(*CRYPTO_COININFO)

# lookup by tag number or by UR type name
KNOWN_TYPES = { rt.tag: rt for rt in (HDKEY, KEYPATH, COININFO) }
KNOWN_TYPES.update({ rt.name: rt for rt in (HDKEY, KEYPATH, COININFO) })

def lookup(tag_or_name):
    # returns None if not a type we know about
    return KNOWN_TYPES.get(tag_or_name)

# EOF
