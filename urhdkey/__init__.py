#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#

__version__ = '0.1.0'

__all__ = [ 'hd_key', 'coin_info', 'key_path', 'bip32', 'registry', 'exceptions', 'constants', 'utils' ]

# the registry item itself
from urhdkey.hd_key import HDKey

# collaborators embedded inside it
from urhdkey.coin_info import CoinInfo
from urhdkey.key_path import KeyPath, PathComponent
