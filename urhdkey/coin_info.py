#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# crypto-coininfo: which coin and network a key is meant for.
#
from .constants import COININFO_KEYS, COIN_TYPE_BTC, NETWORK_MAINNET, NETWORK_TESTNET
from .exceptions import FieldTypeError
from .registry import COININFO
from .utils import cbor_dumps, cbor_loads, expect_map, pick

KNOWN_NETWORKS = { NETWORK_MAINNET: 'mainnet', NETWORK_TESTNET: 'testnet' }

class CoinInfo:
    #
    # Either value may be left out, and then the default (bitcoin, mainnet) applies.
    # We remember what was given, so re-encoding is byte-identical.
    #
    registry_type = COININFO

    __slots__ = ('_coin_type', '_network')

    def __init__(self, coin_type=None, network=None):
        self._coin_type = coin_type
        self._network = network

    @property
    def coin_type(self) -> int:
        return COIN_TYPE_BTC if self._coin_type is None else self._coin_type

    @property
    def network(self) -> int:
        return NETWORK_MAINNET if self._network is None else self._network

    def is_testnet(self) -> bool:
        return self.network == NETWORK_TESTNET

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return self.coin_type == other.coin_type and self.network == other.network

    def __hash__(self):
        return hash((self.coin_type, self.network))

    def __repr__(self):
        return '<CoinInfo type=%d %s>' % (self.coin_type,
                                           KNOWN_NETWORKS.get(self.network, self.network))

    def to_cbor(self):
        rv = {}
        if self._coin_type is not None:
            rv[COININFO_KEYS['coin_type']] = self._coin_type
        if self._network is not None:
            rv[COININFO_KEYS['network']] = self._network
        return rv

    def to_bytes(self):
        return cbor_dumps(self.to_cbor())

    @classmethod
    def from_cbor(cls, value):
        m = expect_map(value, COININFO.name)

        coin_type = pick(m, COININFO_KEYS, 'coin_type', 'uint', item=COININFO.name)
        network = pick(m, COININFO_KEYS, 'network', 'uint', item=COININFO.name)
        if network is not None and network not in KNOWN_NETWORKS:
            raise FieldTypeError(f'unknown network: {network}', 'network')

        return cls(coin_type=coin_type, network=network)

    @classmethod
    def from_bytes(cls, data):
        return cls.from_cbor(cbor_loads(data))

# EOF
