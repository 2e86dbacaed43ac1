#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# crypto-keypath: a BIP-32 derivation path, plus optional source fingerprint and depth.
#
from typing import List, Optional

from .constants import KEYPATH_KEYS
from .exceptions import FieldTypeError
from .registry import KEYPATH
from .utils import HARDENED, path_component_in_range, str2path
from .utils import cbor_dumps, cbor_loads, expect_map, pick
from .utils import fingerprint_to_int, int_to_fingerprint


class PathComponent:
    """
    One step of a derivation path. An index of None is a wildcard ("*").
    """
    __slots__ = ('_index', '_hardened')

    def __init__(self, index: Optional[int], hardened: bool):
        if index is not None and not path_component_in_range(index):
            raise ValueError(f"Path component out of range: {index}")
        self._index = index
        self._hardened = bool(hardened)

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def hardened(self) -> bool:
        return self._hardened

    def is_wildcard(self) -> bool:
        return self._index is None

    @property
    def canonical_index(self) -> Optional[int]:
        """
        Index as it appears in BIP-32 serialization: high bit set when hardened.

        :return: index, or None for a wildcard
        """
        if self._index is None:
            return None
        return (self._index | HARDENED) if self._hardened else self._index

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return self._index == other._index and self._hardened == other._hardened

    def __hash__(self):
        return hash((self._index, self._hardened))

    def __str__(self):
        rv = '*' if self._index is None else str(self._index)
        return rv + ("'" if self._hardened else '')

    def __repr__(self):
        return '<PathComponent %s>' % self


class KeyPath:
    """
    Derivation path, as carried inside a crypto-hdkey (origin or children).
    """
    registry_type = KEYPATH

    __slots__ = ('_components', '_source_fingerprint', '_depth')

    def __init__(self, components: List[PathComponent],
                 source_fingerprint: bytes = None, depth: int = None):
        """
        :param components: path steps, first to last
        :param source_fingerprint: fingerprint of the key the path starts at (optional)
        :param depth: declared depth of that key (optional)
        """
        self._components = tuple(components)
        self._source_fingerprint = source_fingerprint
        self._depth = depth

    @classmethod
    def from_path(cls, path: str, source_fingerprint: bytes = None,
                  depth: int = None) -> "KeyPath":
        """
        Parse the text form, e.g. "m/44'/1'/1'/0/1" or "84h/0h/0h/*".

        :param path: derivation path in text
        :return: key path
        """
        comps = [PathComponent(idx, hard) for idx, hard in str2path(path)]
        return cls(comps, source_fingerprint=source_fingerprint, depth=depth)

    @property
    def components(self) -> tuple:
        return self._components

    @property
    def source_fingerprint(self) -> Optional[bytes]:
        return self._source_fingerprint

    @property
    def depth(self) -> Optional[int]:
        return self._depth

    @property
    def path(self) -> str:
        # "44'/1'/1'/0/1" form, no leading m
        return '/'.join(str(c) for c in self._components)

    def __len__(self):
        return len(self._components)

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return self._components == other._components and \
            self._source_fingerprint == other._source_fingerprint and \
            self._depth == other._depth

    def __hash__(self):
        return hash((self._components, self._source_fingerprint, self._depth))

    def __repr__(self):
        return '<KeyPath %s>' % (self.path or '(empty)')

    def to_cbor(self):
        flat = []
        for c in self._components:
            # wildcard is an empty array in place of the index
            flat.append([] if c.index is None else c.index)
            flat.append(c.hardened)

        rv = { KEYPATH_KEYS['components']: flat }
        if self._source_fingerprint is not None:
            rv[KEYPATH_KEYS['source_fingerprint']] = fingerprint_to_int(self._source_fingerprint)
        if self._depth is not None:
            rv[KEYPATH_KEYS['depth']] = self._depth
        return rv

    def to_bytes(self):
        return cbor_dumps(self.to_cbor())

    @classmethod
    def from_cbor(cls, value):
        m = expect_map(value, KEYPATH.name)

        flat = pick(m, KEYPATH_KEYS, 'components', 'array', required=True, item=KEYPATH.name)
        if len(flat) % 2:
            raise FieldTypeError('expected (index, hardened) pairs', 'components')

        comps = []
        for idx, hard in zip(flat[0::2], flat[1::2]):
            if not isinstance(hard, bool):
                raise FieldTypeError(f'hardened flag must be bool, got {hard!r}', 'components')

            if isinstance(idx, (list, tuple)):
                if idx:
                    # [low, high] pairs
                    raise FieldTypeError('child index ranges are not supported', 'components')
                idx = None
            elif isinstance(idx, bool) or not isinstance(idx, int) \
                    or not path_component_in_range(idx):
                raise FieldTypeError(f'bad child index: {idx!r}', 'components')

            comps.append(PathComponent(idx, hard))

        fp = pick(m, KEYPATH_KEYS, 'source_fingerprint', 'uint', item=KEYPATH.name)
        if fp is not None:
            if fp > 0xffff_ffff:
                raise FieldTypeError(f'fingerprint too big: {fp}', 'source_fingerprint')
            fp = int_to_fingerprint(fp)

        depth = pick(m, KEYPATH_KEYS, 'depth', 'uint', item=KEYPATH.name)
        if depth is not None and depth > 255:
            raise FieldTypeError(f'depth too big: {depth}', 'depth')

        return cls(comps, source_fingerprint=fp, depth=depth)

    @classmethod
    def from_bytes(cls, data):
        return cls.from_cbor(cbor_loads(data))

# EOF
