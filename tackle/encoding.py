from __future__ import annotations
import base64
import json
import numpy as np
from .types import *
from .random import generator

_UUID_TEMPLATE = 'xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx'


def _canonical(value: Any) -> Any:
    """normalise a value so equal structures always serialise identically"""
    kind = kind_of(value)
    if kind in (Kind.NULL, Kind.BOOLEAN, Kind.NUMBER, Kind.STRING):
        return value
    if kind is Kind.DATE:
        return value.isoformat()
    if kind is Kind.ARRAY:
        return [_canonical(item) for item in value]
    if isinstance(value, Mapping):
        return {str(k): _canonical(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        # sets have no order of their own, so order members by their serialised form
        return sorted((_canonical(item) for item in value), key=_dumps)
    return str(value)


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def canonical_json(value: Any) -> str:
    """compact json with sorted keys. tuples and sets become lists, dates iso strings."""
    return _dumps(_canonical(value))


def hash_code(value: Any) -> int:
    """
    deterministic signed 32-bit hash of the canonical json of value.
    java-style: h = h * 31 + unit over the utf-16 code units. not cryptographic.
    """
    units = np.frombuffer(canonical_json(value).encode('utf-16-le'), dtype='<u2')
    h = 0
    for unit in units.tolist():
        h = (h * 31 + unit) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def base64_encode(value: str) -> str:
    """base64 of the utf-8 bytes of value"""
    return base64.b64encode(value.encode('utf-8')).decode('ascii')


def base64_decode(value: str) -> str:
    return base64.b64decode(value).decode('utf-8')


def generate_uuid() -> str:
    """random version-4 style identifier from the shared numpy generator"""
    nibbles = iter(generator().integers(0, 16, size=_UUID_TEMPLATE.count('x') + 1).tolist())
    chars = []
    for c in _UUID_TEMPLATE:
        if c == 'x':
            chars.append(format(next(nibbles), 'x'))
        elif c == 'y':
            chars.append(format((next(nibbles) & 0x3) | 0x8, 'x'))
        else:
            chars.append(c)
    return ''.join(chars)
