"""
Deterministic 32-bit hash codes for building composite keys.

Every function here is pure and reproduces the same value on every
interpreter and platform: arithmetic wraps around at 32 bits exactly like
two's-complement machine integers, so results never depend on Python's
arbitrary-precision ints or on ``PYTHONHASHSEED``.

Example:
    from pyhashkey import hash_tuple

    def hash_edge(edge):
        return hash_tuple(edge.source, edge.target, edge.kind)
"""

import math
import struct
from typing import Any, Union


FNV_OFFSET_BASIS = 0x811c9dc5
FNV_PRIME = 0x01000193
CHAIN_MULTIPLIER = 31

UINT32_MASK = 0xFFFFFFFF
INT31_MASK = 0x7FFFFFFF
SIGN_BIT = 0x80000000
BIT30_MASK = 0x40000000
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF

HASH_UNDEFINED = 1
HASH_NULL = 0
HASH_FALSE = 2
HASH_TRUE = 3

# IEEE-754 double split into (low word, high word)
_DOUBLE = struct.Struct('<d')
_WORDS = struct.Struct('<II')


class _MissingType:
    """Marker for an absent or uninitialized value (distinct from ``None``)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'


MISSING = _MissingType()


def _to_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    value &= UINT32_MASK
    return value - 0x100000000 if value & SIGN_BIT else value


def _fnv1a_32(text: str, seed: int = FNV_OFFSET_BASIS) -> int:
    data = text.encode('utf-16-le', 'surrogatepass')
    units = struct.unpack('<%dH' % (len(data) // 2), data)

    hval = seed & INT31_MASK
    for unit in units:
        hval ^= unit
        # hval * FNV_PRIME, spelled as shifts
        hval = (hval + (hval << 1) + (hval << 4) + (hval << 7)
                + (hval << 8) + (hval << 24)) & UINT32_MASK
    return hval


def chain_hash(hash_code: int, added: int) -> int:
    """Fold ``added`` into a running hash: ``hash_code * 31 + added`` as int32.

    Not commutative, so the order in which fields are folded is part of the
    resulting hash.
    """
    return _to_int32(hash_code * CHAIN_MULTIPLIER + added)


def drop_highest_non_sign_bit(i32: int) -> int:
    """Clear bit 30 of a signed 32-bit int, copying the sign bit into it."""
    bits = i32 & UINT32_MASK
    return _to_int32(((bits >> 1) & BIT30_MASK) | (bits & ~BIT30_MASK))


def hash_string(text: str) -> int:
    """
    32-bit FNV-1a over the UTF-16 code units of ``text``.

    Returns an unsigned 32-bit integer, e.g. ``hash_string('') == 18652613``.
    """
    return _fnv1a_32(text)


def hash_number(num: Union[int, float]) -> int:
    """
    Hash a number.

    Integers representable as signed 32-bit values hash to themselves.
    Anything else is hashed from its IEEE-754 double bit pattern, folding
    the low 32-bit word first and the high word second.

    Larger ints go through their nearest double; ints beyond double range
    saturate to signed infinity.
    """
    if isinstance(num, int):
        if INT32_MIN <= num <= INT32_MAX:
            return int(num)
        try:
            num = float(num)
        except OverflowError:
            num = math.inf if num > 0 else -math.inf
    else:
        num = float(num)
        if num.is_integer() and INT32_MIN <= num <= INT32_MAX:
            return int(num)

    low, high = _WORDS.unpack(_DOUBLE.pack(num))
    return chain_hash(low, high)


def hash_big_int(value: int) -> int:
    """Absolute value modulo 2**32; the sign is discarded."""
    return abs(int(value)) % 0x100000000


def hash_value(value: Any) -> int:
    """
    Hash a primitive value by dispatching on its runtime kind.

    ``str``, ``int``, ``float`` and ``bool`` get content hashes, ints outside
    the 32-bit range are treated as big integers, ``MISSING`` hashes to 1 and
    ``None`` or any other object hashes to 0.
    """
    if isinstance(value, str):
        return hash_string(value)
    if isinstance(value, bool):
        return HASH_TRUE if value else HASH_FALSE
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return hash_number(value)
        return hash_big_int(value)
    if isinstance(value, float):
        return hash_number(value)
    if value is MISSING:
        return HASH_UNDEFINED
    return HASH_NULL


def hash_tuple(*values: Any) -> int:
    """
    Hash a sequence of primitive values.

    Seeded with the element count, then each element's ``hash_value`` is
    chained in order, so both length and order affect the result.
    """
    hash_code = len(values)
    for value in values:
        hash_code = chain_hash(hash_code, hash_value(value))
    return hash_code
