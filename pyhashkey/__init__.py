"""
pyhashkey - hash map and hash set for composite keys.

Containers take caller-supplied hash and equality functions, and the hash
utilities build deterministic 32-bit hash codes for those functions.

Example:
    from pyhashkey import HashSet, hash_tuple

    points = HashSet(lambda p: hash_tuple(*p), lambda a, b: list(a) == list(b))
    points.add([1, 2]).add([1, 2])
    assert len(points) == 1
"""

import logging

from .hash_code import (
    MISSING,
    chain_hash,
    drop_highest_non_sign_bit,
    hash_big_int,
    hash_number,
    hash_string,
    hash_tuple,
    hash_value,
)
from .hash_map import HashMap, HashSet

__version__ = '1.0.0'

__all__ = [
    'HashMap',
    'HashSet',
    'MISSING',
    'chain_hash',
    'drop_highest_non_sign_bit',
    'hash_big_int',
    'hash_number',
    'hash_string',
    'hash_tuple',
    'hash_value',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
