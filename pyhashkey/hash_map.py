"""
Hash map and hash set keyed by caller-defined hash and equality functions.

Python's ``dict`` and ``set`` key on ``__hash__``/``__eq__`` of the key
itself.  ``HashMap`` and ``HashSet`` instead take a ``hash_key`` function and
an ``equal_keys`` predicate at construction, so records, lists or foreign
objects can be used as composite keys without wrapping them.

Keys sharing a hash code are chained in a bucket and told apart by
``equal_keys``.  Iteration follows the order in which logically distinct keys
were first inserted; updating an existing key keeps both its position and the
key instance stored first.

Neither container is thread-safe.  Mutating a container while iterating over
it is unsupported and its outcome is unspecified.  If ``hash_key`` is not
deterministic or ``equal_keys`` is not an equivalence relation, lookups give
unspecified results.

Example:
    from dataclasses import dataclass
    from pyhashkey import HashMap, hash_tuple

    @dataclass(eq=False)
    class Edge:
        source: str
        target: str

    weights = HashMap(
        lambda e: hash_tuple(e.source, e.target),
        lambda a, b: a.source == b.source and a.target == b.target,
    )
    weights.set(Edge('A', 'B'), 10)
    weights.set(Edge('A', 'B'), 20)  # updates the existing entry
    assert weights.get(Edge('A', 'B')) == 20
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple


logger = logging.getLogger(__name__)

HashKey = Callable[[Any], int]
EqualKeys = Callable[[Any, Any], bool]

_NOT_FOUND = object()


def _check_functions(hash_key: HashKey, equal_keys: EqualKeys) -> None:
    if not callable(hash_key):
        raise TypeError(f'hash_key must be callable, got {type(hash_key).__name__}')
    if not callable(equal_keys):
        raise TypeError(f'equal_keys must be callable, got {type(equal_keys).__name__}')


class HashMap:
    """
    A mutable mapping with injected key hashing and equality.

    Internally two tables are kept in step:

    - ``_buckets`` maps a hash code to the list of stored keys with that
      code.  Empty buckets are removed immediately.
    - ``_entries`` maps ``id(stored_key)`` to ``(stored_key, value)`` in
      insertion order.  Re-assigning an existing id keeps its position.
    """

    __slots__ = ('_hash_key', '_equal_keys', '_buckets', '_entries')

    def __init__(self, hash_key: HashKey, equal_keys: EqualKeys,
                 entries: Optional[Iterable[Tuple[Any, Any]]] = None):
        _check_functions(hash_key, equal_keys)
        self._hash_key = hash_key
        self._equal_keys = equal_keys
        self._buckets: Dict[int, List[Any]] = {}
        self._entries: Dict[int, Tuple[Any, Any]] = {}
        if entries is not None:
            self.update(entries)

    @property
    def hash_key(self) -> HashKey:
        return self._hash_key

    @property
    def equal_keys(self) -> EqualKeys:
        return self._equal_keys

    @property
    def size(self) -> int:
        """Number of distinct keys stored."""
        return len(self._entries)

    def _find(self, key: Any) -> Any:
        """Return the stored key equal to ``key``, or ``_NOT_FOUND``."""
        bucket = self._buckets.get(self._hash_key(key))
        if bucket is not None:
            equal_keys = self._equal_keys
            for stored_key in bucket:
                if equal_keys(stored_key, key):
                    return stored_key
        return _NOT_FOUND

    def has(self, key: Any) -> bool:
        """Check whether a key equal to ``key`` is stored."""
        return self._find(key) is not _NOT_FOUND

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the value for ``key``, or ``default`` if it is absent."""
        stored_key = self._find(key)
        if stored_key is _NOT_FOUND:
            return default
        return self._entries[id(stored_key)][1]

    def set(self, key: Any, value: Any) -> 'HashMap':
        """
        Associate ``key`` with ``value`` and return the map itself.

        If an equal key is already stored, only its value changes; the
        stored key instance and its iteration position are kept.
        """
        hash_code = self._hash_key(key)
        bucket = self._buckets.get(hash_code)
        if bucket is None:
            self._buckets[hash_code] = [key]
            self._entries[id(key)] = (key, value)
            return self

        equal_keys = self._equal_keys
        for stored_key in bucket:
            if equal_keys(stored_key, key):
                self._entries[id(stored_key)] = (stored_key, value)
                return self

        logger.debug('Hash collision on %r, bucket grows to %d keys',
                     hash_code, len(bucket) + 1)
        bucket.append(key)
        self._entries[id(key)] = (key, value)
        return self

    def delete(self, key: Any) -> bool:
        """Remove the entry for ``key``.  Returns whether one was removed."""
        hash_code = self._hash_key(key)
        bucket = self._buckets.get(hash_code)
        if bucket is None:
            return False

        equal_keys = self._equal_keys
        for i, stored_key in enumerate(bucket):
            if equal_keys(stored_key, key):
                del bucket[i]
                del self._entries[id(stored_key)]
                if not bucket:
                    del self._buckets[hash_code]
                return True
        return False

    def pop(self, key: Any, default: Any = _NOT_FOUND) -> Any:
        """Remove ``key`` and return its value.  Raises KeyError if absent and no default."""
        stored_key = self._find(key)
        if stored_key is _NOT_FOUND:
            if default is _NOT_FOUND:
                raise KeyError(key)
            return default
        value = self._entries[id(stored_key)][1]
        self.delete(stored_key)
        return value

    def update(self, entries: Any) -> 'HashMap':
        """Set every (key, value) pair from a mapping or iterable of pairs."""
        if hasattr(entries, 'items'):
            entries = entries.items()
        for key, value in entries:
            self.set(key, value)
        return self

    def clear(self) -> None:
        """Remove all entries."""
        logger.debug('Clearing %s with %d entries', type(self).__name__, len(self._entries))
        self._buckets.clear()
        self._entries.clear()

    def clone(self) -> 'HashMap':
        """
        Create an independent copy with the same hash and equality functions.

        Entries are copied eagerly in iteration order; keys and values
        themselves are shared, not copied.
        """
        logger.debug('Cloning %s with %d entries', type(self).__name__, len(self._entries))
        clone = HashMap(self._hash_key, self._equal_keys)
        clone._buckets = {h: bucket[:] for h, bucket in self._buckets.items()}
        clone._entries = dict(self._entries)
        return clone

    copy = clone

    def __copy__(self) -> 'HashMap':
        return self.clone()

    def for_each(self, callback: Callable[[Any, Any, 'HashMap'], Any]) -> None:
        """Call ``callback(value, key, map)`` for every entry in order."""
        for key, value in self.items():
            callback(value, key, self)

    def keys(self) -> Iterator[Any]:
        """Iterate over stored keys in insertion order."""
        for key, _ in self._entries.values():
            yield key

    def values(self) -> Iterator[Any]:
        """Iterate over values in insertion order."""
        for _, value in self._entries.values():
            yield value

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, value) pairs in insertion order."""
        yield from self._entries.values()

    entries = items

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not _NOT_FOUND

    def __getitem__(self, key: Any) -> Any:
        """Get item using bracket notation.  Raises KeyError if not found."""
        result = self.get(key, _NOT_FOUND)
        if result is _NOT_FOUND:
            raise KeyError(key)
        return result

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __eq__(self, other) -> bool:
        """Same size, and every key maps to an equal value in ``other``."""
        if not isinstance(other, HashMap):
            return NotImplemented

        if len(self) != len(other):
            return False

        for key, value in self.items():
            other_value = other.get(key, _NOT_FOUND)
            if other_value is _NOT_FOUND or other_value != value:
                return False

        return True

    __hash__ = None

    def __repr__(self) -> str:
        items = ', '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'{type(self).__name__}({{{items}}})'


class HashSet:
    """
    A mutable set with injected key hashing and equality.

    Backed by a ``HashMap`` whose values are ignored.
    """

    __slots__ = ('_map',)

    def __init__(self, hash_key: HashKey, equal_keys: EqualKeys,
                 items: Optional[Iterable[Any]] = None):
        self._map = HashMap(hash_key, equal_keys)
        if items is not None:
            self.update(items)

    @property
    def hash_key(self) -> HashKey:
        return self._map.hash_key

    @property
    def equal_keys(self) -> EqualKeys:
        return self._map.equal_keys

    @property
    def size(self) -> int:
        return len(self._map)

    def has(self, key: Any) -> bool:
        return self._map.has(key)

    def add(self, key: Any) -> 'HashSet':
        """Add ``key`` and return the set itself.  An equal stored key is kept."""
        self._map.set(key, True)
        return self

    def delete(self, key: Any) -> bool:
        return self._map.delete(key)

    def discard(self, key: Any) -> None:
        self._map.delete(key)

    def update(self, items: Iterable[Any]) -> 'HashSet':
        for item in items:
            self.add(item)
        return self

    def clear(self) -> None:
        self._map.clear()

    def clone(self) -> 'HashSet':
        clone = HashSet(self.hash_key, self.equal_keys)
        clone._map = self._map.clone()
        return clone

    copy = clone

    def __copy__(self) -> 'HashSet':
        return self.clone()

    def for_each(self, callback: Callable[[Any, Any, 'HashSet'], Any]) -> None:
        """Call ``callback(key, key, set)`` for every key in order."""
        for key in self._map.keys():
            callback(key, key, self)

    def keys(self) -> Iterator[Any]:
        return self._map.keys()

    def values(self) -> Iterator[Any]:
        return self._map.keys()

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, key) pairs, mirroring the map's entry shape."""
        for key in self._map.keys():
            yield (key, key)

    def __iter__(self) -> Iterator[Any]:
        return self._map.keys()

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: Any) -> bool:
        return self._map.has(key)

    # Set algebra.  Results use this set's hash and equality functions and
    # keep left-to-right insertion order.

    def union(self, *others: Iterable[Any]) -> 'HashSet':
        result = self.clone()
        for other in others:
            result.update(other)
        return result

    def intersection(self, other: Iterable[Any]) -> 'HashSet':
        other = self._coerce(other)
        return HashSet(self.hash_key, self.equal_keys,
                       (key for key in self if key in other))

    def difference(self, other: Iterable[Any]) -> 'HashSet':
        other = self._coerce(other)
        return HashSet(self.hash_key, self.equal_keys,
                       (key for key in self if key not in other))

    def symmetric_difference(self, other: Iterable[Any]) -> 'HashSet':
        other = self._coerce(other)
        result = self.difference(other)
        result.update(key for key in other if key not in self)
        return result

    def issubset(self, other: Iterable[Any]) -> bool:
        other = self._coerce(other)
        return len(self) <= len(other) and all(key in other for key in self)

    def issuperset(self, other: Iterable[Any]) -> bool:
        return all(key in self for key in other)

    def isdisjoint(self, other: Iterable[Any]) -> bool:
        return not any(key in self for key in other)

    def _coerce(self, other: Iterable[Any]) -> 'HashSet':
        if isinstance(other, HashSet):
            return other
        return HashSet(self.hash_key, self.equal_keys, other)

    def __or__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other):
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.issuperset(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return len(self) == len(other) and self.issubset(other)

    __hash__ = None

    def __repr__(self) -> str:
        items = ', '.join(repr(k) for k in self)
        return f'{type(self).__name__}({{{items}}})'
