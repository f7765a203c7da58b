""" Module for a minimal ordered associative array with linear-time lookup. """

from typing import Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")  # Key type. Keys are compared with ==, never hashed.
V = TypeVar("V")  # Value type.


class NullKeyError(ValueError):
    """ Raised when None is given as a key for insertion. """


class KeyNotFoundError(KeyError):
    """ Raised when a lookup key is not in the array. """

    def __str__(self) -> str:
        # KeyError quotes its argument with repr(). We want the plain message.
        return str(self.args[0]) if self.args else ""


class KVPair(Generic[K, V]):
    """ Mutable key/value record. The key never changes once the pair is stored. """

    __slots__ = ["key", "val"]

    def __init__(self, key:K, val:V) -> None:
        self.key = key
        self.val = val

    def __repr__(self) -> str:
        return f"{self.key}={self.val}"


class AssociativeArray(Generic[K, V]):
    """
    An ordered mapping of keys to values backed by a plain array of pairs.
    Keys are kept in the order they were first inserted, and lookup is a straight linear scan.
    Since there is no hashing, keys need only support equality comparison.

    The backing array starts out with DEFAULT_CAPACITY slots and doubles whenever it fills up.
    Unused slots hold None. This is meant for small collections (tens of items, not millions).

    +-------------------+-------------------+
    |     Operation     | AssociativeArray  |
    +-------------------+-------------------+
    | Lookup            | O(n)              |
    | Insert (new key)  | O(n) (amortized)  |
    | Update            | O(n)              |
    | Delete            | O(n)              |
    | Index by position | O(1)              |
    +-------------------+-------------------+
    """

    DEFAULT_CAPACITY = 16

    def __init__(self, capacity:int=DEFAULT_CAPACITY) -> None:
        self._pairs: List[Optional[KVPair[K, V]]] = [None] * max(capacity, 1)  # Pair slots; live ones come first.
        self._size = 0  # Number of live key/value pairs.

    def _find(self, key:K) -> int:
        """ Return the index of the pair with <key>, or -1 if there isn't one. """
        for i in range(self._size):
            if self._pairs[i].key == key:
                return i
        return -1

    def _expand(self) -> None:
        """ Double the number of slots in the backing array. Live pairs keep their positions. """
        self._pairs += [None] * len(self._pairs)

    def put(self, key:K, value:V) -> None:
        """ Add a new key/value pair to the end, or update the value of an existing key in place. """
        if key is None:
            raise NullKeyError("Null key provided.")
        i = self._find(key)
        if i >= 0:
            self._pairs[i].val = value
            return
        if self._size >= len(self._pairs):
            self._expand()
        self._pairs[self._size] = KVPair(key, value)
        self._size += 1

    def get(self, key:K) -> V:
        """ Return the value associated with <key>. """
        i = self._find(key)
        if i < 0:
            raise KeyNotFoundError(f"Key not found: {key}")
        return self._pairs[i].val

    def has_key(self, key:K) -> bool:
        """ Return True if <key> appears in the array. None never does. """
        if key is None:
            return False
        return self._find(key) >= 0

    def get_key(self, index:int) -> K:
        """ Return the key at ordinal position <index> in insertion order. """
        if index < 0 or index >= self._size:
            raise IndexError(f"Index out of bounds: {index}")
        return self._pairs[index].key

    def remove(self, key:K) -> None:
        """ Remove the pair with <key> if it exists. Later pairs shift left by one to close the gap. """
        i = self._find(key)
        if i < 0:
            return
        last = self._size - 1
        self._pairs[i:last] = self._pairs[i + 1:self._size]
        self._pairs[last] = None
        self._size = last

    def size(self) -> int:
        return self._size

    def keys(self) -> List[K]:
        """ Return a list of every key in insertion order. """
        return [self._pairs[i].key for i in range(self._size)]

    def copy(self) -> "AssociativeArray[K, V]":
        """ Make a shallow copy. Pairs are new records, but the values themselves are shared. """
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._pairs = [KVPair(p.key, p.val) if p is not None else None for p in self._pairs]
        return other

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        """ Iterate over keys in insertion order. """
        return iter(self.keys())

    def __str__(self) -> str:
        return "[" + ", ".join(map(repr, self._pairs[:self._size])) + "]"
