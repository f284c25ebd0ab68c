"""Hash maps: a fixed array of single-slot buckets, and separate chaining."""

from dataclasses import dataclass


@dataclass
class Pair:
    """A key-value entry."""

    key: int
    val: str


class ArrayHashMap:
    """Hash map of 100 buckets, one entry per bucket.

    Colliding keys share a bucket: a later put replaces whatever entry the
    bucket held, and get or remove act on the bucket whatever key it holds.
    """

    _BUCKET_COUNT = 100

    def __init__(self):
        self._buckets = [None] * self._BUCKET_COUNT

    def _hash(self, key):
        return key % self._BUCKET_COUNT

    def get(self, key):
        """Value stored in ``key``'s bucket; KeyError when the bucket is empty."""
        pair = self._buckets[self._hash(key)]
        if pair is None:
            raise KeyError(key)
        return pair.val

    def put(self, key, val):
        """Store ``val`` under ``key``, replacing the bucket's entry."""
        self._buckets[self._hash(key)] = Pair(key, val)

    def remove(self, key):
        """Empty ``key``'s bucket."""
        self._buckets[self._hash(key)] = None

    def pairs(self):
        """Entries in bucket order."""
        return [pair for pair in self._buckets if pair is not None]

    def keys(self):
        """Keys in bucket order."""
        return [pair.key for pair in self.pairs()]

    def values(self):
        """Values in bucket order."""
        return [pair.val for pair in self.pairs()]

    def __str__(self):
        return "\n".join(f"{pair.key} -> {pair.val}" for pair in self.pairs())


class HashMapChaining:
    """Hash map resolving collisions with per-bucket lists, growing on load."""

    def __init__(self, capacity=4, load_threshold=2.0 / 3.0, extend_ratio=2):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if extend_ratio < 2:
            raise ValueError("extend_ratio must be at least 2")
        self._capacity = capacity
        self._load_threshold = load_threshold
        self._extend_ratio = extend_ratio
        self._size = 0
        self._buckets = [[] for _ in range(capacity)]

    @property
    def capacity(self):
        """Current number of buckets."""
        return self._capacity

    def _hash(self, key):
        return key % self._capacity

    def load_factor(self):
        """Entries per bucket."""
        return self._size / self._capacity

    def __len__(self):
        return self._size

    def get(self, key):
        """Value stored under ``key``; KeyError when absent."""
        for pair in self._buckets[self._hash(key)]:
            if pair.key == key:
                return pair.val
        raise KeyError(key)

    def put(self, key, val):
        """Store ``val`` under ``key``, growing the table first if it is too full."""
        if self.load_factor() > self._load_threshold:
            self._extend()
        self._insert(key, val)

    def _insert(self, key, val):
        bucket = self._buckets[self._hash(key)]
        for pair in bucket:
            if pair.key == key:
                pair.val = val
                return
        bucket.append(Pair(key, val))
        self._size += 1

    def remove(self, key):
        """Delete ``key`` if present."""
        bucket = self._buckets[self._hash(key)]
        for i, pair in enumerate(bucket):
            if pair.key == key:
                del bucket[i]
                self._size -= 1
                return

    def _extend(self):
        old_buckets = self._buckets
        self._capacity *= self._extend_ratio
        self._buckets = [[] for _ in range(self._capacity)]
        self._size = 0
        for bucket in old_buckets:
            for pair in bucket:
                self._insert(pair.key, pair.val)

    def __str__(self):
        return "\n".join(
            "[" + "".join(f"{pair.key} -> {pair.val} " for pair in bucket) + "]"
            for bucket in self._buckets
        )