import numpy as np
from collections import Counter


# --- Vector Math ---

def _overlap(v1, v2):
    """Return both vectors as float arrays cut to their common length."""
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    if a.ndim != 1 or b.ndim != 1:
        raise ValueError(f"Expected 1-D vectors, got shapes {a.shape} and {b.shape}.")
    n = min(a.shape[0], b.shape[0])
    return a[:n], b[:n]

def dot_product(v1, v2):
    """
    Dot product of two vectors.
    Vectors of different length are paired up like zip(): only the
    overlapping prefix contributes.
    """
    a, b = _overlap(v1, v2)
    return float(np.dot(a, b))

def squared_distance(v1, v2):
    """Squared norm of the difference v1 - v2 (no square root taken)."""
    a, b = _overlap(v1, v2)
    delta = a - b
    return dot_product(delta, delta)

def euclidean_distance(v1, v2):
    return float(np.sqrt(squared_distance(v1, v2)))


# --- Frequency Counter ---

class FrequencyCounter:
    """
    Counts occurrences of hashable items.

    Items are remembered in the order they were first inserted, and that
    order decides ties in most_frequent(): the earliest item to reach the
    top count wins.
    """
    def __init__(self, items=None):
        self._counts = Counter()
        if items is not None:
            for item in items:
                self.insert(item)

    @classmethod
    def from_iterable(cls, items):
        """Build a counter by inserting every element of items, in order."""
        return cls(items)

    def insert(self, item):
        self._counts[item] += 1

    def get(self, item):
        """Count for item, or None if it was never inserted (never 0)."""
        if item not in self._counts:
            return None
        return self._counts[item]

    def most_frequent(self):
        """
        Return (item, count) for the most frequent item, or None when empty.
        Scans in insertion order and only replaces the current best on a
        strictly greater count.
        """
        if not self._counts:
            return None

        best_item, best_count = None, 0
        for item, count in self._counts.items():
            if count > best_count:
                best_item, best_count = item, count
        return best_item, best_count

    def __iter__(self):
        return iter(self._counts.items())

    def __len__(self):
        return len(self._counts)

    def __contains__(self, item):
        return item in self._counts

    def __repr__(self):
        return f"FrequencyCounter({dict(self._counts)!r})"
