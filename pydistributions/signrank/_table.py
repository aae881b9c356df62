"""
Coefficient table for the Wilcoxon signed-rank distribution.

w[k] is the number of subsets of {1, ..., n} whose elements sum to k, i.e.
the coefficient of z^k in prod_{i=1}^{n} (1 + z^i). The counts are
symmetric, w[k] == w[u - k] with u = n(n+1)/2, so only w[0..c] with
c = floor(u/2) is stored.

The table is built once per sample size and reused for every density,
CDF and quantile query at that size. Each thread gets its own default
table (default_table()); a table may also be owned and shared explicitly,
in which case its lock serializes rebuild-then-read.
"""

from __future__ import annotations

import threading

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.exceptions import AllocationError


class SignRankTable:
    """
    Lazily built subset-sum counts for one sample size at a time.

    Usage:
        table = SignRankTable()
        table.count(5, 4)     # 2.0: {1, 4} and {2, 3}
        table.counts(4)       # full support 0..10
    """

    def __init__(self) -> None:
        self._w: NDArray[np.float64] | None = None
        self._allocated_n: int | None = None
        self._lock = threading.RLock()

    @property
    def allocated_n(self) -> int | None:
        """Sample size the current buffer was allocated for."""
        return self._allocated_n

    def ensure_built(self, n: int) -> None:
        """
        Make the table valid for sample size n.

        Reallocates only if n differs from the size of the current buffer,
        then fills it if it has not been filled yet.

        Raises:
            AllocationError: If the buffer cannot be allocated
        """
        with self._lock:
            if n != self._allocated_n:
                self._allocate(n)
            w = self._w
            if n >= 2 and w[0] != 1.0:
                self._build(w, n)

    def count(self, k: int, n: int) -> float:
        """Number of subsets of {1, ..., n} summing to k."""
        u = n * (n + 1) // 2
        if k < 0 or k > u:
            return 0.0
        if n <= 1:
            return 1.0
        c = u // 2
        if k > c:
            k = u - k
        with self._lock:
            self.ensure_built(n)
            return float(self._w[k])

    def counts(self, n: int) -> NDArray[np.float64]:
        """
        Subset-sum counts over the whole support 0..n(n+1)/2.

        Returns a fresh array; the lower half is copied from the table and
        the upper half is its mirror image.
        """
        u = n * (n + 1) // 2
        if n <= 1:
            return np.ones(u + 1, dtype=np.float64)
        with self._lock:
            self.ensure_built(n)
            half = self._w.copy()
        # u odd: both halves have c+1 entries; u even: w[c] is the centre
        upper = half[::-1] if u % 2 else half[-2::-1]
        return np.concatenate([half, upper])

    def _allocate(self, n: int) -> None:
        u = n * (n + 1) // 2
        length = u // 2 + 1
        try:
            w = np.zeros(length, dtype=np.float64)
        except (MemoryError, ValueError, OverflowError) as e:
            raise AllocationError(
                f"signrank allocation error: cannot allocate {length} counts for n={n}",
                n=n,
                length=length,
            ) from e
        self._w = w
        self._allocated_n = n

    @staticmethod
    def _build(w: NDArray[np.float64], n: int) -> None:
        """
        Fill w in place by multiplying in (1 + z^j) for j = 2..n.

        The update w[i] += w[i - j] must read w[i - j] from BEFORE this
        factor was applied, which a scalar loop achieves by walking i
        downward from min(j(j+1)/2, c) to j. The slice form below is the
        same descending traversal: the right-hand side is snapshotted
        before any element of the left-hand side is written.
        """
        c = len(w) - 1
        w[0] = w[1] = 1.0
        for j in range(2, n + 1):
            end = min(j * (j + 1) // 2, c)
            if end < j:
                continue
            w[j:end + 1] += w[0:end + 1 - j].copy()


_local = threading.local()


def default_table() -> SignRankTable:
    """The calling thread's table, created on first use."""
    table = getattr(_local, "table", None)
    if table is None:
        table = SignRankTable()
        _local.table = table
    return table
