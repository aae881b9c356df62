"""
Tests for SignRankTable: subset-sum counting and cache behaviour.
"""

import itertools
import threading

import numpy as np
import pytest

from pydistributions.core.exceptions import AllocationError
from pydistributions.signrank import SignRankTable, default_table


def _brute_force_counts(n):
    """Count subsets of {1..n} by sum, by enumeration."""
    u = n * (n + 1) // 2
    counts = np.zeros(u + 1)
    ranks = range(1, n + 1)
    for r in range(n + 1):
        for subset in itertools.combinations(ranks, r):
            counts[sum(subset)] += 1
    return counts


class TestCounts:
    """The recurrence reproduces the subset-sum generating function."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8, 10, 12])
    def test_matches_enumeration(self, table, n):
        np.testing.assert_array_equal(table.counts(n), _brute_force_counts(n))

    @pytest.mark.parametrize("n", range(1, 31))
    def test_total_mass(self, table, n):
        assert table.counts(n).sum() == 2.0 ** n

    @pytest.mark.parametrize("n", [3, 4, 7, 20])
    def test_symmetry(self, table, n):
        u = n * (n + 1) // 2
        for k in range(u + 1):
            assert table.count(k, n) == table.count(u - k, n)

    def test_n4_values(self, table):
        # {}, {1}, {2}, {3}/{1,2}, {4}/{1,3}, {1,4}/{2,3}, ...
        expected = [1, 1, 1, 2, 2, 2, 2, 2, 1, 1, 1]
        assert [table.count(k, 4) for k in range(11)] == expected

    def test_out_of_range_is_zero(self, table):
        assert table.count(-1, 4) == 0.0
        assert table.count(11, 4) == 0.0

    def test_n1(self, table):
        assert table.count(0, 1) == 1.0
        assert table.count(1, 1) == 1.0
        assert table.count(2, 1) == 0.0

    def test_n0_empty_set(self, table):
        assert table.count(0, 0) == 1.0
        assert table.count(1, 0) == 0.0


class TestCacheBehaviour:
    """The buffer is rebuilt only when n changes."""

    def test_allocated_n_tracks_last_size(self, table):
        assert table.allocated_n is None
        table.ensure_built(6)
        assert table.allocated_n == 6
        table.ensure_built(9)
        assert table.allocated_n == 9

    def test_same_n_reuses_buffer(self, table):
        table.ensure_built(12)
        buffer = table._w
        table.count(30, 12)
        table.ensure_built(12)
        assert table._w is buffer

    def test_rebuilt_table_is_valid(self, table):
        first = table.counts(10)
        table.counts(6)
        np.testing.assert_array_equal(table.counts(10), first)

    def test_built_invariant(self, table):
        table.ensure_built(7)
        assert table._w[0] == 1.0
        assert table._w[1] == 1.0
        assert len(table._w) == 7 * 8 // 4 + 1

    def test_allocation_failure(self, table):
        with pytest.raises(AllocationError) as excinfo:
            table.ensure_built(10 ** 10)
        assert excinfo.value.n == 10 ** 10


class TestThreading:
    """Each thread has its own default table."""

    def test_default_table_per_thread(self):
        main = default_table()
        assert default_table() is main

        seen = []
        worker = threading.Thread(target=lambda: seen.append(default_table()))
        worker.start()
        worker.join()

        assert seen[0] is not main

    def test_shared_table_concurrent_sizes(self):
        shared = SignRankTable()
        expected = {n: _brute_force_counts(n) for n in (6, 9, 11)}
        failures = []

        def work(n):
            for _ in range(50):
                if not np.array_equal(shared.counts(n), expected[n]):
                    failures.append(n)

        threads = [threading.Thread(target=work, args=(n,)) for n in expected]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert failures == []
