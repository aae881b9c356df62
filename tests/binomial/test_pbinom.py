"""
Tests for pbinom() matching R pbinom().
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from pydistributions.binomial import pbinom
from pydistributions.core.exceptions import DomainWarning


class TestPbinom:

    def test_concrete(self):
        """R: pbinom(3, 10, 0.5) = 0.171875"""
        assert pbinom(3, 10, 0.5) == pytest.approx(0.171875, rel=1e-14)

    def test_upper_tail(self):
        assert pbinom(3, 10, 0.5, lower_tail=False) == pytest.approx(0.828125, rel=1e-14)

    def test_log_p(self):
        assert pbinom(3, 10, 0.5, log_p=True) == pytest.approx(math.log(0.171875), rel=1e-14)

    def test_matches_scipy(self):
        x = np.arange(0, 21)
        assert_allclose(pbinom(x, 20, 0.3), sp_stats.binom.cdf(x, 20, 0.3), rtol=1e-12)

    def test_boundaries(self):
        assert pbinom(-1, 10, 0.5) == 0.0
        assert pbinom(10, 10, 0.5) == 1.0
        assert pbinom(15, 10, 0.5, lower_tail=False) == 0.0

    def test_fuzzy_floor(self):
        assert pbinom(2.9999999999, 10, 0.5) == pbinom(3, 10, 0.5)
        assert pbinom(3.7, 10, 0.5) == pbinom(3, 10, 0.5)

    def test_size_zero(self):
        assert pbinom(0, 0, 0.4) == 1.0

    def test_degenerate_prob(self):
        assert pbinom(3, 10, 0.0) == 1.0
        assert pbinom(3, 10, 1.0) == 0.0

    def test_non_integer_size(self):
        with pytest.warns(DomainWarning, match="non-integer n"):
            assert math.isnan(pbinom(3, 10.5, 0.5))

    def test_non_integer_size_warns_once(self):
        with pytest.warns(DomainWarning) as record:
            pbinom(3, 10.5, 0.5)
        assert [str(w.message) for w in record] == ["non-integer n = 10.500000"]

    @pytest.mark.parametrize("size,prob", [(-1, 0.5), (10, -0.1), (10, 1.5), (math.inf, 0.5)])
    def test_invalid(self, size, prob):
        with pytest.warns(DomainWarning):
            assert math.isnan(pbinom(3, size, prob))

    def test_nan_propagates(self):
        assert math.isnan(pbinom(math.nan, 10, 0.5))
        assert math.isnan(pbinom(3, 10, math.nan))

    def test_broadcast(self):
        result = pbinom([1, 2], [[5], [6]], 0.5)
        assert result.shape == (2, 2)
        assert result[1, 0] == pytest.approx(7 / 64, rel=1e-14)
