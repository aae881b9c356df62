"""
Tests for argument-kind validators.

NaN and Inf must pass check_array: they are legal distribution inputs.
"""

import math

import numpy as np
import pytest

from pydistributions.core.exceptions import ValidationError
from pydistributions.core.validation import (
    check_array,
    check_count,
    check_random_state,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_list_to_float(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64

    def test_scalar_becomes_0d(self):
        result = check_array(5, "x")
        assert result.ndim == 0
        assert float(result) == 5.0

    def test_nan_and_inf_allowed(self):
        result = check_array([np.nan, np.inf, -np.inf], "x")
        assert np.isnan(result[0])
        assert np.isinf(result[1:]).all()

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(True, "n")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(1 + 2j, "x")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_count
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCount:
    """R-style draw counts."""

    def test_int(self):
        assert check_count(7, "nn") == 7

    def test_whole_float(self):
        assert check_count(3.0, "nn") == 3

    def test_sequence_uses_length(self):
        assert check_count([5, 5, 5, 5], "nn") == 4

    def test_length_one_sequence_uses_value(self):
        assert check_count([5], "nn") == 5

    def test_empty_sequence(self):
        assert check_count([], "nn") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_count(-1, "nn")

    def test_fractional_rejected(self):
        with pytest.raises(ValidationError, match="whole number"):
            check_count(2.5, "nn")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_count(True, "nn")

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError, match="finite"):
            check_count(value, "nn")


# ═══════════════════════════════════════════════════════════════════════
# check_random_state
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRandomState:

    def test_none_gives_generator(self):
        assert isinstance(check_random_state(None), np.random.Generator)

    def test_generator_passthrough(self, rng):
        assert check_random_state(rng) is rng

    def test_seed_reproducible(self):
        a = check_random_state(123).random(3)
        b = check_random_state(123).random(3)
        np.testing.assert_array_equal(a, b)

    def test_rejects_other(self):
        with pytest.raises(ValidationError, match="random_state"):
            check_random_state("seed")
