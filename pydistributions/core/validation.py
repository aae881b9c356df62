"""
Input validation utilities for PyDistributions.

These validators cover argument KIND, not numeric domain. A string where a
number is expected fails fast with ValidationError; a negative sample size
is a legal call that returns NaN (see core.dpq.domain_error).

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydistributions.core.exceptions import ValidationError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts scalars and any array-like. NaN and Inf are allowed: they are
    meaningful inputs to every distribution function. Booleans are rejected
    because a flag passed positionally into a numeric slot is always a bug.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (0-d for scalar input)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_count(value: ArrayLike, name: str) -> int:
    """
    Interpret R-style count arguments.

    An integral number is the count itself; a sequence of length other
    than 1 contributes its length (as in R's ``rsignrank(c(...), n)``).

    Raises:
        ValidationError: If the count is negative, non-finite or not an integer
    """
    arr = np.asarray(value)
    if arr.size != 1:
        return int(arr.size)

    item = arr.reshape(-1)[0].item()
    if isinstance(item, bool) or not isinstance(item, numbers.Real):
        raise ValidationError(
            f"{name}: expected an integer count or a sequence, got {value!r}"
        )
    if not math.isfinite(item):
        raise ValidationError(f"{name}: must be finite, got {item}")
    if item != int(item):
        raise ValidationError(f"{name}: must be a whole number, got {item}")
    count = int(item)

    if count < 0:
        raise ValidationError(f"{name}: must be non-negative, got {count}")
    return count


def check_random_state(random_state: Any) -> np.random.Generator:
    """
    Turn None, an int seed, or a Generator into a numpy Generator.

    Raises:
        ValidationError: For any other type
    """
    if random_state is None:
        return np.random.default_rng()
    if isinstance(random_state, np.random.Generator):
        return random_state
    if isinstance(random_state, (numbers.Integral, np.integer)) and not isinstance(random_state, bool):
        return np.random.default_rng(int(random_state))
    raise ValidationError(
        f"random_state: expected None, an int seed or numpy.random.Generator, "
        f"got {type(random_state).__name__}"
    )
