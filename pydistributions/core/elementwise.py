"""
Elementwise mapping of scalar distribution routines.

Every public distribution function is written once, for scalars, and
mapped over its numeric arguments here. Arguments are broadcast together
with NumPy rules and visited in C order, so the output keeps the input
order and shape:

    scalar inputs            -> Python float
    any array-like argument  -> float64 ndarray of the broadcast shape
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydistributions.core.exceptions import ValidationError
from pydistributions.core.validation import check_array


def apply_elementwise(
    func: Callable[..., float],
    args: dict[str, ArrayLike],
) -> float | NDArray[np.float64]:
    """
    Apply a scalar routine over broadcast numeric arguments.

    Args:
        func: Scalar routine taking the arguments positionally, in the
            order of ``args``
        args: Mapping of parameter name to value; names are used in
            error messages

    Returns:
        float if every argument is a scalar, else an ndarray
    """
    arrays = [check_array(value, name) for name, value in args.items()]

    if all(a.ndim == 0 for a in arrays):
        return float(func(*(float(a) for a in arrays)))

    try:
        bcast = np.broadcast(*arrays)
    except ValueError as e:
        shapes = ", ".join(
            f"{name}={a.shape}" for name, a in zip(args, arrays)
        )
        raise ValidationError(f"Arguments cannot be broadcast together: {shapes}") from e

    out = np.empty(bcast.shape, dtype=np.float64)
    flat = out.reshape(-1)
    for i, values in enumerate(bcast):
        flat[i] = func(*(float(v) for v in values))
    return out
