"""
Generic result container for detailed PyDistributions evaluations.

The plain distribution functions (pnt, psignrank, ...) return bare floats
or arrays, like R. Functions suffixed ``_detail`` return a Result envelope
instead, so that diagnostics which R only prints (iteration counts,
convergence, precision loss) are available as data.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (regime, converged, iterations)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single detailed evaluation.

    Type Parameters:
        P: The distribution-specific payload type

    Attributes:
        params: Distribution-specific payload (value and diagnostics)
        info: Structured metadata (algorithm regime, convergence)
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PntParams(value=0.5, regime='series', iterations=12,
        ...                      converged=True, error_bound=3e-13),
        ...     info={'regime': 'series', 'converged': True, 'iterations': 12},
        ...     backend_name='as243',
        ... )
    """
    params: P
    info: dict[str, Any]
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
