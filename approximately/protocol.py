from __future__ import annotations

from collections.abc import Collection, Set
from typing import Any, Protocol, runtime_checkable

import numpy as np
from beartype import beartype

from approximately.aggregates import approx_eq_seq, approx_eq_set
from approximately.config import DEFAULT_CONFIG, ToleranceConfig
from approximately.exceptions import ApproxAssertionError
from approximately.floats import Precision, Scalar, approx_eq, precision_of


@runtime_checkable
class ApproxEq(Protocol):
    """Types that define their own approximate equality."""

    def approx(self, other: Any) -> bool: ...


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float, np.floating, np.integer))


@beartype
def approx(a: Any, b: Any, tol: Scalar | None = None, *, config: ToleranceConfig = DEFAULT_CONFIG) -> bool:
    """
    Approximate equality for any supported value.

    Objects implementing ``ApproxEq`` decide for themselves and ignore
    ``tol``. Scalars are compared with ``approx_eq``, sets and frozensets with
    ``approx_eq_set`` and other collections position by position.

    Raises:
        TypeError: If ``a`` is of a type that has no approximate equality.
    """
    if isinstance(a, ApproxEq):
        return a.approx(b)
    if _is_scalar(a):
        return _is_scalar(b) and approx_eq(a, b, tol, config=config)
    if isinstance(a, Set):
        return isinstance(b, Collection) and approx_eq_set(a, b, tol, config=config)
    if isinstance(a, (Collection, np.ndarray)) and not isinstance(a, (str, bytes)):
        return isinstance(b, (Collection, np.ndarray)) and approx_eq_seq(list(a), list(b), tol, config=config)
    raise TypeError(f"No approximate equality defined for type {type(a).__name__}")


def _format(value: Any) -> str:
    if isinstance(value, (int, np.integer)):
        return str(value)
    if _is_scalar(value):
        digits = 3 if precision_of(value) is Precision.SINGLE else 6
        return f"{float(value):.{digits}f}"
    return repr(value)


@beartype
def assert_approx(a: Any, b: Any, tol: Scalar | None = None, *, config: ToleranceConfig = DEFAULT_CONFIG) -> None:
    """
    Assert that two values are approximately equal.

    Raises:
        ApproxAssertionError: With a ``left != right`` message when they are not.
    """
    if not approx(a, b, tol, config=config):
        raise ApproxAssertionError(a, b, f"{_format(a)} != {_format(b)}")
