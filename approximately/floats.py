from __future__ import annotations

from enum import Enum
from fractions import Fraction
from math import inf, isclose, isinf, isnan
from typing import Final, TypeAlias

import numpy as np
from beartype import beartype

from approximately.config import DEFAULT_CONFIG, ToleranceConfig

F32_TOLERANCE: Final[float] = 1e-3
F64_TOLERANCE: Final[float] = 1e-6

Scalar: TypeAlias = int | float | np.floating | np.integer

_SINGLE_TYPES: Final[tuple[type, ...]] = (np.float32, np.float16)


class Precision(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


@beartype
def precision_of(value: Scalar) -> Precision:
    """Floating-point precision a value is compared at."""
    if isinstance(value, _SINGLE_TYPES):
        return Precision.SINGLE
    return Precision.DOUBLE


@beartype
def default_tolerance(value: Scalar, config: ToleranceConfig = DEFAULT_CONFIG) -> float:
    """
    Default absolute tolerance for the precision of ``value``.

    The single-precision default is rounded to float32, the precision the
    comparison is made at.
    """
    if precision_of(value) is Precision.SINGLE:
        return float(np.float32(config.single))
    return config.double


@beartype
def pair_tolerance(a: Scalar, b: Scalar, config: ToleranceConfig = DEFAULT_CONFIG) -> float:
    """
    Default tolerance for comparing ``a`` against ``b``.

    Mixed-precision pairs use the coarser of the two defaults.
    """
    return max(default_tolerance(a, config), default_tolerance(b, config))


def _is_integer(value: Scalar) -> bool:
    return isinstance(value, (int, np.integer))


@beartype
def as_float(value: Scalar) -> float:
    """Convert to float, saturating integers beyond the float range to infinity."""
    try:
        return float(value)
    except OverflowError:
        return inf if value > 0 else -inf


def _to_fraction(value: Scalar) -> Fraction | None:
    """Exact rational value, or None for NaN and infinities."""
    if _is_integer(value):
        return Fraction(int(value))
    x = float(value)
    if isinf(x) or isnan(x):
        return None
    return Fraction(x)


def _integer_close(a: Scalar, b: Scalar, abs_tol: float, rel_tol: float) -> bool:
    # Integers may exceed the float range, so compare exactly
    x, y = _to_fraction(a), _to_fraction(b)
    if x is None or y is None:
        return False
    if isinf(abs_tol) or isinf(rel_tol):
        return True
    diff = abs(x - y)
    return diff <= Fraction(abs_tol) or diff <= Fraction(rel_tol) * max(abs(x), abs(y))


@beartype
def approx_eq(
    a: Scalar,
    b: Scalar,
    tol: Scalar | None = None,
    *,
    rel_tol: Scalar = 0.0,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Compare two scalars for equality within an absolute tolerance.

    Returns True iff ``|a - b| <= tol``. When ``tol`` is omitted the default for
    the values' precision is used (1e-3 for float32, 1e-6 for float64).

    NaN is never approximately equal to anything, itself included. A finite
    value never matches an infinite one; infinities match only when they share
    a sign. A negative or NaN tolerance matches nothing. Integer operands are
    compared exactly, whatever their magnitude.

    ``rel_tol`` additionally accepts pairs whose difference is within
    ``rel_tol * max(|a|, |b|)``.
    """
    if tol is None:
        tol = pair_tolerance(a, b, config)
    abs_tol = as_float(tol)
    rel = as_float(rel_tol)
    if not (abs_tol >= 0.0 and rel >= 0.0):
        return False
    if _is_integer(a) or _is_integer(b):
        return _integer_close(a, b, abs_tol, rel)
    x, y = float(a), float(b)
    if isinf(x) or isinf(y):
        return x == y
    return isclose(x, y, rel_tol=rel, abs_tol=abs_tol)


@beartype
def approx_zero(a: Scalar, tol: Scalar | None = None, *, config: ToleranceConfig = DEFAULT_CONFIG) -> bool:
    """Check if a scalar is effectively zero within tolerance."""
    if tol is None:
        tol = default_tolerance(a, config)
    return approx_eq(a, 0.0, tol)
