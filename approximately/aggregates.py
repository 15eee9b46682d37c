from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import TypeAlias

import numpy as np
from beartype import beartype

from approximately.config import DEFAULT_CONFIG, ToleranceConfig
from approximately.floats import Scalar, approx_eq
from approximately.logs.structlog import logger
from approximately.matching import is_perfect_matching

ScalarSequence: TypeAlias = Sequence[Scalar] | np.ndarray
ScalarCollection: TypeAlias = Collection[Scalar] | np.ndarray


@beartype
def approx_eq_seq(
    a: ScalarSequence,
    b: ScalarSequence,
    tol: Scalar | None = None,
    *,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Compare two sequences position by position.

    True iff both have the same length and every pair of corresponding
    elements is approximately equal. Two empty sequences are equal.
    """
    if len(a) != len(b):
        return False
    return all(approx_eq(x, y, tol, config=config) for x, y in zip(a, b))


@beartype
def approx_eq_set(
    a: ScalarCollection,
    b: ScalarCollection,
    tol: Scalar | None = None,
    *,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Compare two collections ignoring order.

    True iff the elements of ``a`` can be paired one-to-one with the elements
    of ``b`` so that every pair is approximately equal. Collections of
    different sizes are never equal and no pairing is attempted for them.
    How pairs are searched is chosen by ``config.set_strategy``.
    """
    if len(a) != len(b):
        logger.debug(f"collection sizes differ ({len(a)} != {len(b)}) - skipping pairing")
        return False
    return is_perfect_matching(list(a), list(b), tol, config)


@beartype
def matching_fraction(
    a: ScalarSequence,
    b: ScalarSequence,
    tol: Scalar | None = None,
    *,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> float:
    """
    Share of positions holding approximately equal elements.

    Positions past the end of the shorter sequence count as mismatches.
    Two empty sequences match fully.
    """
    total = max(len(a), len(b))
    if total == 0:
        return 1.0
    matches = sum(1 for x, y in zip(a, b) if approx_eq(x, y, tol, config=config))
    return matches / total


@beartype
def approx_eq_fraction(
    a: ScalarSequence,
    b: ScalarSequence,
    min_fraction: Scalar = 0.8,
    tol: Scalar | None = None,
    *,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Fuzzy sequence equality: at least ``min_fraction`` of positions match.

    Useful for block-wise comparison of feature vectors, e.g. treating two
    images as the same when 80% of their blocks agree.
    """
    return matching_fraction(a, b, tol, config=config) >= min_fraction
