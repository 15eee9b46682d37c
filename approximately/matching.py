"""
Pairing of two equally sized groups of scalars under a tolerance.

Approximate equality is not transitive, so deciding whether two unordered
groups are equal is a bipartite matching problem. Two strategies are offered:
a greedy nearest-distance-first pass, and an exact perfect-matching check on
the feasibility matrix. Greedy can miss a valid pairing when tolerance
windows overlap in a chain; the exact check cannot.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from beartype import beartype
from scipy.optimize import linear_sum_assignment

from approximately.config import DEFAULT_CONFIG, MatchStrategy, ToleranceConfig
from approximately.floats import Scalar, approx_eq, as_float
from approximately.logs.structlog import logger


@beartype
def distance(a: Scalar, b: Scalar) -> float:
    """Absolute difference, with equal infinities at distance zero."""
    if isinstance(a, (int, np.integer)) and isinstance(b, (int, np.integer)):
        return as_float(abs(int(a) - int(b)))
    x, y = as_float(a), as_float(b)
    if x == y:
        return 0.0
    return abs(x - y)


@beartype
def feasibility_matrix(
    a: Sequence[Scalar],
    b: Sequence[Scalar],
    tol: Scalar | None = None,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """Boolean matrix with ``[i, j]`` set when ``a[i]`` approximately equals ``b[j]``."""
    feasible = np.zeros((len(a), len(b)), dtype=bool)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            feasible[i, j] = approx_eq(x, y, tol, config=config)
    return feasible


@beartype
def greedy_pairing(
    a: Sequence[Scalar],
    b: Sequence[Scalar],
    feasible: np.ndarray,
) -> list[tuple[int, int]]:
    """
    Pair elements nearest-first.

    Feasible candidate pairs are visited in ascending order of distance and a
    pair is accepted when neither side has been matched yet.

    Returns:
        List of ``(i, j)`` index pairs; may be shorter than the inputs.
    """
    candidates = sorted((distance(a[i], b[j]), int(i), int(j)) for i, j in zip(*np.nonzero(feasible)))
    matched_a: set[int] = set()
    matched_b: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for _, i, j in candidates:
        if i in matched_a or j in matched_b:
            continue
        matched_a.add(i)
        matched_b.add(j)
        pairs.append((i, j))
    return pairs


@beartype
def exact_pairing(feasible: np.ndarray) -> list[tuple[int, int]]:
    """
    Maximum matching over the feasibility matrix.

    Solved as an assignment problem where feasible pairs cost 0 and infeasible
    ones cost 1, so the optimal assignment uses as many feasible pairs as
    possible.

    Returns:
        List of feasible ``(i, j)`` index pairs of maximum size.
    """
    if feasible.size == 0:
        return []
    cost = (~feasible).astype(np.int64)
    rows, cols = linear_sum_assignment(cost)
    return [(int(i), int(j)) for i, j in zip(rows, cols) if feasible[i, j]]


@beartype
def is_perfect_matching(
    a: Sequence[Scalar],
    b: Sequence[Scalar],
    tol: Scalar | None = None,
    config: ToleranceConfig = DEFAULT_CONFIG,
) -> bool:
    """Check whether every element of ``a`` can be paired with a distinct element of ``b``."""
    n = len(a)
    if n != len(b):
        return False
    if n == 0:
        return True

    feasible = feasibility_matrix(a, b, tol, config)
    if not feasible.any(axis=1).all() or not feasible.any(axis=0).all():
        return False

    strategy = config.set_strategy
    if strategy is not MatchStrategy.EXACT:
        if len(greedy_pairing(a, b, feasible)) == n:
            return True
        if strategy is MatchStrategy.GREEDY:
            return False
        logger.debug(f"greedy pairing incomplete for {n} elements - falling back to exact matching")

    return len(exact_pairing(feasible)) == n
