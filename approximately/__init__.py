from approximately import aggregates, config, floats, matching, protocol
from approximately.aggregates import approx_eq_fraction, approx_eq_seq, approx_eq_set, matching_fraction
from approximately.config import DEFAULT_CONFIG, MatchStrategy, ToleranceConfig
from approximately.exceptions import ApproxAssertionError
from approximately.floats import (
    F32_TOLERANCE,
    F64_TOLERANCE,
    Precision,
    approx_eq,
    approx_zero,
    default_tolerance,
    precision_of,
)
from approximately.protocol import ApproxEq, approx, assert_approx

__all__ = [
    "DEFAULT_CONFIG",
    "F32_TOLERANCE",
    "F64_TOLERANCE",
    "ApproxAssertionError",
    "ApproxEq",
    "MatchStrategy",
    "Precision",
    "ToleranceConfig",
    "aggregates",
    "approx",
    "approx_eq",
    "approx_eq_fraction",
    "approx_eq_seq",
    "approx_eq_set",
    "approx_zero",
    "assert_approx",
    "config",
    "default_tolerance",
    "floats",
    "matching",
    "matching_fraction",
    "precision_of",
    "protocol",
]
