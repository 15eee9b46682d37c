from __future__ import annotations

from enum import Enum
from typing import Final

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field


class MatchStrategy(str, Enum):
    GREEDY = "greedy"  # Nearest-distance-first pairing only
    EXACT = "exact"  # Maximum bipartite matching
    GREEDY_THEN_EXACT = "greedy-then-exact"  # Greedy fast path, exact when greedy leaves elements unmatched


@beartype
class ToleranceConfig(BaseModel):
    """Default tolerances per precision and the strategy used for unordered comparison."""

    model_config = ConfigDict(frozen=True)
    single: float = Field(default=1e-3, ge=0.0, allow_inf_nan=False)
    double: float = Field(default=1e-6, ge=0.0, allow_inf_nan=False)
    set_strategy: MatchStrategy = MatchStrategy.GREEDY_THEN_EXACT


DEFAULT_CONFIG: Final[ToleranceConfig] = ToleranceConfig()
