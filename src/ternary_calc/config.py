"""
Module: config

Purpose:
    Configuration dataclass for the evaluator. Immutable settings with
    validation on construction.

Key Classes:
    - OverflowPolicy: How out-of-range intermediate values are handled
    - EvaluatorConfig: Main evaluator configuration

Dependencies:
    - dataclasses (std)

Used By:
    - evaluator.parser: Range checks during evaluation
    - cli: Built from --max-bits
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OverflowPolicy(Enum):
    """
    Attributes:
        UNBOUNDED: Arbitrary-precision integers, never overflows.
        ERROR: Values outside the signed int_bits range raise OVERFLOW.
    """
    UNBOUNDED = "unbounded"
    ERROR = "error"


MIN_INT_BITS = 32
# Each nesting level costs three interpreter frames
MAX_NESTING_LIMIT = 250


@dataclass(frozen=True)
class EvaluatorConfig:
    """
    Configuration for expression evaluation (immutable).

    Attributes:
        overflow_policy: Overflow handling. Defaults to UNBOUNDED.
        int_bits: Signed width enforced under OverflowPolicy.ERROR.
            Must be at least 32. Defaults to 64.
        max_nesting: Deepest allowed parenthesis nesting. Between 1 and
            MAX_NESTING_LIMIT. Defaults to 100.

    Example:
        >>> config = EvaluatorConfig(overflow_policy=OverflowPolicy.ERROR, int_bits=32)
        >>> config.max_value
        2147483647
    """
    overflow_policy: OverflowPolicy = OverflowPolicy.UNBOUNDED
    int_bits: int = 64
    max_nesting: int = 100

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.overflow_policy, OverflowPolicy):
            raise ValueError(f"overflow_policy must be an OverflowPolicy: {self.overflow_policy!r}")
        if self.int_bits < MIN_INT_BITS:
            raise ValueError(f"int_bits must be at least {MIN_INT_BITS}: {self.int_bits}")
        if not 1 <= self.max_nesting <= MAX_NESTING_LIMIT:
            raise ValueError(
                f"max_nesting must be between 1 and {MAX_NESTING_LIMIT}: {self.max_nesting}"
            )

    @classmethod
    def bounded(cls, int_bits: int = 64) -> "EvaluatorConfig":
        """Config that raises OVERFLOW outside a signed int_bits range."""
        return cls(overflow_policy=OverflowPolicy.ERROR, int_bits=int_bits)

    @property
    def min_value(self) -> int:
        return -(1 << (self.int_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.int_bits - 1)) - 1

    def in_range(self, value: int) -> bool:
        if self.overflow_policy is OverflowPolicy.UNBOUNDED:
            return True
        return self.min_value <= value <= self.max_value


DEFAULT_CONFIG = EvaluatorConfig()
