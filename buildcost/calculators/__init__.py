"""
Deterministic cost calculation.

Pure Python math over a fixed rate table. No I/O, no shared mutable state.
"""

from .rates import RateTable, DEFAULT_RATES
from .cost_calculator import CostBreakdown, CostCalculator, calculate_cost

__all__ = ["RateTable", "DEFAULT_RATES", "CostBreakdown", "CostCalculator", "calculate_cost"]
