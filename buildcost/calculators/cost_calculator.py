"""
Cost calculator - project parameters in, CostBreakdown out.

    base_cost                = floor_area * number_of_floors * material_rate
    additional_features_cost = sum(feature_cost(f) for f in features)
    total_cost               = base_cost + additional_features_cost

Duplicate features are charged once per occurrence. Unknown feature names
contribute 0. An unknown material grade raises UnknownMaterialGrade; a base
cost that is not a finite number raises EstimateOutOfRange.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..exceptions import EstimateOutOfRange, UnknownMaterialGrade
from .rates import DEFAULT_RATES, RateTable

logger = logging.getLogger(__name__)

Number = Union[int, float]


def whole_number(value: Number) -> Number:
    """Return ints for integral results so 4800000.0 reads as 4800000."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class CostBreakdown:
    base_cost: Number
    material_multiplier: Number
    additional_features_cost: Number

    @property
    def total_cost(self) -> Number:
        return self.base_cost + self.additional_features_cost

    def to_dict(self) -> dict:
        """camelCase dict matching the JSON wire shape."""
        return {
            "baseCost": self.base_cost,
            "materialMultiplier": self.material_multiplier,
            "additionalFeaturesCost": self.additional_features_cost,
            "totalCost": self.total_cost,
        }


class CostCalculator:
    """Stateless calculator bound to one RateTable."""

    def __init__(self, rates: Optional[RateTable] = None):
        self.rates = rates or DEFAULT_RATES

    def calculate(
        self,
        floor_area: Number,
        number_of_floors: Number,
        material_type,
        additional_features: Optional[Iterable] = None,
    ) -> CostBreakdown:
        rate = self.rates.material_rate(material_type)
        if rate is None:
            raise UnknownMaterialGrade(getattr(material_type, "value", material_type))

        base_cost = whole_number(floor_area * number_of_floors * rate)
        if isinstance(base_cost, float) and not math.isfinite(base_cost):
            raise EstimateOutOfRange()

        features_cost = 0
        for feature in additional_features or []:
            cost = self.rates.feature_cost(feature)
            if cost == 0:
                logger.debug("Unknown feature %r priced at 0", feature)
            features_cost += cost

        return CostBreakdown(
            base_cost=base_cost,
            material_multiplier=rate,
            additional_features_cost=features_cost,
        )


_default_calculator = CostCalculator()


def calculate_cost(floor_area, number_of_floors, material_type, additional_features=None) -> CostBreakdown:
    """Calculate against the default rate table."""
    return _default_calculator.calculate(floor_area, number_of_floors, material_type, additional_features)
