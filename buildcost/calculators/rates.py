"""
Rate tables - material grade rates and flat feature costs.

One immutable RateTable instance is the single source for the calculator,
the /rates endpoint and the PDF report.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..models import Feature, MaterialType


def _freeze(table: Mapping) -> Mapping:
    # Enum keys are stored by their wire value so plain strings look up directly
    return MappingProxyType({getattr(k, "value", k): v for k, v in table.items()})


@dataclass(frozen=True)
class RateTable:
    """Per-sq-ft-per-floor material rates and one-time feature costs."""

    material_rates: Mapping[str, int] = field(default_factory=dict)
    feature_costs: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "material_rates", _freeze(self.material_rates))
        object.__setattr__(self, "feature_costs", _freeze(self.feature_costs))

    def material_rate(self, material_type):
        """Rate for a grade, or None if the grade isn't in the table."""
        return self.material_rates.get(getattr(material_type, "value", material_type))

    def feature_cost(self, feature) -> int:
        """Flat cost for a feature. Unknown names cost 0."""
        return self.feature_costs.get(getattr(feature, "value", feature), 0)

    def to_dict(self) -> dict:
        return {
            "materialRates": dict(self.material_rates),
            "featureCosts": dict(self.feature_costs),
        }


DEFAULT_RATES = RateTable(
    material_rates={
        MaterialType.STANDARD: 1200,
        MaterialType.PREMIUM: 1800,
        MaterialType.LUXURY: 2500,
    },
    feature_costs={
        Feature.PARKING: 150000,
        Feature.ELEVATOR: 800000,
        Feature.GARDEN: 200000,
        Feature.SOLAR_PANELS: 500000,
    },
)
