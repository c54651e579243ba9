"""
Display formatting for estimates.

Amounts are rupees with Indian digit grouping: the last three digits, then
pairs (₹1,50,000 / ₹48,00,000 / ₹1,23,45,678).
"""

from .calculators import DEFAULT_RATES, RateTable


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_inr(amount, symbol: str = "₹") -> str:
    """
    Format an amount as rupees.

    Whole amounts print without paise; fractional amounts keep two decimals.
    """
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    if float(amount).is_integer():
        return f"{sign}{symbol}{_group_indian(str(int(amount)))}"
    whole, frac = f"{amount:.2f}".split(".")
    return f"{sign}{symbol}{_group_indian(whole)}.{frac}"


def format_area(floor_area) -> str:
    if float(floor_area).is_integer():
        return f"{int(floor_area):,} sq ft"
    return f"{floor_area:,.2f} sq ft"


def project_summary(project, rates: RateTable = DEFAULT_RATES) -> dict:
    """
    Flat dict of display strings for a stored project, camelCase like the
    rest of the JSON wire shape.

    The breakdown values come from the project's frozen snapshot. `rates` is
    only used to label feature lines.
    """
    breakdown = project.cost_breakdown
    features = [
        {"name": f, "costFormatted": format_inr(rates.feature_cost(f))}
        for f in project.additional_features
    ]
    return {
        "id": project.id,
        "projectName": project.project_name,
        "location": project.location,
        "floorAreaFormatted": format_area(project.floor_area),
        "numberOfFloors": project.number_of_floors,
        "materialType": project.material_type,
        "materialRateFormatted": f"{format_inr(breakdown.material_multiplier)}/sq ft",
        "baseCostFormula": (
            f"{project.floor_area} × {project.number_of_floors} × "
            f"{format_inr(breakdown.material_multiplier)}"
        ),
        "baseCostFormatted": format_inr(breakdown.base_cost),
        "additionalFeatures": features,
        "additionalFeaturesCostFormatted": format_inr(breakdown.additional_features_cost),
        "estimatedCostFormatted": format_inr(project.estimated_cost),
        "createdAtFormatted": project.created_at.strftime("%Y-%m-%d %H:%M"),
    }
