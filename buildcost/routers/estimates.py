"""
Estimate API - stateless pricing.

POST /api/calculate-cost - price a building without saving it
GET  /api/rates          - the rate tables the calculator uses
"""

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators import CostCalculator
from ..exceptions import UnknownMaterialGrade, ValidationError

router = APIRouter(tags=["estimates"])

# Shared calculator, stateless
calculator = CostCalculator()


@router.post("/calculate-cost", response_model=schemas.CostBreakdown)
def calculate_cost(request: schemas.CostCalculationRequest):
    try:
        breakdown = calculator.calculate(
            request.floor_area,
            request.number_of_floors,
            request.material_type,
            request.additional_features,
        )
    except UnknownMaterialGrade as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"message": e.message, "fields": e.fields})
    return schemas.CostBreakdown.from_breakdown(breakdown)


@router.get("/rates", response_model=schemas.RateTables)
def get_rates():
    return calculator.rates.to_dict()
