"""
Error kinds raised by the calculator and the project store.

The routers map each kind to an HTTP status:
    ValidationError       -> 400 (with offending field names)
    EstimateOutOfRange    -> 400 (a ValidationError)
    UnknownMaterialGrade  -> 400
    ProjectNotFound       -> 404
    StorageFailure        -> 500 (opaque)
"""

from typing import List


class EstimatorError(Exception):
    """Base class for all estimator errors."""


class ValidationError(EstimatorError):
    """One or more required fields missing or out of range."""

    def __init__(self, fields: List[str], message: str = None):
        self.fields = list(fields)
        self.message = message or f"Missing or invalid fields: {', '.join(self.fields)}"
        super().__init__(self.message)


class UnknownMaterialGrade(EstimatorError):
    """Material grade not present in the rate table."""

    def __init__(self, material_type):
        self.material_type = material_type
        super().__init__(f"Unknown material type: {material_type}")


class EstimateOutOfRange(ValidationError):
    """Inputs are in range one by one but their product is not a finite number."""

    def __init__(self):
        super().__init__(["floorArea", "numberOfFloors"], "Estimated cost is out of range")


class ProjectNotFound(EstimatorError):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class StorageFailure(EstimatorError):
    """Underlying persistence operation failed. Never retried here."""
