"""Model validation exports."""

from .model_validator import ModelValidator
from .validation_outcomes import ErrorDetail, ValidationFailure

__all__ = [
    "ErrorDetail",
    "ModelValidator",
    "ValidationFailure",
]
