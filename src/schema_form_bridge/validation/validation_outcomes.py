"""Validation outcome entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    """One per-field validation error, addressed by error path form."""

    path: str
    message: str


class ValidationFailure(Exception):
    """Raised when a model does not satisfy its schema."""

    def __init__(self, details: Iterable[ErrorDetail]) -> None:
        self.details = tuple(details)
        summary = "; ".join(
            f"{detail.path or '<root>'}: {detail.message}" for detail in self.details
        )
        super().__init__(f"{len(self.details)} validation error(s): {summary}")
