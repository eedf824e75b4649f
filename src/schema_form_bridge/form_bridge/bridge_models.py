"""Form bridge value objects."""

from __future__ import annotations

from enum import Enum


class LogicalType(str, Enum):
    """UI-relevant data categories a field can be rendered as."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE_TIME = "date_time"
    LIST = "list"
    STRUCTURE = "structure"
