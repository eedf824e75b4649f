"""Translation of validator error payloads into per-field messages.

Error payloads come from a third-party validator, so malformed payloads never
raise: lookups degrade to None and message collection to an empty list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from schema_form_bridge.schema_management.path_resolution import to_error_path

_DETAILS_KEY = "details"
_PATH_KEYS = ("path", "dataPath")
_MESSAGE_KEYS = ("message",)


def find_error(path: str, error: Any = None) -> Any:
    """Return the first detail entry reported for `path`, unmodified."""
    details = _details_of(error)
    if details is None:
        return None
    target = to_error_path(path)
    for detail in details:
        if _entry_value(detail, _PATH_KEYS) == target:
            return detail
    return None


def find_error_message(path: str, error: Any = None) -> Any:
    detail = find_error(path, error)
    if detail is None:
        return None
    return _entry_value(detail, _MESSAGE_KEYS)


def collect_error_messages(error: Any = None) -> list[Any]:
    """Flatten any error value into the list of messages it carries."""
    if error is None:
        return []
    details = _details_of(error)
    if details is not None:
        return [_entry_value(detail, _MESSAGE_KEYS) for detail in details]
    if isinstance(error, BaseException):
        message = getattr(error, "message", None)
        return [message if message is not None else str(error)]
    if isinstance(error, Mapping) and "message" in error:
        return [error["message"]]
    return [error]


def _details_of(error: Any) -> Sequence[Any] | None:
    if error is None or isinstance(error, (str, bytes, int, float)):
        return None
    if isinstance(error, Mapping):
        details = error.get(_DETAILS_KEY)
    else:
        details = getattr(error, _DETAILS_KEY, None)
    if isinstance(details, (list, tuple)):
        return details
    return None


def _entry_value(entry: Any, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if isinstance(entry, Mapping):
            if key in entry:
                return entry[key]
        elif hasattr(entry, key):
            return getattr(entry, key)
    return None
