"""Error payload lookup tests."""

from __future__ import annotations

from types import SimpleNamespace

from schema_form_bridge.form_bridge.error_mapping import (
    collect_error_messages,
    find_error,
    find_error_message,
)
from schema_form_bridge.validation.validation_outcomes import ErrorDetail, ValidationFailure


def test_nested_paths_use_error_path_form() -> None:
    error = {"details": [{"path": ".friends[0].firstName", "message": "Too short"}]}

    assert find_error_message("friends.0.firstName", error) == "Too short"
    assert find_error_message("friends.firstName", error) is None


def test_first_matching_entry_wins() -> None:
    error = {
        "details": [
            {"path": ".age", "message": "first"},
            {"path": ".age", "message": "second"},
        ]
    }

    assert find_error("age", error) == {"path": ".age", "message": "first"}
    assert collect_error_messages(error) == ["first", "second"]


def test_legacy_data_path_key_is_understood() -> None:
    error = {"details": [{"dataPath": ".email", "message": "Invalid"}]}

    assert find_error_message("email", error) == "Invalid"


def test_entries_may_be_objects() -> None:
    entry = SimpleNamespace(path=".email", message="Invalid")
    error = SimpleNamespace(details=[entry])

    assert find_error("email", error) is entry
    assert collect_error_messages(error) == ["Invalid"]


def test_validation_failure_is_a_valid_payload() -> None:
    failure = ValidationFailure([ErrorDetail(path=".age", message="must be integer")])

    assert find_error("age", failure) == ErrorDetail(path=".age", message="must be integer")
    assert find_error_message("age", failure) == "must be integer"
    assert collect_error_messages(failure) == ["must be integer"]


def test_malformed_details_degrade_quietly() -> None:
    assert find_error("age", {"details": "broken"}) is None
    assert find_error_message("age", {"details": [{"path": ".age"}]}) is None
    assert collect_error_messages({"details": "broken"}) == [{"details": "broken"}]


def test_message_mappings_and_exception_messages() -> None:
    class CustomError(Exception):
        message = "custom"

    assert collect_error_messages({"message": "boom"}) == ["boom"]
    assert collect_error_messages(CustomError("ignored")) == ["custom"]
    assert collect_error_messages(ValueError("plain")) == ["plain"]


def test_empty_details_yield_no_messages() -> None:
    assert collect_error_messages({"details": []}) == []
