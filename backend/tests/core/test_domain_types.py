"""Domain Types — verifies the closed enumerations and their defaults.

Tests:
    - TaskStatus and Priority have exactly the expected members
    - Enum values equal member names (wire format)
    - Defaults are TODO / MEDIUM
"""

from ticktask.core.domain_types import (
    DEFAULT_PRIORITY, DEFAULT_STATUS, Priority, TaskId, TaskStatus,
)


def test_task_id_wraps_int():
    assert TaskId(7) == 7


def test_task_status_has_three_states():
    assert set(TaskStatus) == {
        TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE,
    }


def test_priority_has_three_levels():
    assert set(Priority) == {Priority.LOW, Priority.MEDIUM, Priority.HIGH}


def test_enum_values_match_member_names():
    for member in (*TaskStatus, *Priority):
        assert member.value == member.name


def test_defaults_are_todo_and_medium():
    assert DEFAULT_STATUS is TaskStatus.TODO
    assert DEFAULT_PRIORITY is Priority.MEDIUM


def test_enums_compare_equal_to_plain_strings():
    assert TaskStatus.IN_PROGRESS == "IN_PROGRESS"
    assert Priority("HIGH") is Priority.HIGH
