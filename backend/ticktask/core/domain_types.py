"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the store-assigned 64-bit integer — never reassigned after creation
    - TaskStatus and Priority are closed sets; the value equals the member name
    - Status has no enforced transitions (any member may follow any other)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders ("IN_PROGRESS" on the wire)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)

# Ids are 64-bit signed integers in every supported store
TASK_ID_MIN = -(2**63)
TASK_ID_MAX = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task progress — client-controlled, no transition rules."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Priority(str, Enum):
    """Task priority — MEDIUM when the client does not choose one."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = Priority.MEDIUM


# ─── Field Bounds ────────────────────────────────────────────────

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 5000
