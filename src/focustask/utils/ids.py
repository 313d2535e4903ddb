"""Identifier generation for board entities."""

import uuid

SECTION_PREFIX = ""
COLUMN_PREFIX = "col-"
TASK_PREFIX = "task-"


def new_id(prefix: str = "") -> str:
    """Generate a fresh id, unique for the lifetime of the process.

    Examples:
        new_id("task-") -> "task-3f2b9c0e8d7a4c1f9e6b5a4d3c2b1a09"
    """
    return f"{prefix}{uuid.uuid4().hex}"
