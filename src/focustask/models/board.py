"""Board state models.

The board is an immutable value: every operation returns a new Board and
leaves the receiver untouched, so older snapshots stay valid. Operations
that target an unknown id, or that would break an invariant, return the
receiver itself; callers can use an identity check to detect a no-op.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.ids import COLUMN_PREFIX, SECTION_PREFIX, TASK_PREFIX, new_id
from .task import Task, coerce_text, is_blank

DEFAULT_SECTION_TITLE = "New Section"
DEFAULT_COLUMN_TITLE = "New Column"

IdFactory = Callable[[str], str]


def coerce_items(value: Any) -> Any:
    """Read a nested entity list from loaded data; null or a non-list becomes empty."""
    if isinstance(value, list | tuple):
        return value
    return ()


class Column(BaseModel):
    """A named, ordered list of tasks within a section."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = ""
    title: str = ""
    tasks: tuple[Task, ...] = ()

    @field_validator("id", "title", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("tasks", mode="before")
    @classmethod
    def validate_tasks(cls, v: Any) -> Any:
        return coerce_items(v)

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by id, or None if this column does not hold it."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def rename(self, title: str) -> Column:
        if is_blank(title):
            return self
        return self.model_copy(update={"title": title})

    def append_task(self, task: Task) -> Column:
        return self.model_copy(update={"tasks": (*self.tasks, task)})

    def remove_task(self, task_id: str) -> Column:
        """Drop every task with the given id."""
        remaining = tuple(t for t in self.tasks if t.id != task_id)
        if len(remaining) == len(self.tasks):
            return self
        return self.model_copy(update={"tasks": remaining})

    def update_task(self, task_id: str, change: Callable[[Task], Task]) -> Column:
        """Apply change to the matching task(s)."""
        tasks = tuple(change(t) if t.id == task_id else t for t in self.tasks)
        if all(new is old for new, old in zip(tasks, self.tasks, strict=True)):
            return self
        return self.model_copy(update={"tasks": tasks})

    def without_completed(self) -> Column:
        remaining = tuple(t for t in self.tasks if not t.completed)
        if len(remaining) == len(self.tasks):
            return self
        return self.model_copy(update={"tasks": remaining})


class Section(BaseModel):
    """A named grouping of columns. Always holds at least one column."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = ""
    title: str = ""
    columns: tuple[Column, ...] = ()

    @field_validator("id", "title", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("columns", mode="before")
    @classmethod
    def validate_columns(cls, v: Any) -> Any:
        return coerce_items(v)

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by id, or None if absent."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def rename(self, title: str) -> Section:
        if is_blank(title):
            return self
        return self.model_copy(update={"title": title})

    def append_column(self, column: Column) -> Section:
        return self.model_copy(update={"columns": (*self.columns, column)})

    def remove_last_column(self) -> Section:
        """Drop the last column, unless it is the only one left."""
        if len(self.columns) <= 1:
            return self
        return self.model_copy(update={"columns": self.columns[:-1]})

    def update_column(self, column_id: str, change: Callable[[Column], Column]) -> Section:
        """Apply change to the matching column(s)."""
        columns = tuple(change(c) if c.id == column_id else c for c in self.columns)
        if all(new is old for new, old in zip(columns, self.columns, strict=True)):
            return self
        return self.model_copy(update={"columns": columns})

    def clear_completed(self) -> Section:
        columns = tuple(c.without_completed() for c in self.columns)
        if all(new is old for new, old in zip(columns, self.columns, strict=True)):
            return self
        return self.model_copy(update={"columns": columns})

    def iter_tasks(self) -> Iterator[tuple[Column, Task]]:
        """Yield (column, task) pairs in display order."""
        for column in self.columns:
            for task in column.tasks:
                yield column, task


class Board(BaseModel):
    """Full board: the ordered sequence of sections."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...] = Field(default_factory=tuple)

    # --- Construction / serialization ---

    @classmethod
    def from_data(cls, data: Iterable[Any]) -> Board:
        """Build a Board from a decoded JSON array of section objects.

        Missing entity fields fall back to their defaults, as do fields
        holding null or the wrong type; unknown fields are kept. Raises
        pydantic.ValidationError for elements that cannot be read as
        entities at all.
        """
        return cls(sections=tuple(Section.model_validate(item) for item in data))

    def to_data(self) -> list[dict[str, Any]]:
        """Convert to the JSON-ready list used for storage and export."""
        return [section.model_dump(mode="json") for section in self.sections]

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to a JSON array string."""
        if indent is None:
            return json.dumps(self.to_data(), separators=(",", ":"), ensure_ascii=False)
        return json.dumps(self.to_data(), indent=indent, ensure_ascii=False)

    @classmethod
    def default(cls) -> Board:
        """Create the first-run board with sample content."""
        return cls.from_data(
            [
                {
                    "id": "1",
                    "title": "Project Planning",
                    "columns": [
                        {
                            "id": "c1",
                            "title": "To Do",
                            "tasks": [
                                {"id": "t1", "title": "Sample task 1", "completed": False},
                                {"id": "t3", "title": "Completed sample task", "completed": True},
                            ],
                        },
                        {
                            "id": "c2",
                            "title": "In Progress",
                            "tasks": [
                                {"id": "t2", "title": "Sample task 2", "completed": False}
                            ],
                        },
                        {"id": "c3", "title": "Done", "tasks": []},
                    ],
                },
                {
                    "id": "2",
                    "title": "Development",
                    "columns": [
                        {"id": "c4", "title": "Backlog", "tasks": []},
                        {"id": "c5", "title": "In Development", "tasks": []},
                    ],
                },
            ]
        )

    # --- Queries ---

    def get_section(self, section_id: str) -> Section | None:
        """Get a section by id, or None if absent."""
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def get_column(self, section_id: str, column_id: str) -> Column | None:
        section = self.get_section(section_id)
        if section is None:
            return None
        return section.get_column(column_id)

    def get_task(self, section_id: str, column_id: str, task_id: str) -> Task | None:
        column = self.get_column(section_id, column_id)
        if column is None:
            return None
        return column.get_task(task_id)

    def task_count(self) -> int:
        return sum(len(c.tasks) for s in self.sections for c in s.columns)

    # --- Section operations ---

    def add_section(
        self,
        title: str = DEFAULT_SECTION_TITLE,
        column_title: str = DEFAULT_COLUMN_TITLE,
        id_factory: IdFactory = new_id,
    ) -> Board:
        """Append a new section holding one default column."""
        section = Section(
            id=id_factory(SECTION_PREFIX),
            title=title,
            columns=(Column(id=id_factory(COLUMN_PREFIX), title=column_title),),
        )
        return self.model_copy(update={"sections": (*self.sections, section)})

    def delete_section(self, section_id: str) -> Board:
        """Remove the section and everything in it."""
        remaining = tuple(s for s in self.sections if s.id != section_id)
        if len(remaining) == len(self.sections):
            return self
        return self.model_copy(update={"sections": remaining})

    def rename_section(self, section_id: str, title: str) -> Board:
        return self._update_section(section_id, lambda s: s.rename(title))

    def clear_completed_tasks(self, section_id: str) -> Board:
        """Remove completed tasks from every column of one section."""
        return self._update_section(section_id, Section.clear_completed)

    # --- Column operations ---

    def add_column(
        self,
        section_id: str,
        title: str = DEFAULT_COLUMN_TITLE,
        id_factory: IdFactory = new_id,
    ) -> Board:
        if self.get_section(section_id) is None:
            return self
        column = Column(id=id_factory(COLUMN_PREFIX), title=title)
        return self._update_section(section_id, lambda s: s.append_column(column))

    def remove_column(self, section_id: str) -> Board:
        """Remove the section's last column while more than one remains."""
        return self._update_section(section_id, Section.remove_last_column)

    def rename_column(self, section_id: str, column_id: str, title: str) -> Board:
        return self._update_column(section_id, column_id, lambda c: c.rename(title))

    # --- Task operations ---

    def add_task(
        self,
        section_id: str,
        column_id: str,
        title: str,
        id_factory: IdFactory = new_id,
    ) -> Board:
        """Append a new open task; blank titles are ignored."""
        if is_blank(title) or self.get_column(section_id, column_id) is None:
            return self
        task = Task(id=id_factory(TASK_PREFIX), title=title, completed=False)
        return self._update_column(section_id, column_id, lambda c: c.append_task(task))

    def delete_task(self, section_id: str, column_id: str, task_id: str) -> Board:
        return self._update_column(section_id, column_id, lambda c: c.remove_task(task_id))

    def rename_task(self, section_id: str, column_id: str, task_id: str, title: str) -> Board:
        return self._update_task(section_id, column_id, task_id, lambda t: t.rename(title))

    def toggle_task_completion(self, section_id: str, column_id: str, task_id: str) -> Board:
        return self._update_task(section_id, column_id, task_id, Task.toggled)

    def move_task(
        self,
        task: Task,
        from_section_id: str,
        from_column_id: str,
        to_section_id: str,
        to_column_id: str,
    ) -> Board:
        """Relocate a task: remove it from the source, append it to the destination.

        The appended value is the task passed in, not the copy found in the
        source column. If the source no longer holds the task, only the
        append happens. If the destination column does not exist, nothing
        changes.
        """
        if self.get_column(to_section_id, to_column_id) is None:
            return self
        removed = self._update_column(
            from_section_id, from_column_id, lambda c: c.remove_task(task.id)
        )
        return removed._update_column(to_section_id, to_column_id, lambda c: c.append_task(task))

    # --- Private helpers ---

    def _update_section(self, section_id: str, change: Callable[[Section], Section]) -> Board:
        sections = tuple(change(s) if s.id == section_id else s for s in self.sections)
        if all(new is old for new, old in zip(sections, self.sections, strict=True)):
            return self
        return self.model_copy(update={"sections": sections})

    def _update_column(
        self, section_id: str, column_id: str, change: Callable[[Column], Column]
    ) -> Board:
        return self._update_section(section_id, lambda s: s.update_column(column_id, change))

    def _update_task(
        self, section_id: str, column_id: str, task_id: str, change: Callable[[Task], Task]
    ) -> Board:
        return self._update_column(section_id, column_id, lambda c: c.update_task(task_id, change))
