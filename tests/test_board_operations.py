"""Unit tests for the pure Board transformations."""

from collections.abc import Callable

import pytest

from focustask.models import DEFAULT_COLUMN_TITLE, DEFAULT_SECTION_TITLE, Board, Task


def column_task_ids(board: Board, section_id: str, column_id: str) -> list[str]:
    column = board.get_column(section_id, column_id)
    assert column is not None
    return [t.id for t in column.tasks]


def occurrences(board: Board, task_id: str) -> int:
    return sum(1 for s in board.sections for c in s.columns for t in c.tasks if t.id == task_id)


class TestSections:
    """Tests for section operations."""

    def test_add_section_appends_with_one_column(self, board: Board, id_factory: Callable):
        """add_section appends a default section holding one default column."""
        result = board.add_section(id_factory=id_factory)

        assert len(result.sections) == 3
        section = result.sections[-1]
        assert section.id == "n1"
        assert section.title == DEFAULT_SECTION_TITLE
        assert len(section.columns) == 1
        assert section.columns[0].id == "col-n2"
        assert section.columns[0].title == DEFAULT_COLUMN_TITLE
        assert section.columns[0].tasks == ()

    def test_add_section_default_ids_are_unique(self, board: Board):
        """Generated ids never repeat."""
        result = board.add_section().add_section()
        ids = [s.id for s in result.sections]
        assert len(ids) == len(set(ids))
        assert result.sections[-1].columns[0].id.startswith("col-")

    def test_delete_section_cascades(self, board: Board):
        """Deleting a section removes its columns and tasks."""
        result = board.delete_section("s1")
        assert [s.id for s in result.sections] == ["s2"]
        assert result.task_count() == 1

    def test_delete_unknown_section_is_noop(self, board: Board):
        assert board.delete_section("missing") is board

    def test_rename_section(self, board: Board):
        result = board.rename_section("s2", "House")
        assert result.get_section("s2").title == "House"
        assert result.get_section("s1") is board.get_section("s1")

    @pytest.mark.parametrize("title", ["", "   "])
    def test_rename_section_blank_is_noop(self, board: Board, title: str):
        assert board.rename_section("s1", title) is board


class TestClearCompleted:
    """Tests for clear_completed_tasks."""

    def test_removes_completed_in_section_only(self, board: Board):
        """Completed tasks go from every column of the named section."""
        result = board.clear_completed_tasks("s1")

        assert column_task_ids(result, "s1", "todo") == ["t1"]
        assert column_task_ids(result, "s1", "done") == []
        assert result.get_section("s2") is board.get_section("s2")

    def test_idempotent(self, board: Board):
        once = board.clear_completed_tasks("s1")
        twice = once.clear_completed_tasks("s1")
        assert twice == once
        assert twice is once

    def test_nothing_completed_is_noop(self, board: Board):
        assert board.clear_completed_tasks("s2") is board


class TestColumns:
    """Tests for column operations."""

    def test_add_column(self, board: Board, id_factory: Callable):
        result = board.add_column("s2", id_factory=id_factory)
        section = result.get_section("s2")
        assert [c.id for c in section.columns] == ["chores", "col-n1"]
        assert section.columns[-1].title == DEFAULT_COLUMN_TITLE

    def test_add_column_unknown_section(self, board: Board):
        assert board.add_column("missing") is board

    def test_remove_column_removes_last(self, board: Board):
        result = board.remove_column("s1")
        assert [c.id for c in result.get_section("s1").columns] == ["todo"]

    def test_remove_only_column_is_noop(self, board: Board):
        """A section never drops below one column."""
        result = board.remove_column("s2")
        assert result is board
        assert len(result.get_section("s2").columns) == 1

    def test_remove_column_repeatedly_stops_at_one(self, board: Board):
        result = board
        for _ in range(5):
            result = result.remove_column("s1")
        assert len(result.get_section("s1").columns) == 1

    def test_rename_column(self, board: Board):
        result = board.rename_column("s1", "done", "Finished")
        assert result.get_column("s1", "done").title == "Finished"

    @pytest.mark.parametrize("title", ["", " \t "])
    def test_rename_column_blank_is_noop(self, board: Board, title: str):
        assert board.rename_column("s1", "done", title) is board

    def test_rename_column_wrong_section_is_noop(self, board: Board):
        assert board.rename_column("s2", "done", "Finished") is board


class TestTasks:
    """Tests for task operations."""

    def test_add_task_appends_open_task(self, board: Board, id_factory: Callable):
        result = board.add_task("s1", "todo", "Plan", id_factory=id_factory)

        column = result.get_column("s1", "todo")
        assert [t.id for t in column.tasks] == ["t1", "t2", "task-n1"]
        assert column.tasks[-1] == Task(id="task-n1", title="Plan", completed=False)

    @pytest.mark.parametrize("title", ["", "   "])
    def test_add_task_blank_is_noop(self, board: Board, title: str):
        """Blank titles never create a task."""
        result = board.add_task("s1", "todo", title)
        assert result is board
        assert column_task_ids(result, "s1", "todo") == ["t1", "t2"]

    def test_add_task_unknown_column_is_noop(self, board: Board):
        assert board.add_task("s1", "missing", "Plan") is board

    def test_delete_task(self, board: Board):
        result = board.delete_task("s1", "todo", "t1")
        assert column_task_ids(result, "s1", "todo") == ["t2"]

    def test_delete_task_wrong_column_is_noop(self, board: Board):
        assert board.delete_task("s1", "done", "t1") is board

    def test_toggle_task_completion(self, board: Board):
        result = board.toggle_task_completion("s1", "todo", "t1")
        task = result.get_task("s1", "todo", "t1")
        assert task.completed is True
        assert task.title == "Write spec"
        assert result.get_task("s1", "todo", "t2") is board.get_task("s1", "todo", "t2")

    def test_toggle_unknown_task_is_noop(self, board: Board):
        assert board.toggle_task_completion("s1", "todo", "missing") is board

    def test_rename_task(self, board: Board):
        result = board.rename_task("s2", "chores", "t4", "Laundry")
        assert result.get_task("s2", "chores", "t4").title == "Laundry"

    @pytest.mark.parametrize("title", ["", "    "])
    def test_rename_task_blank_is_noop(self, board: Board, title: str):
        assert board.rename_task("s2", "chores", "t4", title) is board

    def test_snapshots_stay_valid(self, board: Board):
        """Older boards are not affected by later operations."""
        before = board.to_data()
        board.add_task("s1", "todo", "x").delete_section("s2").toggle_task_completion(
            "s1", "todo", "t1"
        )
        assert board.to_data() == before


class TestMoveTask:
    """Tests for moving tasks between columns."""

    def test_move_scenario_to_do_to_done(self):
        """Moving the only To Do task leaves To Do empty and Done holding it."""
        board = Board.from_data(
            [
                {
                    "id": "s",
                    "title": "S",
                    "columns": [
                        {
                            "id": "c1",
                            "title": "To Do",
                            "tasks": [{"id": "t", "title": "Write spec", "completed": False}],
                        },
                        {"id": "c2", "title": "Done", "tasks": []},
                    ],
                }
            ]
        )
        task = board.get_task("s", "c1", "t")

        result = board.move_task(task, "s", "c1", "s", "c2")

        assert result.get_column("s", "c1").tasks == ()
        assert result.get_column("s", "c2").tasks == (task,)

    def test_move_across_sections(self, board: Board):
        task = board.get_task("s1", "todo", "t1")
        result = board.move_task(task, "s1", "todo", "s2", "chores")

        assert column_task_ids(result, "s1", "todo") == ["t2"]
        assert column_task_ids(result, "s2", "chores") == ["t4", "t1"]

    def test_move_conserves_task_count(self, board: Board):
        """Every task exists exactly once after any move between known columns."""
        targets = [("s1", "todo"), ("s1", "done"), ("s2", "chores")]
        for section in board.sections:
            for column in section.columns:
                for task in column.tasks:
                    for to_section, to_column in targets:
                        result = board.move_task(
                            task, section.id, column.id, to_section, to_column
                        )
                        assert result.task_count() == board.task_count()
                        assert occurrences(result, task.id) == 1

    def test_move_within_same_column_goes_to_end(self, board: Board):
        task = board.get_task("s1", "todo", "t1")
        result = board.move_task(task, "s1", "todo", "s1", "todo")
        assert column_task_ids(result, "s1", "todo") == ["t2", "t1"]

    def test_move_uses_supplied_task_value(self, board: Board):
        """The caller's copy of the task is what lands in the destination."""
        stale = Task(id="t1", title="Old title", completed=True)
        result = board.move_task(stale, "s1", "todo", "s1", "done")
        assert result.get_task("s1", "done", "t1") == stale

    def test_move_with_stale_source_still_appends(self, board: Board):
        """If the source no longer holds the task, only the append happens."""
        task = Task(id="t9", title="Ghost")
        result = board.move_task(task, "s1", "todo", "s1", "done")
        assert column_task_ids(result, "s1", "todo") == ["t1", "t2"]
        assert column_task_ids(result, "s1", "done") == ["t3", "t9"]

    def test_move_to_unknown_column_is_noop(self, board: Board):
        """A task is never dropped because its destination is missing."""
        task = board.get_task("s1", "todo", "t1")
        assert board.move_task(task, "s1", "todo", "s1", "missing") is board
        assert board.move_task(task, "s1", "todo", "missing", "todo") is board
