"""Tests for tasks.py - board, list and task model."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from tasks import PLACEHOLDER_DUE, PLACEHOLDER_LABEL, Board, Task, TaskList


def make_board(*titles: str, tasks_per_list: int = 0) -> Board:
    board = Board()
    for title in titles:
        task_list = board.add_list(title)
        for i in range(tasks_per_list):
            task_list.add_task(Task(title=f"{title}-{i}"))
        task_list.selected = 0
    board.active_list = 1
    return board


class TestTask:
    """Tests for the Task entity."""

    def test_new_task_has_placeholder_due(self) -> None:
        task = Task()

        assert task.due == PLACEHOLDER_DUE
        assert task.label == PLACEHOLDER_LABEL
        assert not task.has_due_date
        assert task.done is False

    def test_dict_round_trip(self) -> None:
        task = Task(title="Report", due=date(2025, 1, 3), label="2025/01/03", done=True)

        assert Task.from_dict(task.to_dict()) == task

    def test_from_dict_defaults(self) -> None:
        task = Task.from_dict({"title": "Bare"})

        assert task.due == PLACEHOLDER_DUE
        assert task.label == PLACEHOLDER_LABEL
        assert task.done is False

    def test_from_dict_rejects_bad_date(self) -> None:
        with pytest.raises(ValueError):
            Task.from_dict({"title": "x", "due": "2025-02-30"})


class TestTaskList:
    """Tests for TaskList selection handling."""

    def test_add_task_selects_it(self) -> None:
        task_list = TaskList(id=1)
        task_list.add_task(Task(title="a"))
        task = task_list.add_task(Task(title="b"))

        assert task_list.selected == 1
        assert task_list.selected_task is task

    def test_selected_task_none_when_empty(self) -> None:
        assert TaskList(id=1).selected_task is None

    def test_remove_task_matches_identity_not_value(self) -> None:
        older = Task()
        newer = Task()
        task_list = TaskList(id=1, tasks=[older, newer], selected=1)

        assert task_list.remove_task(newer) is True

        assert task_list.tasks[0] is older
        assert task_list.selected == 0

    def test_remove_task_missing_object(self) -> None:
        task_list = TaskList(id=1, tasks=[Task(title="a")])

        assert task_list.remove_task(Task(title="a")) is False
        assert len(task_list.tasks) == 1

    def test_move_selection_is_clamped(self) -> None:
        task_list = TaskList(id=1, tasks=[Task(title=str(i)) for i in range(3)])

        task_list.move_selection(-1)
        assert task_list.selected == 0

        for _ in range(5):
            task_list.move_selection(1)
        assert task_list.selected == 2

    def test_move_selection_on_empty_list(self) -> None:
        task_list = TaskList(id=1)

        task_list.move_selection(1)

        assert task_list.selected == 0

    def test_delete_selected_clamps_to_last(self) -> None:
        task_list = TaskList(id=1, tasks=[Task(title=str(i)) for i in range(3)], selected=2)

        removed = task_list.delete_selected()

        assert removed.title == "2"
        assert task_list.selected == 1

    def test_delete_selected_empty_is_noop(self) -> None:
        task_list = TaskList(id=1)

        assert task_list.delete_selected() is None
        assert task_list.selected == 0

    def test_delete_last_task_resets_selection(self) -> None:
        task_list = TaskList(id=1, tasks=[Task(title="only")])

        task_list.delete_selected()

        assert task_list.tasks == []
        assert task_list.selected == 0

    def test_from_dict_clamps_stale_selection(self) -> None:
        task_list = TaskList.from_dict(
            {"title": "t", "selected": 7, "tasks": [{"title": "a"}, {"title": "b"}]},
            list_id=1,
        )

        assert task_list.selected == 1


class TestBoard:
    """Tests for the Board aggregate."""

    def test_empty_board(self) -> None:
        board = Board()

        assert board.list_count == 0
        assert board.active is None

    def test_add_list_activates_it(self) -> None:
        board = make_board("a", "b")

        new_list = board.add_list("c")

        assert new_list.id == 3
        assert board.active_list == 3
        assert board.active is new_list

    def test_constructor_renumbers_and_clamps(self) -> None:
        board = Board(lists=[TaskList(id=7), TaskList(id=9)], active_list=5)

        assert [tl.id for tl in board.lists] == [1, 2]
        assert board.active_list == 2

    @pytest.mark.parametrize(
        "active, removed, expected_active",
        [
            (1, 3, 1),  # active before removed list: unchanged
            (3, 3, 2),  # removed the active list
            (4, 2, 3),  # active after removed list: shifts down
            (1, 1, 1),  # floored at 1
        ],
    )
    def test_remove_list_renumbers(self, active: int, removed: int, expected_active: int) -> None:
        board = make_board("a", "b", "c", "d")
        board.active_list = active

        board.remove_list(removed)

        assert [tl.id for tl in board.lists] == [1, 2, 3]
        assert board.active_list == expected_active

    def test_remove_list_out_of_range(self) -> None:
        board = make_board("a")

        assert board.remove_list(5) is None
        assert board.list_count == 1

    def test_delete_active_on_empty_board(self) -> None:
        board = Board()

        assert board.delete_active() is None
        assert board.list_count == 0

    def test_delete_active_middle_list(self) -> None:
        board = make_board("a", "b", "c")
        board.active_list = 2

        removed = board.delete_active()

        assert removed.title == "b"
        assert [tl.title for tl in board.lists] == ["a", "c"]
        assert [tl.id for tl in board.lists] == [1, 2]
        assert board.active_list == 1

    def test_select_list_in_range(self) -> None:
        board = make_board("a", "b", "c")

        assert board.select_list(3) is True
        assert board.active_list == 3

    @pytest.mark.parametrize("target", [0, 4, 9])
    def test_select_list_out_of_range_ignored(self, target: int) -> None:
        board = make_board("a", "b", "c")

        assert board.select_list(target) is False
        assert board.active_list == 1

    def test_step_list_clamps_and_resets_selection(self) -> None:
        board = make_board("a", "b", tasks_per_list=3)
        board.lists[1].selected = 2

        board.step_list(1)
        assert board.active_list == 2
        assert board.lists[1].selected == 0

        board.step_list(1)
        assert board.active_list == 2

        board.step_list(-1)
        board.step_list(-1)
        assert board.active_list == 1

    def test_step_list_on_empty_board(self) -> None:
        board = Board()

        board.step_list(1)

        assert board.active_list == 1

    def test_from_list_assigns_dense_ids(self) -> None:
        board = Board.from_list([
            {"id": 4, "title": "x", "tasks": []},
            {"id": 9, "title": "y", "tasks": [{"title": "t", "due": "2025-01-01"}]},
        ])

        assert [tl.id for tl in board.lists] == [1, 2]
        assert board.lists[1].tasks[0].due == date(2025, 1, 1)

    def test_to_list_matches_from_list(self) -> None:
        board = make_board("a", "b", tasks_per_list=2)

        assert Board.from_list(board.to_list()).to_list() == board.to_list()
