from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from core.priorities import Priority
from models.todo_item import TaskFilter, TodoItem, next_item_id
from services.errors import ValidationError
from services.task_board import TaskBoard, validate_task_text


def _board_with(*specs):
    board = TaskBoard()
    for text, done, priority in specs:
        item = board.add(text, priority)
        if done:
            board.toggle_done(item.id)
    return board


@pytest.mark.parametrize("text", ["", "   ", None])
def test_add_blank_text_is_noop(text):
    board = TaskBoard()
    assert board.add(text) is None
    assert board.items == []


def test_add_appends_pending_item():
    board = TaskBoard()
    item = board.add("Buy milk", Priority.HIGH)
    assert len(board.items) == 1
    assert item.is_done is False
    assert item.priority is Priority.HIGH
    assert item.text == "Buy milk"


def test_add_trims_text_and_defaults_to_low():
    board = TaskBoard()
    item = board.add("  Walk dog  ")
    assert item.text == "Walk dog"
    assert item.priority is Priority.LOW


def test_ids_are_unique_even_when_created_together():
    ids = [next_item_id() for _ in range(500)]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_toggle_done_flips_flag():
    board = TaskBoard()
    item = board.add("Buy milk")
    board.toggle_done(item.id)
    assert board.items[0].is_done is True
    board.toggle_done(item.id)
    assert board.items[0].is_done is False


def test_unknown_ids_leave_collection_unchanged():
    board = _board_with(("Buy milk", False, Priority.LOW), ("Walk dog", True, Priority.HIGH))
    before = [(i.id, i.text, i.is_done, i.priority) for i in board.items]
    board.toggle_done(-1)
    board.remove(-1)
    after = [(i.id, i.text, i.is_done, i.priority) for i in board.items]
    assert after == before


def test_remove_deletes_matching_item():
    board = TaskBoard()
    keep = board.add("Keep")
    drop = board.add("Drop")
    board.remove(drop.id)
    assert [i.id for i in board.items] == [keep.id]


def test_items_returns_copy():
    board = TaskBoard()
    board.add("One")
    board.items.clear()
    assert len(board.items) == 1


def test_stats_empty_board():
    stats = TaskBoard().stats
    assert (stats.total, stats.done, stats.pending) == (0, 0, 0)
    assert stats.completion_percent == 0


def test_stats_half_done():
    board = _board_with(
        ("a", True, Priority.LOW),
        ("b", True, Priority.LOW),
        ("c", False, Priority.LOW),
        ("d", False, Priority.LOW),
    )
    stats = board.stats
    assert stats.total == 4
    assert stats.done == 2
    assert stats.pending + stats.done == stats.total
    assert stats.completion_percent == 50


def test_stats_partial_percent():
    board = _board_with(("a", True, Priority.LOW), ("b", False, Priority.LOW), ("c", False, Priority.LOW))
    assert int(board.stats.completion_percent) == 33


def test_visible_items_sorted_by_done_then_priority():
    board = _board_with(
        ("low pending", False, Priority.LOW),
        ("high pending", False, Priority.HIGH),
        ("high done", True, Priority.HIGH),
    )
    assert [i.text for i in board.visible_items] == ["high pending", "low pending", "high done"]


def test_visible_items_sort_is_stable():
    board = _board_with(
        ("first", False, Priority.MEDIUM),
        ("second", False, Priority.MEDIUM),
        ("third", False, Priority.MEDIUM),
    )
    assert [i.text for i in board.visible_items] == ["first", "second", "third"]


def test_pending_filter_and_search():
    board = _board_with(
        ("Buy milk", False, Priority.LOW),
        ("Buy milk", True, Priority.LOW),
        ("Walk dog", False, Priority.LOW),
    )
    first = board.items[0]
    board.set_filter(TaskFilter.PENDING)
    board.set_search_query("milk")
    assert board.visible_items == [first]


def test_search_is_case_insensitive():
    board = _board_with(("Buy MILK", False, Priority.LOW), ("Walk dog", False, Priority.LOW))
    board.set_search_query("milk")
    assert [i.text for i in board.visible_items] == ["Buy MILK"]


def test_done_filter():
    board = _board_with(("a", False, Priority.LOW), ("b", True, Priority.LOW))
    board.set_filter("done")
    assert [i.text for i in board.visible_items] == ["b"]


def test_all_filter_with_empty_query_shows_everything():
    board = _board_with(("a", False, Priority.LOW), ("b", True, Priority.HIGH), ("c", False, Priority.MEDIUM))
    board.set_filter(TaskFilter.ALL)
    board.set_search_query("")
    assert len(board.visible_items) == 3


def test_filters_do_not_change_stats():
    board = _board_with(("a", False, Priority.LOW), ("b", True, Priority.LOW))
    board.set_filter(TaskFilter.DONE)
    board.set_search_query("zzz")
    assert board.visible_items == []
    assert board.stats.total == 2


def test_validate_task_text():
    assert validate_task_text("  x ") == "x"
    with pytest.raises(ValidationError):
        validate_task_text("   ")


def test_todo_item_defaults():
    item = TodoItem(text="x")
    assert item.is_done is False
    assert item.priority is Priority.LOW
    assert isinstance(item.id, int)
