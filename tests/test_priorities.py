from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from core.priorities import (
    DEFAULT_PRIORITY,
    PRIORITY_META,
    Priority,
    normalize_priority,
    priority_color,
    priority_label,
    priority_options,
)


def test_default_is_low():
    assert DEFAULT_PRIORITY is Priority.LOW
    assert normalize_priority(None) is Priority.LOW


def test_rank_orders_high_first():
    assert sorted(Priority, key=lambda p: p.rank) == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


def test_normalize_accepts_values_names_and_enums():
    assert normalize_priority("high") is Priority.HIGH
    assert normalize_priority("MEDIUM") is Priority.MEDIUM
    assert normalize_priority(Priority.LOW) is Priority.LOW
    assert normalize_priority("urgent") is DEFAULT_PRIORITY


def test_every_priority_has_display_metadata():
    for level in Priority:
        assert priority_label(level) == PRIORITY_META[level]["label"]
        assert priority_color(level).startswith("#")
    assert priority_label(Priority.MEDIUM, short=True) == "Med"


def test_priority_options_are_ordered_by_rank():
    assert list(priority_options()) == ["high", "medium", "low"]
