"""Tests for multi-select helpers."""

from element_list_editor.core.element import Element
from element_list_editor.core.selection import (
    is_selected,
    normalize_selection,
    selected_elements,
    toggle_selection,
)


def _make_elements():
    return [Element("a", "A"), Element("b", "B"), Element("c", "C")]


def test_plain_click_clears_selection():
    """A click without shift empties the selection."""
    assert toggle_selection(["a", "b"], "c", additive=False) == []


def test_shift_click_adds():
    """Shift-click appends an unselected element."""
    assert toggle_selection(["a"], "c", additive=True) == ["a", "c"]


def test_shift_click_removes():
    """Shift-click on a selected element deselects it."""
    assert toggle_selection(["a", "b", "c"], "b", additive=True) == ["a", "c"]


def test_shift_click_unknown_id_ignored():
    """Clicks on ids outside the list are ignored."""
    assert toggle_selection(["a"], "zz", additive=True, elements=_make_elements()) == ["a"]


def test_toggle_does_not_mutate():
    """toggle_selection returns a new list."""
    selection = ["a"]
    toggle_selection(selection, "b", additive=True)
    assert selection == ["a"]


def test_is_selected():
    """is_selected checks membership."""
    assert is_selected(["a", "b"], "b")
    assert not is_selected([], "b")


def test_normalize_selection():
    """Duplicates and stale ids are dropped, pick order is kept."""
    assert normalize_selection(["c", "zz", "a", "c"], _make_elements()) == ["c", "a"]


def test_selected_elements_in_pick_order():
    """selected_elements follows the selection order."""
    elements = _make_elements()
    picked = selected_elements(elements, ["c", "a", "zz"])
    assert [e.id for e in picked] == ["c", "a"]
