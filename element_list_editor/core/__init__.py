"""Core data model and algorithms for the element list."""

from element_list_editor.core.element import Element, ElementList
from element_list_editor.core.naming import (
    CopyKey,
    allocate_unique_name,
    allocate_unique_names,
    parse_copy_key,
)
from element_list_editor.core.reorder import (
    DragCancel,
    DragEnd,
    DragStart,
    DragState,
    ReorderResult,
    array_move,
    reorder,
)
from element_list_editor.core.selection import (
    is_selected,
    normalize_selection,
    selected_elements,
    toggle_selection,
)

__all__ = [
    "Element",
    "ElementList",
    "CopyKey",
    "parse_copy_key",
    "allocate_unique_name",
    "allocate_unique_names",
    "DragStart",
    "DragEnd",
    "DragCancel",
    "DragState",
    "ReorderResult",
    "array_move",
    "reorder",
    "is_selected",
    "normalize_selection",
    "selected_elements",
    "toggle_selection",
]
