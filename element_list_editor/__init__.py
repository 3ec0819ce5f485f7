"""
Element List Editor — copy naming and batch drag reordering for a template editor's element list.
"""

__version__ = "0.1.0"

from element_list_editor.core.element import Element, ElementList
from element_list_editor.core.naming import allocate_unique_name, allocate_unique_names
from element_list_editor.core.reorder import (
    DragCancel,
    DragEnd,
    DragStart,
    DragState,
    ReorderResult,
    reorder,
)
from element_list_editor.core.sortable_list import SortableList


def allocate_unique_name_for(element, elements, pending_keys=None):  # type: ignore[no-untyped-def]
    """Convenience function to name a copy of ``element`` against a list of elements."""
    return allocate_unique_name(element.key, elements, pending_keys or [])


__all__ = [
    "Element",
    "ElementList",
    "SortableList",
    "DragStart",
    "DragEnd",
    "DragCancel",
    "DragState",
    "ReorderResult",
    "reorder",
    "allocate_unique_name",
    "allocate_unique_names",
    "allocate_unique_name_for",
    "__version__",
]
