"""Multi-select helpers for the element list.

A selection is a list of element ids in the order they were picked.
"""

from typing import Iterable, List, Optional, Sequence

from element_list_editor.core.element import Element


def is_selected(selection: Iterable[str], element_id: str) -> bool:
    return element_id in selection


def normalize_selection(selection: Iterable[str], elements: Sequence[Element]) -> List[str]:
    """Drop duplicates and ids that are not in ``elements``, keeping pick order."""
    present = {e.id for e in elements}
    result: List[str] = []
    for element_id in selection:
        if element_id in present and element_id not in result:
            result.append(element_id)
    return result


def toggle_selection(
    selection: Sequence[str],
    element_id: str,
    additive: bool,
    elements: Optional[Sequence[Element]] = None,
) -> List[str]:
    """Apply a click on ``element_id`` to the selection.

    Parameters
    ----------
    selection : Sequence[str]
        Current selection.
    element_id : str
        Id of the clicked element.
    additive : bool
        True for a shift-click: toggles ``element_id`` in or out of the
        selection. False clears the selection.
    elements : Sequence[Element], optional
        When given, clicks on ids that are not in the list are ignored.

    Returns
    -------
    List[str]
        The new selection. The input is not modified.
    """
    if not additive:
        return []
    if element_id in selection:
        return [i for i in selection if i != element_id]
    if elements is not None and all(e.id != element_id for e in elements):
        return list(selection)
    return list(selection) + [element_id]


def selected_elements(elements: Sequence[Element], selection: Iterable[str]) -> List[Element]:
    """Return the selected elements in selection order."""
    by_id = {e.id: e for e in elements}
    return [by_id[i] for i in selection if i in by_id]
