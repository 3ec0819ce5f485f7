"""SortableList — editing session over an element list."""

import copy
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Sequence

from element_list_editor.core.element import Element, ElementList
from element_list_editor.core.naming import allocate_unique_names
from element_list_editor.core.reorder import (
    DragCancel,
    DragEnd,
    DragStart,
    DragState,
    DragTransition,
    reorder,
)
from element_list_editor.core.selection import toggle_selection

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class SortableList:
    """Stateful owner of an element list, its selection and drag state.

    SortableList is the list UI's side of the contract: it keeps the
    authoritative list between events and feeds each click, drag and
    duplicate action through the stateless core.

    Parameters
    ----------
    elements : Sequence[Element] or ElementList, optional
        Initial list. Ids must be unique.
    id_factory : callable, optional
        Produces ids for duplicated elements. Defaults to random hex ids.

    Examples
    --------
    >>> lst = SortableList([Element("1", "a"), Element("2", "b"), Element("3", "c")])
    >>> lst.drag_start("1")
    >>> lst.drag_end("1", "3")
    >>> [e.key for e in lst.elements]
    ['b', 'c', 'a']
    >>> lst.duplicate(["1"])[0].key
    'a copy'
    """

    def __init__(
        self,
        elements: Optional[Sequence[Element]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        if isinstance(elements, ElementList):
            elements = elements.elements
        initial = ElementList(list(elements or []))
        self._original = copy.deepcopy(initial.elements)  # Untouched reference
        self._elements: List[Element] = list(initial.elements)
        self._selection: List[str] = []
        self._drag: Optional[DragState] = None
        self._id_factory = id_factory or _new_id

    @property
    def elements(self) -> List[Element]:
        """The current list (live; do not mutate)."""
        return self._elements

    @property
    def selection(self) -> List[str]:
        return list(self._selection)

    @property
    def active_id(self) -> Optional[str]:
        """Id of the element being dragged, if any."""
        return self._drag.active_id if self._drag is not None else None

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def get_elements(self) -> List[Element]:
        """Return a deep copy of the current list."""
        return copy.deepcopy(self._elements)

    # ------------------------------------------------------------ selection
    def select(self, element_id: str, additive: bool = False) -> List[str]:
        """Handle a click on an element.

        A plain click clears the selection; a shift-click (``additive``)
        toggles the element in or out of it.
        """
        self._selection = toggle_selection(self._selection, element_id, additive, self._elements)
        return self.selection

    def clear_selection(self) -> None:
        self._selection = []

    # ------------------------------------------------------------ dragging
    def drag_start(self, active_id: str) -> None:
        """Begin dragging ``active_id``.

        Raises
        ------
        RuntimeError
            If another drag has not ended or been cancelled yet.
        """
        if self._drag is not None:
            raise RuntimeError(f"Drag of '{self._drag.active_id}' is still in progress")
        self._apply(DragStart(active_id))

    def drag_end(self, active_id: str, over_id: Optional[str] = None) -> None:
        """Drop ``active_id`` over ``over_id`` (None when there is no target)."""
        self._apply(DragEnd(active_id, over_id))

    def drag_cancel(self) -> None:
        """Abort the current drag and restore the order it started from."""
        self._apply(DragCancel())

    def _apply(self, transition: DragTransition) -> None:
        result = reorder(self._elements, self._selection, transition, self._drag)
        self._elements = result.elements
        self._selection = result.selection
        self._drag = result.state

    # ------------------------------------------------------------ duplicate
    def duplicate(self, element_ids: Optional[Sequence[str]] = None) -> List[Element]:
        """Append copies of the given elements with unique keys.

        Parameters
        ----------
        element_ids : Sequence[str], optional
            Elements to copy. Defaults to the current selection.

        Returns
        -------
        List[Element]
            The new elements, in the order they were appended.

        Raises
        ------
        KeyError
            If an id is not in the list.
        RuntimeError
            If a drag is in progress.
        """
        if self._drag is not None:
            raise RuntimeError(f"Cannot duplicate while '{self._drag.active_id}' is being dragged")
        if element_ids is None:
            element_ids = self._selection
        by_id = {e.id: e for e in self._elements}
        sources = []
        for element_id in element_ids:
            if element_id not in by_id:
                raise KeyError(f"Element '{element_id}' not found")
            sources.append(by_id[element_id])

        names = allocate_unique_names([e.key for e in sources], self._elements)
        copies = [
            Element(id=self._id_factory(), key=name, data=copy.deepcopy(source.data))
            for source, name in zip(sources, names)
        ]
        self._elements = self._elements + copies
        logger.debug("Duplicated %d elements: %s", len(copies), names)
        return copies

    # ------------------------------------------------------------ session
    def reset(self) -> None:
        """Reset to the original list, discarding all changes."""
        self._elements = copy.deepcopy(self._original)
        self._selection = []
        self._drag = None
        logger.info("Element list reset to %d original elements", len(self._elements))

    def has_changes(self) -> bool:
        """Check if the list differs from the original.

        Returns
        -------
        bool
            True if elements were reordered, added or changed.
        """
        return [e.to_dict() for e in self._elements] != [e.to_dict() for e in self._original]

    def to_dict(self) -> Dict[str, Any]:
        return ElementList(list(self._elements)).to_dict()
