"""
Drag-and-drop reordering of the element list.

Each drag gesture is a sequence of transitions: ``DragStart`` followed by
either ``DragEnd`` or ``DragCancel``. The caller owns the list, the
selection and the ``DragState`` returned by ``DragStart``, and passes them
back on every call. ``reorder`` itself keeps nothing between calls.

When the grabbed element is part of a multi-selection, the other selected
elements travel with it and land as a contiguous block right after it.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, TypeVar, Union

from element_list_editor.core.element import Element

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DragStart:
    """An element was grabbed."""

    active_id: str


@dataclass(frozen=True)
class DragEnd:
    """The grabbed element was dropped over ``over_id`` (None: no target)."""

    active_id: str
    over_id: Optional[str] = None


@dataclass(frozen=True)
class DragCancel:
    """The gesture was aborted."""


DragTransition = Union[DragStart, DragEnd, DragCancel]


@dataclass(frozen=True)
class DragState:
    """Bookkeeping for a drag in progress.

    Attributes
    ----------
    baseline : Tuple[Element, ...]
        The list as it was when the drag started. Restored on cancel.
    active_id : str
        Id of the grabbed element.
    selection : Tuple[str, ...]
        Selection in effect for this drag (empty for a single-item drag).
    """

    baseline: Tuple[Element, ...]
    active_id: str
    selection: Tuple[str, ...] = ()


class ReorderResult(NamedTuple):
    elements: List[Element]
    selection: List[str]
    state: Optional[DragState]


def array_move(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Move one item to a new position, shifting everything in between.

    Returns a new list; ``items`` is left untouched.
    """
    result = list(items)
    result.insert(to_index, result.pop(from_index))
    return result


def _dedupe(selection: Iterable[str]) -> List[str]:
    result: List[str] = []
    for element_id in selection:
        if element_id not in result:
            result.append(element_id)
    return result


def _compact(elements: Sequence[Element], selection: Sequence[str], active_id: str) -> List[Element]:
    staged = set(selection) - {active_id}
    return [e for e in elements if e.id not in staged]


def _index(ids: List[str], element_id: Optional[str]) -> int:
    if element_id is None or element_id not in ids:
        return -1
    return ids.index(element_id)


def reorder(
    elements: Sequence[Element],
    selection: Iterable[str],
    transition: DragTransition,
    state: Optional[DragState] = None,
) -> ReorderResult:
    """Apply one drag transition to the element list.

    Parameters
    ----------
    elements : Sequence[Element]
        Current list, in order. Not modified.
    selection : Iterable[str]
        Ids of the selected elements, in pick order.
    transition : DragStart, DragEnd or DragCancel
        The drag lifecycle event.
    state : DragState, optional
        The state returned by the ``DragStart`` of this gesture. Needed to
        roll back on cancel or on a drop without a target.

    Returns
    -------
    ReorderResult
        ``(elements, selection, state)``. ``state`` is set after
        ``DragStart`` and None after ``DragEnd``/``DragCancel``.

    Raises
    ------
    TypeError
        If ``transition`` is not a drag transition.
    """
    elements = list(elements)
    selected = _dedupe(selection)

    if isinstance(transition, DragStart):
        return _drag_start(elements, selected, transition)
    if isinstance(transition, DragEnd):
        return _drag_end(elements, selected, transition, state)
    if isinstance(transition, DragCancel):
        return _drag_cancel(elements, selected, state)
    raise TypeError(f"Unknown drag transition: {transition!r}")


def _drag_start(elements: List[Element], selection: List[str], transition: DragStart) -> ReorderResult:
    active_id = transition.active_id
    baseline = tuple(elements)

    if all(e.id != active_id for e in elements):
        logger.debug("Drag start on unknown element %s, nothing staged", active_id)
        return ReorderResult(elements, selection, DragState(baseline, active_id))

    if active_id not in selection:
        logger.debug("Drag start on %s, dropping selection of %d", active_id, len(selection))
        return ReorderResult(elements, [], DragState(baseline, active_id))

    # Other selected elements leave the list until the drop re-inserts them.
    compacted = _compact(elements, selection, active_id)
    logger.debug("Drag start on %s with %d selected", active_id, len(selection))
    return ReorderResult(compacted, selection, DragState(baseline, active_id, tuple(selection)))


def _drag_end(
    elements: List[Element],
    selection: List[str],
    transition: DragEnd,
    state: Optional[DragState],
) -> ReorderResult:
    active_id = transition.active_id

    lookup = {e.id: e for e in state.baseline} if state is not None else {}
    lookup.update({e.id: e for e in elements})
    staged = [lookup[i] for i in selection if i != active_id and i in lookup]

    working = _compact(elements, selection, active_id)
    ids = [e.id for e in working]
    active_index = _index(ids, active_id)
    over_index = _index(ids, transition.over_id)

    if active_index < 0 or over_index < 0:
        logger.debug("Drop of %s over %s has no target, nothing moved", active_id, transition.over_id)
        restored = list(state.baseline) if state is not None else elements
        return ReorderResult(restored, [], None)

    if selection:
        moved = array_move(working, active_index, over_index)
        moved[over_index + 1 : over_index + 1] = staged
        logger.debug("Moved %s and %d selected to %d", active_id, len(staged), over_index)
        return ReorderResult(moved, [], None)

    if active_index == over_index:
        return ReorderResult(working, [], None)

    logger.debug("Moved %s from %d to %d", active_id, active_index, over_index)
    return ReorderResult(array_move(working, active_index, over_index), [], None)


def _drag_cancel(
    elements: List[Element], selection: List[str], state: Optional[DragState]
) -> ReorderResult:
    if state is None:
        return ReorderResult(elements, selection, None)
    logger.debug("Drag of %s cancelled, restoring %d elements", state.active_id, len(state.baseline))
    return ReorderResult(list(state.baseline), selection, None)
