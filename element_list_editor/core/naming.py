"""Unique "copy" names for duplicated elements."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from element_list_editor.core.element import Element

logger = logging.getLogger(__name__)

COPY_SUFFIX = "copy"

_COPY_KEY_RE = re.compile(rf"(.*) {COPY_SUFFIX}(?: ([1-9]\d*))?", re.DOTALL)


@dataclass(frozen=True)
class CopyKey:
    """A key split into its root and copy number.

    ``number`` is None when the key is not copy-shaped, 1 for
    ``"<root> copy"`` and N for ``"<root> copy N"``.
    """

    root: str
    number: Optional[int] = None


def parse_copy_key(key: str) -> CopyKey:
    """Split ``key`` into root and implicit copy number."""
    match = _COPY_KEY_RE.fullmatch(key)
    if match is None:
        return CopyKey(root=key)
    number = match.group(2)
    return CopyKey(root=match.group(1), number=int(number) if number else 1)


def _copy_pattern(root: str) -> "re.Pattern[str]":
    return re.compile(rf"{re.escape(root)} {COPY_SUFFIX}(?: ([1-9]\d*))?", re.DOTALL)


def _as_key(item: Union[str, Element]) -> str:
    return item.key if isinstance(item, Element) else item


def allocate_unique_name(
    copied_key: str,
    existing_keys: Iterable[Union[str, Element]],
    pending_keys: Iterable[str] = (),
) -> str:
    """Return the next free copy name for ``copied_key``.

    Parameters
    ----------
    copied_key : str
        Key of the element being duplicated.
    existing_keys : Iterable[str or Element]
        Keys currently in the list. Elements contribute their ``key``.
    pending_keys : Iterable[str]
        Names already handed out in this batch but not yet in the list.

    Returns
    -------
    str
        ``"<root> copy"`` when no copy of the root exists yet, otherwise
        ``"<root> copy <max + 1>"``. Gaps in the numbering are not reused.
    """
    root = parse_copy_key(copied_key).root
    pattern = _copy_pattern(root)

    max_number = 0
    candidates = [_as_key(k) for k in existing_keys] + list(pending_keys)
    for candidate in candidates:
        match = pattern.fullmatch(candidate)
        if match is None:
            continue
        number = int(match.group(1)) if match.group(1) else 1
        max_number = max(max_number, number)

    if max_number == 0:
        name = f"{root} {COPY_SUFFIX}"
    else:
        name = f"{root} {COPY_SUFFIX} {max_number + 1}"
    logger.debug("Allocated name %r for copy of %r", name, copied_key)
    return name


def allocate_unique_names(
    copied_keys: Iterable[str],
    existing_keys: Iterable[Union[str, Element]],
    pending_keys: Optional[List[str]] = None,
) -> List[str]:
    """Allocate names for several duplicates made in one action.

    Each allocated name is pushed onto ``pending_keys`` before the next
    allocation so that names in the same batch never collide. When
    ``pending_keys`` is given it is extended in place.
    """
    existing = [_as_key(k) for k in existing_keys]
    stack = pending_keys if pending_keys is not None else []
    names = []
    for copied_key in copied_keys:
        name = allocate_unique_name(copied_key, existing, stack)
        stack.append(name)
        names.append(name)
    return names
