"""
Element data structures for the template editor's element list.

These dataclasses define the plain-data shape exchanged with the
list UI: an ordered sequence of elements, each with a stable id and a
display key.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "element-list.json"

ELEMENT_LIST_SCHEMA: Dict[str, Any] = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


@dataclass
class Element:
    """A single element in the list.

    Attributes
    ----------
    id : str
        Opaque identifier, unique for the lifetime of the element.
    key : str
        Display name shown in the list.
    data : dict
        Domain payload (position, size, content, ...).
    """

    id: str
    key: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Element":
        return cls(
            id=data["id"],
            key=data["key"],
            data=data.get("data", {}),
        )


@dataclass
class ElementList:
    """Ordered collection of elements, in rendered order.

    Parameters
    ----------
    elements : List[Element]
        Elements in list order. Ids must be unique.

    Raises
    ------
    ValueError
        If two elements share an id.
    """

    elements: List[Element] = field(default_factory=list)
    schema_version: str = "1.0.0"

    def __post_init__(self) -> None:
        seen = set()
        for element in self.elements:
            if element.id in seen:
                raise ValueError(f"Duplicate element id '{element.id}'")
            seen.add(element.id)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    @property
    def ids(self) -> List[str]:
        return [e.id for e in self.elements]

    @property
    def keys(self) -> List[str]:
        return [e.key for e in self.elements]

    def get(self, element_id: str) -> Optional[Element]:
        """Return the element with the given id, or None."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def index_of(self, element_id: str) -> int:
        """Position of an element in the list, -1 if absent."""
        for i, element in enumerate(self.elements):
            if element.id == element_id:
                return i
        return -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "elements": [e.to_dict() for e in self.elements],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementList":
        return cls(
            elements=[Element.from_dict(e) for e in data.get("elements", [])],
            schema_version=data.get("schema_version", "1.0.0"),
        )

    def validate(self, strict: bool = False) -> bool:
        """Validate the plain-data form against the bundled JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise ValidationError on failure.
            If False, return bool.

        Returns
        -------
        bool
            True if valid, False otherwise.
        """
        try:
            jsonschema.validate(self.to_dict(), ELEMENT_LIST_SCHEMA)
        except jsonschema.ValidationError:
            if strict:
                raise
            return False
        return True
