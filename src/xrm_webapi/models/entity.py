# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Record payload types used by create, update and property operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping


@dataclass(frozen=True)
class Attribute:
    """
    A single named column value.

    :param name: Column logical name (e.g. ``"telephone1"``).
    :type name: str
    :param value: Any JSON-compatible value, including ``None`` and nested objects.
    :type value: Any
    """

    name: str
    value: Any = None


@dataclass
class Entity:
    """
    Ordered collection of attributes describing a record to create or update.

    Attribute names are expected to be unique. Duplicates are kept as given; when the
    entity is serialized the last occurrence of a name wins.

    Example::

        entity = Entity([Attribute("name", "Contoso"), Attribute("telephone1", "555-0100")])
        entity.add("revenue", 1000000)
        entity.to_dict()
        # {'name': 'Contoso', 'telephone1': '555-0100', 'revenue': 1000000}
    """

    attributes: List[Attribute] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entity":
        """Build an entity from a mapping, preserving key order."""
        return cls([Attribute(k, v) for k, v in data.items()])

    def add(self, name: str, value: Any) -> "Entity":
        self.attributes.append(Attribute(name, value))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to ``{name: value}``; later duplicates overwrite earlier ones."""
        out: Dict[str, Any] = {}
        for attr in self.attributes:
            out[attr.name] = attr.value
        return out

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)


__all__ = ["Attribute", "Entity"]
