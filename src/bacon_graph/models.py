from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict

PREFIX_LENGTH = 3
KIND_INDEX = 1


class NodeKind(str, Enum):
    """Kind tags embedded in node identifiers."""

    PERSON = "a"
    EVENT = "t"

    @classmethod
    def from_label(cls, label: str) -> "NodeKind":
        """Resolve ``person``/``event`` or a raw tag character."""

        normalised = label.strip().lower()
        for kind in cls:
            if normalised in (kind.value, kind.name.lower()):
                return kind
        raise ValueError(f"Unknown node kind: {label!r}")


def kind_tag(identifier: str) -> str:
    if len(identifier) <= KIND_INDEX:
        raise ValueError(f"Identifier too short to carry a kind tag: {identifier!r}")
    return identifier[KIND_INDEX]


def node_kind(identifier: str) -> NodeKind:
    if kind_tag(identifier) == NodeKind.PERSON.value:
        return NodeKind.PERSON
    return NodeKind.EVENT


def is_person(identifier: str) -> bool:
    return node_kind(identifier) is NodeKind.PERSON


def display_name(identifier: str) -> str:
    return identifier[PREFIX_LENGTH:]


def person_id(first_name: str, last_name: str) -> str:
    """Build a person identifier in ``<a>Lastname, Firstname`` form."""

    first = _capitalise(first_name, "first_name")
    last = _capitalise(last_name, "last_name")
    return f"<{NodeKind.PERSON.value}>{last}, {first}"


def _capitalise(value: str, field_name: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field_name} cannot be empty")
    return cleaned[0].upper() + cleaned[1:]


@dataclass(frozen=True)
class Node:
    """A person or event vertex of the collaboration graph."""

    id: str
    kind: NodeKind
    name: str

    @classmethod
    def parse(cls, identifier: str) -> "Node":
        return cls(id=identifier, kind=node_kind(identifier), name=display_name(identifier))

    def to_dict(self) -> Dict[str, object]:
        """Return a serialisable representation."""

        payload = asdict(self)
        payload["kind"] = self.kind.name.lower()
        return payload
