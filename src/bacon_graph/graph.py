from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import GraphNotLoadedError, LoadError
from .ingestion import EventRecord, GraphRecord, PersonRecord, iter_records
from .models import NodeKind, node_kind

logger = logging.getLogger(__name__)


class BaconGraph:
    """In-memory adjacency representation of the person/event graph.

    The graph is filled by a single :meth:`load` call and is read-only
    afterwards. Every query raises :class:`GraphNotLoadedError` until that
    load has succeeded.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[str]] = {}
        self._loaded: bool = False
        self._load_attempted: bool = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def adjacency(self) -> Mapping[str, List[str]]:
        self._ensure_loaded()
        return MappingProxyType(self._adjacency)

    def load(self, source: Iterable[str]) -> None:
        """Populate the graph from a line-oriented record stream.

        A person record becomes the current person context. An event record
        is linked both ways to the current person.
        """

        if self._load_attempted:
            raise LoadError("Graph has already been loaded; create a new instance to reload")
        self._load_attempted = True
        current_person: Optional[str] = None
        for record in iter_records(source):
            current_person = self._apply_record(record, current_person)
        self._loaded = True
        logger.debug("Loaded %s nodes", len(self._adjacency))

    def _apply_record(self, record: GraphRecord, current_person: Optional[str]) -> Optional[str]:
        if isinstance(record, PersonRecord):
            self._adjacency.setdefault(record.identifier, [])
            return record.identifier
        if isinstance(record, EventRecord):
            if current_person is None:
                raise LoadError(
                    f"Line {record.line_number}: event {record.identifier!r} appears before any person"
                )
            self._link(current_person, record.identifier)
            return current_person
        raise TypeError(f"Unhandled record type: {type(record)!r}")

    def _link(self, person: str, event: str) -> None:
        # Duplicate pairs are kept; traversal skips visited nodes anyway.
        self._adjacency.setdefault(event, []).append(person)
        self._adjacency[person].append(event)

    def contains(self, identifier: str) -> bool:
        self._ensure_loaded()
        return identifier in self._adjacency

    def count_by_kind(self, kind: NodeKind | str) -> int:
        self._ensure_loaded()
        if isinstance(kind, NodeKind):
            return sum(1 for identifier in self._adjacency if node_kind(identifier) is kind)
        # Raw tag strings match the literal tag character only.
        return sum(1 for identifier in self._adjacency if identifier[1] == kind)

    def neighbors(self, identifier: str) -> Tuple[str, ...]:
        self._ensure_loaded()
        return tuple(self._adjacency.get(identifier, ()))

    def degree(self, identifier: str) -> int:
        self._ensure_loaded()
        return len(self._adjacency.get(identifier, ()))

    def node_count(self) -> int:
        self._ensure_loaded()
        return len(self._adjacency)

    def stats(self) -> Dict[str, int]:
        return {
            "nodes": self.node_count(),
            "persons": self.count_by_kind(NodeKind.PERSON),
            "events": self.count_by_kind(NodeKind.EVENT),
        }

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise GraphNotLoadedError("Graph has not been loaded")
