from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Sequence, Set

from .graph import BaconGraph
from .models import Node, NodeKind

logger = logging.getLogger(__name__)


@dataclass
class PathNode:
    id: str
    kind: str
    name: str
    degree: int


@dataclass
class PathResult:
    node_ids: List[str]
    nodes: List[PathNode]
    degrees: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "path": list(self.node_ids),
            "nodes": [node.__dict__ for node in self.nodes],
            "degrees": self.degrees,
        }


def shortest_path(graph: BaconGraph, start: str, end: str) -> List[str]:
    """Breadth-first search from ``start`` to ``end``.

    Returns the node ids ordered from ``start`` to ``end``, alternating
    person and event nodes, or an empty list when no path exists. Among
    equally short paths the one discovered first wins, which follows the
    adjacency order and therefore the order of the loaded records.
    """

    if not graph.contains(start):
        logger.debug("No path from %s to %s: unknown start", start, end)
        return []

    visited: Set[str] = {start}
    predecessors: Dict[str, str] = {}
    frontier: Deque[str] = deque([start])

    while frontier:
        current = frontier.popleft()
        if current == end:
            path = _reconstruct(predecessors, start, end)
            logger.debug("Path from %s to %s has %s nodes", start, end, len(path))
            return path
        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            # First discoverer wins.
            predecessors.setdefault(neighbor, current)
            visited.add(neighbor)
            frontier.append(neighbor)

    logger.debug("No path from %s to %s", start, end)
    return []


def _reconstruct(predecessors: Dict[str, str], start: str, end: str) -> List[str]:
    path = [end]
    current = end
    while current != start:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


def degrees_of_separation(path: Sequence[str]) -> Optional[int]:
    """Number of event hops along ``path``; ``None`` when there is no path."""

    if not path:
        return None
    return sum(1 for node_id in path if Node.parse(node_id).kind is NodeKind.EVENT)


def find_path(graph: BaconGraph, start: str, end: str) -> Optional[PathResult]:
    path = shortest_path(graph, start, end)
    if not path:
        return None
    return _build_path_result(graph, path)


def _build_path_result(graph: BaconGraph, node_ids: Sequence[str]) -> PathResult:
    nodes: List[PathNode] = []
    for node_id in node_ids:
        node = Node.parse(node_id)
        nodes.append(
            PathNode(
                id=node.id,
                kind=node.kind.name.lower(),
                name=node.name,
                degree=graph.degree(node_id),
            )
        )
    degrees = degrees_of_separation(node_ids)
    return PathResult(node_ids=list(node_ids), nodes=nodes, degrees=degrees or 0)
