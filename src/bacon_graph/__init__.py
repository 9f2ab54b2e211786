from .config import Settings
from .errors import GraphNotLoadedError, LoadError
from .graph import BaconGraph
from .ingestion import EventRecord, PersonRecord, iter_records, parse_record
from .models import Node, NodeKind, node_kind, person_id
from .pathfinding import (
    PathNode,
    PathResult,
    degrees_of_separation,
    find_path,
    shortest_path,
)
from .storage import load_graph_file, read_records

__all__ = [
    "BaconGraph",
    "Node",
    "NodeKind",
    "node_kind",
    "person_id",
    "LoadError",
    "GraphNotLoadedError",
    "PersonRecord",
    "EventRecord",
    "parse_record",
    "iter_records",
    "PathNode",
    "PathResult",
    "shortest_path",
    "find_path",
    "degrees_of_separation",
    "load_graph_file",
    "read_records",
    "Settings",
]
