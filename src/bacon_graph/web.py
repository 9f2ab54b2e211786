from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .config import Settings
from .graph import BaconGraph
from .models import Node, NodeKind
from .pathfinding import find_path
from .storage import load_graph_file

logger = logging.getLogger(__name__)


class StatsResponse(BaseModel):
    nodes: int
    persons: int
    events: int


class NodeResponse(BaseModel):
    id: str
    contains: bool
    kind: Optional[str] = None
    degree: int = 0


class CountResponse(BaseModel):
    kind: str
    count: int


class PathNodeModel(BaseModel):
    id: str
    kind: str
    name: str
    degree: int


class PathResponse(BaseModel):
    status: str
    source: str
    target: str
    path: List[str] = Field(default_factory=list)
    nodes: List[PathNodeModel] = Field(default_factory=list)
    degrees: Optional[int] = None


def create_app(
    data_path: str | Path | None = None,
    settings: Optional[Settings] = None,
    graph: Optional[BaconGraph] = None,
) -> FastAPI:
    """Build a read-only query app over a graph loaded once at startup."""

    settings = settings or Settings.from_env()
    if graph is None:
        source = Path(data_path) if data_path is not None else settings.data_path
        graph = load_graph_file(source, encoding=settings.encoding)
    app = FastAPI(title="Bacon Graph")

    @app.get("/api/stats", response_model=StatsResponse)
    def get_stats() -> StatsResponse:
        return StatsResponse(**graph.stats())

    @app.get("/api/nodes/{node_id:path}", response_model=NodeResponse)
    def get_node(node_id: str) -> NodeResponse:
        if not graph.contains(node_id):
            return NodeResponse(id=node_id, contains=False)
        node = Node.parse(node_id)
        return NodeResponse(
            id=node_id,
            contains=True,
            kind=node.kind.name.lower(),
            degree=graph.degree(node_id),
        )

    @app.get("/api/count", response_model=CountResponse)
    def count_nodes(kind: str = Query(...)) -> CountResponse:
        try:
            resolved = NodeKind.from_label(kind)
        except ValueError as exc:
            _raise_graph_error(exc)
        return CountResponse(kind=resolved.name.lower(), count=graph.count_by_kind(resolved))

    @app.get("/api/path", response_model=PathResponse)
    def get_path(
        source: str = Query(...),
        target: Optional[str] = Query(None),
    ) -> PathResponse:
        _ensure_non_empty(source, "source")
        resolved_target = target or settings.default_target
        result = find_path(graph, source, resolved_target)
        logger.info(
            "path_query source=%s target=%s found=%s",
            source,
            resolved_target,
            result is not None,
        )
        if not result:
            return PathResponse(status="not_found", source=source, target=resolved_target)
        return PathResponse(
            status="ok",
            source=source,
            target=resolved_target,
            path=result.node_ids,
            nodes=[PathNodeModel(**node.__dict__) for node in result.nodes],
            degrees=result.degrees,
        )

    return app


def _ensure_non_empty(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise HTTPException(status_code=400, detail=f"{field_name} cannot be empty")


def _raise_graph_error(exc: ValueError) -> None:
    raise HTTPException(status_code=400, detail=str(exc)) from exc
