from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator

from .errors import LoadError
from .graph import BaconGraph
from .models import NodeKind

logger = logging.getLogger(__name__)


def read_records(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a record file without their line endings."""

    path = Path(path)
    try:
        handle = path.open("r", encoding=encoding, newline="")
    except OSError as exc:
        raise LoadError(f"Cannot read record file {str(path)!r}: {exc}") from exc
    with handle:
        try:
            for line in handle:
                yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Cannot read record file {str(path)!r}: {exc}") from exc


def load_graph_file(path: str | Path, encoding: str = "utf-8") -> BaconGraph:
    graph = BaconGraph()
    started = time.perf_counter()
    graph.load(read_records(path, encoding=encoding))
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Loaded %s persons and %s events from %s in %.0f ms",
        graph.count_by_kind(NodeKind.PERSON),
        graph.count_by_kind(NodeKind.EVENT),
        path,
        elapsed_ms,
    )
    return graph
