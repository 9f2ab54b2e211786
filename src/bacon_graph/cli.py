from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .config import Settings
from .errors import LoadError
from .graph import BaconGraph
from .logging_utils import configure_logging
from .models import NodeKind, display_name, is_person, person_id
from .pathfinding import degrees_of_separation, find_path, shortest_path
from .storage import load_graph_file

logger = logging.getLogger(__name__)

MENU = (
    "Please choose an option:",
    "1. Get degrees of separation for a specific person",
    "2. Change the person to be searched for",
    "3. Quit",
)


@dataclass
class Session:
    """Interactive state: the person every query is measured against."""

    target: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Degrees of separation in a person/event graph")
    parser.add_argument(
        "command",
        choices=["path", "contains", "count", "stats", "interactive"],
        help="Operation to run",
    )
    parser.add_argument("operand", nargs="?", help="Node id for contains, node kind for count")
    parser.add_argument("--data", dest="data_path", help="Path to the record file")
    parser.add_argument("--encoding", help="Encoding of the record file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--source", help="Source node id for path queries")
    parser.add_argument("--target", help="Target node id for path queries")
    parser.add_argument("--first", help="Source first name, combined with --last")
    parser.add_argument("--last", help="Source last name, combined with --first")
    parser.add_argument("--id", dest="node_id", help="Node id for contains")
    parser.add_argument("--kind", help="Node kind for count (person, event, a, t)")
    return parser


def main(argv: Optional[list[str]] = None, settings: Optional[Settings] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = (settings or Settings.from_env()).with_overrides(
        data_path=args.data_path,
        encoding=args.encoding,
        log_level=args.log_level,
    )
    try:
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    graph = _load_graph(settings)

    if args.command == "path":
        _handle_path(graph, args, settings)
    elif args.command == "contains":
        _handle_contains(graph, args)
    elif args.command == "count":
        _handle_count(graph, args)
    elif args.command == "stats":
        print(json.dumps(graph.stats(), indent=2))
    elif args.command == "interactive":
        run_interactive(graph, Session(target=settings.default_target))


def _load_graph(settings: Settings) -> BaconGraph:
    try:
        return load_graph_file(settings.data_path, encoding=settings.encoding)
    except LoadError as exc:
        logger.error("Failed to load %s: %s", settings.data_path, exc)
        raise SystemExit(f"Failed to load graph: {exc}") from exc


def _handle_path(graph: BaconGraph, args: argparse.Namespace, settings: Settings) -> None:
    source = _resolve_source(args)
    target = args.target or settings.default_target
    result = find_path(graph, source, target)
    if not result:
        print(json.dumps({"status": "not_found", "source": source, "target": target}, indent=2))
        return
    print(json.dumps({"status": "ok", **result.as_dict()}, indent=2))


def _resolve_source(args: argparse.Namespace) -> str:
    if args.source:
        return args.source
    if args.first and args.last:
        try:
            return person_id(args.first, args.last)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
    raise SystemExit("--source or both --first and --last are required for path")


def _handle_contains(graph: BaconGraph, args: argparse.Namespace) -> None:
    node_id = args.operand or args.node_id
    if not node_id:
        raise SystemExit("A node id is required for contains")
    print(json.dumps({"id": node_id, "contains": graph.contains(node_id)}, indent=2))


def _handle_count(graph: BaconGraph, args: argparse.Namespace) -> None:
    label = args.operand or args.kind
    if not label:
        raise SystemExit("A node kind is required for count")
    try:
        kind = NodeKind.from_label(label)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    print(json.dumps({"kind": kind.name.lower(), "count": graph.count_by_kind(kind)}, indent=2))


def render_path(path: Sequence[str], source: str, target: str) -> List[str]:
    """Human-readable lines describing a path from ``source`` to ``target``."""

    if not path:
        return [f"No path found between {display_name(source)} and {display_name(target)}."]
    steps = degrees_of_separation(path)
    annotated = " -> ".join(
        f"{display_name(node_id)} ({'person' if is_person(node_id) else 'event'})" for node_id in path
    )
    return [
        f'"{display_name(source)}" is {steps} steps away from {display_name(target)}.',
        f"The path is: {annotated}",
    ]


def run_interactive(
    graph: BaconGraph,
    session: Session,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    handlers: Dict[str, Callable[[BaconGraph, Session, Callable[[str], str], Callable[[str], None]], None]] = {
        "1": _interactive_find,
        "2": _interactive_change_target,
    }
    while True:
        for line in MENU:
            write(line)
        try:
            choice = read("> ").strip()
        except EOFError:
            break
        if choice == "3":
            break
        if not choice.isdigit():
            write("Please use numeric values to enter a command.")
            continue
        handler = handlers.get(choice)
        if handler is None:
            write("Sorry, unknown command. Try again!")
            continue
        try:
            handler(graph, session, read, write)
        except EOFError:
            break
    write("Goodbye!")


def _prompt_person(read: Callable[[str], str], write: Callable[[str], None]) -> Optional[str]:
    first = read("Enter first name: ")
    last = read("Enter last name: ")
    try:
        return person_id(first, last)
    except ValueError as exc:
        write(str(exc))
        return None


def _interactive_find(
    graph: BaconGraph,
    session: Session,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> None:
    key = _prompt_person(read, write)
    if key is None:
        return
    if not graph.contains(key):
        write("No such person in the database.")
        return
    path = shortest_path(graph, key, session.target)
    for line in render_path(path, key, session.target):
        write(line)
    write("")


def _interactive_change_target(
    graph: BaconGraph,
    session: Session,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> None:
    key = _prompt_person(read, write)
    if key is None:
        return
    if graph.contains(key):
        session.target = key
        write("Target changed.")
    else:
        write("No such person in the database.")
    write("")


if __name__ == "__main__":
    main()
