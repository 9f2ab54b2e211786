from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import LoadError
from .models import KIND_INDEX, NodeKind


@dataclass(frozen=True)
class PersonRecord:
    identifier: str
    line_number: int


@dataclass(frozen=True)
class EventRecord:
    identifier: str
    line_number: int


GraphRecord = PersonRecord | EventRecord


def parse_record(line: str, line_number: int) -> GraphRecord:
    """Classify a single input line by the tag at its kind position."""

    identifier = line.rstrip("\r\n")
    if len(identifier) <= KIND_INDEX:
        raise LoadError(f"Line {line_number}: record too short to carry a kind tag: {identifier!r}")
    if identifier[KIND_INDEX] == NodeKind.PERSON.value:
        return PersonRecord(identifier=identifier, line_number=line_number)
    return EventRecord(identifier=identifier, line_number=line_number)


def iter_records(lines: Iterable[str]) -> Iterator[GraphRecord]:
    """Parse a line stream lazily, surfacing read failures as ``LoadError``."""

    iterator = iter(lines)
    line_number = 0
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Failed to read record source after line {line_number}: {exc}") from exc
        line_number += 1
        yield parse_record(line, line_number)
