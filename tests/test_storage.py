from pathlib import Path

import pytest

from bacon_graph import LoadError, NodeKind, load_graph_file, read_records

BACON = "<a>Bacon, Kevin (I)"
CONNERY = "<a>Connery, Sean"
WILD_THINGS = "<t>Wild Things (1998)"


def test_read_records_strips_line_endings(tmp_path: Path):
    target = tmp_path / "records.txt"
    target.write_bytes(b"<a>A\r\n<t>B\n<t>C")
    assert list(read_records(target)) == ["<a>A", "<t>B", "<t>C"]


def test_load_graph_file(movie_file: Path):
    graph = load_graph_file(movie_file)
    assert graph.count_by_kind(NodeKind.PERSON) == 8
    assert graph.count_by_kind(NodeKind.EVENT) == 6
    assert graph.neighbors(WILD_THINGS) == (BACON, CONNERY)


def test_missing_file_is_a_load_error(tmp_path: Path):
    with pytest.raises(LoadError, match="Cannot read record file") as excinfo:
        load_graph_file(tmp_path / "missing.txt")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_file_is_a_load_error(tmp_path: Path):
    target = tmp_path / "latin1.txt"
    target.write_bytes("<a>Bergqvist, Kjell\n<t>Sällskapsresan (1980)\n".encode("latin-1"))
    with pytest.raises(LoadError):
        load_graph_file(target)
    graph = load_graph_file(target, encoding="latin-1")
    assert graph.contains("<t>Sällskapsresan (1980)")


def test_load_logs_summary(movie_file: Path, caplog):
    with caplog.at_level("INFO", logger="bacon_graph.storage"):
        load_graph_file(movie_file)
    assert "Loaded 8 persons and 6 events" in caplog.text
