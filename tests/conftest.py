from pathlib import Path
from typing import List

import pytest

from bacon_graph import BaconGraph

BACON = "<a>Bacon, Kevin (I)"
CONNERY = "<a>Connery, Sean"
WILD_THINGS = "<t>Wild Things (1998)"


@pytest.fixture
def movie_records() -> List[str]:
    return [
        BACON,
        WILD_THINGS,
        "<t>Footloose (1984)",
        CONNERY,
        WILD_THINGS,
        "<t>Dr. No (1962)",
        "<a>Andress, Ursula",
        "<t>Dr. No (1962)",
        "<a>Garbo, Greta",
        "<t>Ninotchka (1939)",
        "<a>Douglas, Melvyn",
        "<t>Ninotchka (1939)",
        "<t>Hud (1963)",
        "<a>Newman, Paul",
        "<t>Hud (1963)",
        "<t>The Sting (1973)",
        "<a>Redford, Robert",
        "<t>The Sting (1973)",
        "<a>Lonely, Lou",
    ]


@pytest.fixture
def movie_graph(movie_records: List[str]) -> BaconGraph:
    graph = BaconGraph()
    graph.load(movie_records)
    return graph


@pytest.fixture
def movie_file(tmp_path: Path, movie_records: List[str]) -> Path:
    target = tmp_path / "moviedata.txt"
    target.write_text("\n".join(movie_records) + "\n", encoding="utf-8")
    return target
