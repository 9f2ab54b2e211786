import pytest

from bacon_graph import Node, NodeKind, node_kind, person_id


def test_node_kind_reads_tag_after_prefix():
    assert node_kind("<a>Bacon, Kevin (I)") is NodeKind.PERSON
    assert node_kind("<t>Wild Things (1998)") is NodeKind.EVENT
    # Anything other than the person tag counts as an event.
    assert node_kind("<x>Something") is NodeKind.EVENT


def test_node_kind_rejects_short_identifiers():
    with pytest.raises(ValueError):
        node_kind("<")


def test_node_parse_strips_prefix():
    node = Node.parse("<a>Connery, Sean")
    assert node.name == "Connery, Sean"
    assert node.to_dict() == {"id": "<a>Connery, Sean", "kind": "person", "name": "Connery, Sean"}


def test_person_id_capitalises_and_orders_name_parts():
    assert person_id("  kevin ", "bacon") == "<a>Bacon, Kevin"
    assert person_id("Sean", "Connery") == "<a>Connery, Sean"
    with pytest.raises(ValueError):
        person_id("", "Connery")


def test_node_kind_from_label():
    assert NodeKind.from_label("person") is NodeKind.PERSON
    assert NodeKind.from_label("T") is NodeKind.EVENT
    with pytest.raises(ValueError):
        NodeKind.from_label("movie")
