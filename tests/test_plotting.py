import pytest

from conftest import person
from graph import build_ancestor_tree
from models import ProfileProvenance
from parsing import build_profiles
from plotting import build_ancestor_chart, plot_ancestors


@pytest.fixture
def tree():
    profiles = build_profiles(
        [
            person(1, "Child-1", "Female", BirthDate="1950-03-02", Father=2, Mother=3),
            person(2, "Father-2", "Male", BirthDate="1920-00-00", DeathDate="1990-00-00"),
            person(3, "Mother-3"),
        ],
        ProfileProvenance.OTHER,
    )
    return build_ancestor_tree(profiles, 1)


def test_chart_structure(tree):
    P = build_ancestor_chart(tree)

    assert len(P.get_nodes()) == 3
    assert len(P.get_edges()) == 2
    assert len(P.get_subgraphs()) == 1

    text = P.to_string()
    assert "rankdir=BT" in text
    assert "lightblue" in text
    assert "lightpink" in text
    assert "lightgray" in text
    assert "rank=same" in text
    assert "1920-1990" in text


def test_root_is_highlighted(tree):
    P = build_ancestor_chart(tree)
    widths = {node.get_name().strip('"'): node.get("penwidth") for node in P.get_nodes()}
    assert widths == {"1": "2", "2": "1", "3": "1"}


def test_edges_point_from_child_to_parent(tree):
    P = build_ancestor_chart(tree)
    edges = {(e.get_source().strip('"'), e.get_destination().strip('"')) for e in P.get_edges()}
    assert edges == {("1", "2"), ("1", "3")}


def test_dot_output(tree, tmp_path, capsys):
    out = tmp_path / "chart.dot"
    plot_ancestors(tree, out)

    assert out.read_text(encoding="utf-8").startswith("digraph")
    assert f"Chart saved to {out}" in capsys.readouterr().out
