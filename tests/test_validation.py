from conftest import person
from graph import build_ancestor_tree
from models import ProfileProvenance
from parsing import build_profiles
from validation import validate_ancestor_tree


def tree_of(*raw):
    return build_ancestor_tree(build_profiles(list(raw), ProfileProvenance.OTHER), 1)


def test_clean_tree_has_no_warnings():
    tree = tree_of(
        person(1, "Child-1", BirthDate="1950-00-00", Father=2, Mother=3),
        person(2, "Father-2", "Male", BirthDate="1920-05-01", DeathDate="1980-00-00"),
        person(3, "Mother-3", "Female"),
    )
    assert validate_ancestor_tree(tree) == []


def test_child_born_before_parent():
    tree = tree_of(
        person(1, "Child-1", BirthDate="1900-01-01", Father=2),
        person(2, "Father-2", "Male", BirthDate="1910-01-01"),
    )
    assert validate_ancestor_tree(tree) == ["Impossible: Child-1 born before father Father-2"]


def test_very_young_parent():
    tree = tree_of(
        person(1, "Child-1", BirthDate="1900", Mother=2),
        person(2, "Mother-2", "Female", BirthDate="1895"),
    )
    assert validate_ancestor_tree(tree) == [
        "Suspicious: Mother-2 was less than 12 years old when Child-1 was born"
    ]


def test_death_before_birth():
    tree = tree_of(person(1, "Child-1", BirthDate="1900-02-03", DeathDate="1899-12-31"))
    assert validate_ancestor_tree(tree) == ["Impossible: Child-1 died before being born"]
