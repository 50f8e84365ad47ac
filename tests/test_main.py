import json

import pytest

from conftest import person
from main import describe_life, main
from config import Settings
from models import ProfileProvenance
from parsing import build_profile


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PROFILES_LOG_LEVEL", "PROFILES_LONG_MONTHS", "PROFILES_IN_ON", "PROFILES_INDENT"):
        monkeypatch.delenv(name, raising=False)


def test_describe_life(churchill):
    profile = build_profile(churchill, ProfileProvenance.PROFILE)
    assert describe_life(profile, Settings()) == (
        "Winston Leonard Spencer Churchill was born on 30 Nov 1874 and died on 24 Jan 1965"
    )
    assert describe_life(profile, Settings(long_month_names=True, in_on=False)) == (
        "Winston Leonard Spencer Churchill was born 30 November 1874 and died 24 January 1965"
    )


def test_describe_life_with_partial_and_missing_dates():
    living = build_profile(
        person(1, "Doe-1", is_living=1, BirthDate="1957-10-00"), ProfileProvenance.PROFILE
    )
    assert describe_life(living, Settings()) == "Doe-1 was born in Oct 1957"

    dead = build_profile(person(2, "Doe-2", DeathDate="0000-00-00"), ProfileProvenance.PROFILE)
    assert describe_life(dead, Settings()) == "Doe-2 was born on unknown date and died on unknown date"

    blank = build_profile(person(3, "Doe-3", BirthDate="", DeathDate=1965), ProfileProvenance.PROFILE)
    assert describe_life(blank, Settings()) == "Doe-3 was born on unknown date and died on unknown date"


def test_main_prints_profiles(churchill, tmp_path, capsys):
    response = tmp_path / "person.json"
    response.write_text(json.dumps([{"person": churchill}]), encoding="utf-8")

    assert main([str(response), "--path", "person"]) == 0

    out = capsys.readouterr().out
    assert "Found 1 profiles" in out
    assert '"Name" : "Churchill-4"' in out
    assert "was born on 30 Nov 1874 and died on 24 Jan 1965" in out
    assert out.rstrip().endswith("Done!")


def test_main_links_ancestors(tmp_path, capsys):
    response = tmp_path / "ancestors.json"
    response.write_text(
        json.dumps(
            [
                person(1, "Child-1", BirthDate="1950", Father=2, Mother=3),
                person(2, "Father-2", "Male", BirthDate="1920"),
                person(3, "Mother-3", "Female", BirthDate="1945"),
            ]
        ),
        encoding="utf-8",
    )
    chart = tmp_path / "tree.dot"

    assert main([str(response), "--provenance", "other", "--ancestors", "--chart", str(chart)]) == 0

    out = capsys.readouterr().out
    assert "Tree has 3 people" in out
    assert "Found 1 validation warnings" in out
    assert "Suspicious: Mother-3 was less than 12 years old when Child-1 was born" in out
    assert chart.read_text(encoding="utf-8").startswith("digraph")
