"""
Profile-level wrappers around a JSON session with the genealogy service.

The JSON session (transport, authentication, request encoding) belongs to the
caller; anything it raises propagates unchanged. This module only decides
which part of each response is a profile and what provenance it gets.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from graph import AncestorTree, build_ancestor_tree
from models import IS_LIVING, NAME, PersonProfile, ProfileProvenance
from parsing import build_profile, build_profiles, unwrap_single_result
from paths import get_optional_json_value


# Fields returned by a getPerson request
ALL_GET_PERSON_FIELDS = tuple(
    sorted(
        (
            "Id",
            "Name",
            "FirstName",
            "MiddleName",
            "LastNameAtBirth",
            "LastNameCurrent",
            "Nicknames",
            "LastNameOther",
            "RealName",
            "Prefix",
            "Suffix",
            "Gender",
            "BirthDate",
            "DeathDate",
            "BirthLocation",
            "DeathLocation",
            "BirthDateDecade",
            "DeathDateDecade",
            "Photo",
            "IsLiving",
            "Privacy",
            "Mother",
            "Father",
            "Parents",
            "Children",
            "Siblings",
            "Spouses",
            "Derived.ShortName",
            "Derived.BirthNamePrivate",
            "Derived.LongNamePrivate",
            "Manager",
        )
    )
)

ALL_FIELDS = "*"


def fields_excluding(*excluded: str) -> tuple[str, ...]:
    """All getPerson fields except ``excluded``, e.g. fields_excluding("Spouses", "Children")."""
    return tuple(field for field in ALL_GET_PERSON_FIELDS if field not in excluded)


def fields_string(fields: Iterable[str]) -> str:
    return ",".join(fields)


class JsonSession(Protocol):
    """The transport-level session; every call returns a parsed response or None."""

    def get_person(self, key: str, fields: str) -> Any: ...

    def get_profile(self, key: str) -> Any: ...

    def get_ancestors(self, key: str, depth: int | None) -> Any: ...

    def get_relatives(
        self, keys: str, parents: bool, children: bool, spouses: bool, siblings: bool
    ) -> Any: ...


class ProfileSession:
    """Turns the JSON session's answers into PersonProfile instances."""

    def __init__(self, json_session: JsonSession):
        self.json_session = json_session

    def get_person(self, key: str, fields: str = ALL_FIELDS) -> PersonProfile | None:
        """
        Fetch a person by identifier ("Churchill-4") or person id ("5589").

        Name and IsLiving are always requested since a profile cannot be built
        without them. Asking for every field ("*") yields a primary-person
        profile whose relatives can be trusted; anything less yields a plain
        profile.
        """
        if fields != ALL_FIELDS:
            requested = fields.split(",") if fields else []
            for required in (NAME, IS_LIVING):
                if required not in requested:
                    requested.append(required)
            fields = fields_string(requested)

        result = unwrap_single_result(self.json_session.get_person(key, fields))
        if result is None:
            return None

        provenance = (
            ProfileProvenance.PRIMARY_PERSON if fields == ALL_FIELDS else ProfileProvenance.PROFILE
        )
        return build_profile(result, provenance, "person")

    def get_profile(self, key: str) -> PersonProfile | None:
        result = unwrap_single_result(self.json_session.get_profile(key))
        if result is None:
            return None
        return build_profile(result, ProfileProvenance.PROFILE, "profile")

    def get_ancestors(self, key: str, depth: int | None = None) -> AncestorTree | None:
        """Fetch someone's ancestors and link them into an acyclic tree."""
        result = unwrap_single_result(self.json_session.get_ancestors(key, depth))
        if result is None:
            return None

        profiles = build_profiles(result.get("ancestors"), ProfileProvenance.OTHER)
        root_id = get_optional_json_value(result, "user_id")
        root = None
        for profile in profiles:
            if profile.name == key or str(profile.person_id) == str(root_id or key):
                root = profile
                break
        return build_ancestor_tree(profiles, root)

    def get_relatives(
        self,
        keys: str,
        parents: bool = True,
        children: bool = True,
        spouses: bool = True,
        siblings: bool = True,
    ) -> list[PersonProfile]:
        """
        Fetch one or more people (comma-separated keys) along with the chosen relatives.

        Profiles are complete only if every kind of relative was asked for.
        """
        result = unwrap_single_result(
            self.json_session.get_relatives(keys, parents, children, spouses, siblings)
        )
        if result is None:
            return []

        provenance = (
            ProfileProvenance.RELATIVES_COMPLETE
            if parents and children and spouses and siblings
            else ProfileProvenance.RELATIVES_INCOMPLETE
        )
        return build_profiles(result.get("items"), provenance, "person")
