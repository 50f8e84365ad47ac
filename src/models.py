"""Data classes for person profiles."""

from collections.abc import Iterator, Mapping
from enum import Enum
import logging
import threading
from types import MappingProxyType
from typing import Any

from dates import NO_DATE, cleanup_date
from errors import InvariantViolation, ValidationError
from identifiers import Identifier
from paths import json_type_name


logger = logging.getLogger(__name__)


# Field names used by the service
ID = "Id"
NAME = "Name"
IS_LIVING = "IsLiving"
GENDER = "Gender"
BIRTH_DATE = "BirthDate"
DEATH_DATE = "DeathDate"
BIRTH_LOCATION = "BirthLocation"
DEATH_LOCATION = "DeathLocation"
FIRST_NAME = "FirstName"
LAST_NAME_AT_BIRTH = "LastNameAtBirth"
SHORT_NAME = "ShortName"
LONG_NAME = "LongName"
BIRTH_NAME = "BirthName"
BIRTH_NAME_PRIVATE = "BirthNamePrivate"
MARRIAGE_DATE = "marriage_date"
MARRIAGE_LOCATION = "marriage_location"
FATHER = "Father"
MOTHER = "Mother"
PARENTS = "Parents"
CHILDREN = "Children"
SPOUSES = "Spouses"
SIBLINGS = "Siblings"

RELATIONSHIP_FIELDS = (PARENTS, CHILDREN, SPOUSES, SIBLINGS)


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"


GENDER_MAP = MappingProxyType({"Male": Gender.MALE, "Female": Gender.FEMALE})


class ProfileProvenance(Enum):
    """The kind of request that produced a profile."""

    PRIMARY_PERSON = "PrimaryPerson"
    RELATIVES_COMPLETE = "RelativesComplete"
    RELATIVES_INCOMPLETE = "RelativesIncomplete"
    RELATIVE = "Relative"
    PROFILE = "Profile"
    OTHER = "Other"

    @property
    def is_full(self) -> bool:
        """Only full profiles can be trusted to list all relatives."""
        return self in _FULL_PROVENANCES

    @property
    def relative_provenance(self) -> "ProfileProvenance":
        return ProfileProvenance.RELATIVE if self.is_full else ProfileProvenance.OTHER


_FULL_PROVENANCES = frozenset(
    {
        ProfileProvenance.PRIMARY_PERSON,
        ProfileProvenance.RELATIVES_COMPLETE,
        ProfileProvenance.RELATIVES_INCOMPLETE,
    }
)


def _is_text(value: Any) -> bool:
    """True for a string with something besides whitespace in it."""
    return isinstance(value, str) and bool(value.strip())


def parse_person_id(value: Any) -> int:
    """Parse a numeric person id stored as a number or a numeric string."""
    if isinstance(value, bool):
        raise InvariantViolation(f"person id is not a number (it is {value!r})")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise InvariantViolation(f"person id {value!r} is not an integer") from None
    raise InvariantViolation(
        f"person id is neither a string nor a number; it is {json_type_name(value)}"
    )


class PersonProfile(Mapping):
    """
    One person's profile, read-only over the JSON object it was built from.

    Instances are created by parsing.build_profile(). Relationship accessors
    return None unless the profile's provenance promises complete relatives.
    """

    def __init__(
        self,
        fields: Mapping[str, Any],
        provenance: ProfileProvenance,
        parents=(),
        children=(),
        spouses=(),
        siblings=(),
        biological_father: "PersonProfile | None" = None,
        biological_mother: "PersonProfile | None" = None,
    ):
        self._fields = dict(fields)
        self.provenance = provenance
        self._parents = tuple(parents)
        self._children = tuple(children)
        self._spouses = tuple(spouses)
        self._siblings = tuple(siblings)
        self.biological_father = biological_father
        self.biological_mother = biological_mother

        self._lock = threading.Lock()
        self._person_id: int | None = None
        self._gender: Gender | None = None
        self._identifier: Identifier | None = None

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    # Cached derived fields

    @property
    def person_id(self) -> int:
        if self._person_id is None:
            with self._lock:
                if self._person_id is None:
                    value = self._fields.get(ID)
                    self._person_id = -1 if value is None else parse_person_id(value)
        return self._person_id

    @property
    def gender(self) -> Gender:
        if self._gender is None:
            with self._lock:
                if self._gender is None:
                    self._gender = self._resolve_gender()
        return self._gender

    def _resolve_gender(self) -> Gender:
        value = self._fields.get(GENDER)
        gender = GENDER_MAP.get(value) if isinstance(value, str) else None
        if gender is None:
            logger.warning(
                "%s: gender value %r is not one of %s; using Unknown",
                self.name,
                value,
                list(GENDER_MAP),
            )
            return Gender.UNKNOWN
        return gender

    @property
    def identifier(self) -> Identifier:
        if self._identifier is None:
            with self._lock:
                if self._identifier is None:
                    self._identifier = Identifier(self.name)
        return self._identifier

    # Scalars

    @property
    def name(self) -> str:
        return self._fields[NAME]

    @property
    def is_living(self) -> bool:
        return int(self._fields[IS_LIVING]) == 1

    def is_full_profile(self) -> bool:
        return self.provenance.is_full

    def is_relative_profile(self) -> bool:
        return self.provenance is ProfileProvenance.RELATIVE

    @property
    def is_male(self) -> bool:
        return self.gender is Gender.MALE

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    def _has_text(self, key: str) -> bool:
        return _is_text(self._fields.get(key))

    def _has_date(self, key: str) -> bool:
        return self._has_text(key) and self._fields.get(key) != NO_DATE

    def has_birth_date(self) -> bool:
        return self._has_date(BIRTH_DATE)

    @property
    def birth_date(self) -> str | None:
        return self._fields.get(BIRTH_DATE)

    def has_death_date(self) -> bool:
        return self._has_date(DEATH_DATE)

    @property
    def death_date(self) -> str | None:
        return self._fields.get(DEATH_DATE)

    def has_birth_location(self) -> bool:
        return self._has_text(BIRTH_LOCATION)

    @property
    def birth_location(self) -> str | None:
        return self._fields.get(BIRTH_LOCATION)

    def has_death_location(self) -> bool:
        return self._has_text(DEATH_LOCATION)

    @property
    def death_location(self) -> str | None:
        return self._fields.get(DEATH_LOCATION)

    def has_marriage_date(self) -> bool:
        """Marriage fields usually only show up on spouse entries."""
        return self._has_date(MARRIAGE_DATE)

    @property
    def marriage_date(self) -> str | None:
        return self._fields.get(MARRIAGE_DATE)

    def has_marriage_location(self) -> bool:
        return self._has_text(MARRIAGE_LOCATION)

    @property
    def marriage_location(self) -> str | None:
        return self._fields.get(MARRIAGE_LOCATION)

    def has_first_name(self) -> bool:
        return self._has_text(FIRST_NAME)

    @property
    def short_name(self) -> str:
        value = self._fields.get(SHORT_NAME)
        return value if value is not None else self.name

    @property
    def long_name(self) -> str:
        value = self._fields.get(LONG_NAME)
        return value if value is not None else self.short_name

    @property
    def first_name(self) -> str:
        value = self._fields.get(FIRST_NAME)
        return value if value is not None else self.short_name

    def has_birth_name(self) -> bool:
        return self._has_text(BIRTH_NAME)

    @property
    def birth_name(self) -> str:
        for key in (BIRTH_NAME, BIRTH_NAME_PRIVATE):
            value = self._fields.get(key)
            if _is_text(value):
                return value.strip()
        raise ValidationError(f'"{self.short_name}" ({self.name}) has no birth name')

    def has_last_name_at_birth(self) -> bool:
        return self._has_text(LAST_NAME_AT_BIRTH)

    @property
    def last_name_at_birth(self) -> str | None:
        return self._fields.get(LAST_NAME_AT_BIRTH)

    def _reference(self, key: str) -> int | None:
        value = self._fields.get(key)
        if value is None:
            return None
        try:
            reference = parse_person_id(value)
        except InvariantViolation as e:
            raise ValidationError(f"{self.name}: {key} reference {value!r} is not a person id") from e
        return reference or None

    @property
    def father_id(self) -> int | None:
        """Person id from the "Father" field, None when absent or 0."""
        return self._reference(FATHER)

    @property
    def mother_id(self) -> int | None:
        return self._reference(MOTHER)

    # Relationships

    def _relatives(self, people: tuple) -> "tuple[PersonProfile, ...] | None":
        return people if self.provenance.is_full else None

    @property
    def parents(self) -> "tuple[PersonProfile, ...] | None":
        return self._relatives(self._parents)

    @property
    def children(self) -> "tuple[PersonProfile, ...] | None":
        return self._relatives(self._children)

    @property
    def spouses(self) -> "tuple[PersonProfile, ...] | None":
        return self._relatives(self._spouses)

    @property
    def siblings(self) -> "tuple[PersonProfile, ...] | None":
        return self._relatives(self._siblings)

    def relatives(self, relationship: str) -> "tuple[PersonProfile, ...] | None":
        """Accessor lookup by field name ("Parents", "Children", ...)."""
        if relationship not in RELATIONSHIP_FIELDS:
            raise KeyError(relationship)
        return getattr(self, relationship.lower())

    @property
    def parent_count(self) -> int:
        return len(self._parents)

    @property
    def child_count(self) -> int:
        return len(self._children)

    @property
    def spouse_count(self) -> int:
        return len(self._spouses)

    @property
    def sibling_count(self) -> int:
        return len(self._siblings)

    def has_some_parents(self) -> bool:
        return bool(self._parents)

    def has_some_children(self) -> bool:
        return bool(self._children)

    def has_some_spouses(self) -> bool:
        return bool(self._spouses)

    def has_some_siblings(self) -> bool:
        return bool(self._siblings)

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)

    def __repr__(self) -> str:
        gender = self._fields.get(GENDER)
        sex = {Gender.MALE: "M", Gender.FEMALE: "F"}.get(
            GENDER_MAP.get(gender) if isinstance(gender, str) else None, "?"
        )
        return (
            f"PersonProfile({self.short_name} (gender:{sex}, "
            f"birthDate:{_repr_date(self._fields.get(BIRTH_DATE))}, "
            f"deathDate:{_repr_date(self._fields.get(DEATH_DATE))}))"
        )


def _repr_date(value: Any) -> str:
    return cleanup_date(value) if value is None or isinstance(value, str) else repr(value)
