"""Building person profiles out of service responses."""

from collections.abc import Mapping
import logging
from typing import Any

from dates import format_optional_date
from errors import InvariantViolation, StructuralError, ValidationError
from models import (
    CHILDREN,
    ID,
    IS_LIVING,
    NAME,
    PARENTS,
    SIBLINGS,
    SPOUSES,
    PersonProfile,
    ProfileProvenance,
)
from paths import format_path, get_json_value, json_type_name


logger = logging.getLogger(__name__)


def unwrap_single_result(response: Any) -> Mapping | None:
    """
    Reduce a response to the single object it carries.

    The service wraps most answers in an array. An empty array means "nothing
    found"; an array holding several things, or anything but an object, is
    not what a single-result request should get back.
    """
    if response is None or isinstance(response, Mapping):
        return response

    if isinstance(response, list):
        if not response:
            return None
        if len(response) == 1:
            (result,) = response
            if result is None or isinstance(result, Mapping):
                return result
            raise StructuralError(
                f"expected a single object result; got a single {json_type_name(result)}"
            )
        raise StructuralError(f"expected a single object result; got {len(response)} things")

    raise StructuralError(f"expected an object or an array; got {json_type_name(response)}")


def extract_people(profile_object: Mapping, relationship: str) -> list[Mapping]:
    """
    Extract the raw relative objects listed under ``relationship``.

    The service sends relatives either as an object keyed by person id or as an
    array. Entries that are not objects are skipped.
    """
    match profile_object.get(relationship):
        case None:
            values = []
        case Mapping() as by_id:
            values = list(by_id.values())
        case list() as items:
            values = items
        case other:
            raise InvariantViolation(
                f"{relationship} are something strange - {json_type_name(other)}: {other!r}"
            )

    return [value for value in values if isinstance(value, Mapping)]


def _require_fields(profile_object: Mapping, path: tuple[str, ...]):
    where = format_path(path) or "<root>"
    for key in (ID, NAME, IS_LIVING):
        if profile_object.get(key) is None:
            raise InvariantViolation(
                f"object at {where} is not a person profile (no {key}): {dict(profile_object)!r}"
            )

    name = profile_object[NAME]
    if not isinstance(name, str):
        raise ValidationError(f"{NAME} at {where} should be a string but it is {json_type_name(name)}")

    is_living = profile_object[IS_LIVING]
    if isinstance(is_living, bool) or not isinstance(is_living, (int, float)):
        raise InvariantViolation(
            f"{name}: {IS_LIVING} value is not numeric (it is {json_type_name(is_living)})"
        )


def pick_biological_parents(
    profile_name: str, parents
) -> tuple[PersonProfile | None, PersonProfile | None]:
    """
    Choose a father and a mother from the documented parents.

    The first male and the first female win. Any later parent of the same sex
    is reported and otherwise ignored.
    """
    father = None
    mother = None
    for parent in parents:
        if parent.is_male:
            if father is None:
                father = parent
            else:
                logger.warning(
                    "%s has more than one father (%s and %s)", profile_name, father.name, parent.name
                )
        elif parent.is_female:
            if mother is None:
                mother = parent
            else:
                logger.warning(
                    "%s has more than one mother (%s and %s)", profile_name, mother.name, parent.name
                )

    return father, mother


def build_profile(raw: Any, provenance: ProfileProvenance, *path: str) -> PersonProfile:
    """
    Build a PersonProfile from a service response.

    Args:
        raw: The parsed response (or any object containing the profile)
        provenance: The kind of request that produced the response
        path: Keys leading from ``raw`` to the profile object; empty if ``raw``
            is the profile itself

    Raises:
        StructuralError: if there is no object at ``path``
        InvariantViolation: if the object is not a person profile
        ValidationError: if a mandatory field has the wrong type
    """
    profile_object = get_json_value(raw, *path, strict=True)
    if not isinstance(profile_object, Mapping):
        raise StructuralError(
            f"expected a profile object at {format_path(path) or '<root>'} "
            f"but found {json_type_name(profile_object)}",
            path,
        )

    _require_fields(profile_object, path)

    relative_provenance = provenance.relative_provenance
    relatives = {
        relationship: [
            build_profile(person, relative_provenance)
            for person in extract_people(profile_object, relationship)
        ]
        for relationship in (PARENTS, CHILDREN, SPOUSES, SIBLINGS)
    }

    name = profile_object[NAME]
    father, mother = pick_biological_parents(name, relatives[PARENTS])

    profile = PersonProfile(
        profile_object,
        provenance,
        parents=relatives[PARENTS],
        children=relatives[CHILDREN],
        spouses=relatives[SPOUSES],
        siblings=relatives[SIBLINGS],
        biological_father=father,
        biological_mother=mother,
    )

    if profile.is_living and profile.has_death_date():
        logger.warning(
            "profile for %s is marked as living but has a death date of %s",
            name,
            format_optional_date(profile.death_date) or profile.death_date,
        )

    return profile


def build_profiles(items: Any, provenance: ProfileProvenance, *path: str) -> list[PersonProfile]:
    """Build one profile per object in a sequence (or object of objects) of profiles."""
    match items:
        case None:
            return []
        case Mapping():
            values = list(items.values())
        case list():
            values = items
        case _:
            raise StructuralError(f"expected a list of profiles but found {json_type_name(items)}")

    return [build_profile(item, provenance, *path) for item in values if isinstance(item, Mapping)]
