"""
Classification of profile identifiers.

Every string is exactly one of:
- a person name such as "Churchill-4" (characters, a hyphen, digits)
- a space name such as "Space:Allied_POW_camps"
- neither

The checks only reject obvious junk; the service has the final say.
"""

from dataclasses import dataclass, field
from enum import Enum
import re

from errors import InvariantViolation, ValidationError


SPACE_NAME_PATTERN = re.compile(r"Space:.+")
PERSON_NAME_PATTERN = re.compile(r".+-[0-9]+")


class IdentifierKind(Enum):
    PERSON_NAME = "PersonName"
    SPACE_NAME = "SpaceName"


def is_space_name(value: str) -> bool:
    """True if ``value`` is "Space:" followed by at least one character."""
    return SPACE_NAME_PATTERN.fullmatch(value) is not None


def is_person_name(value: str) -> bool:
    """True if ``value`` is not a space name and ends in a hyphen and digits."""
    if not value or is_space_name(value):
        return False
    return PERSON_NAME_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, order=True)
class Identifier:
    """A validated person or space identifier; compares like its string."""

    value: str
    kind: IdentifierKind = field(init=False, compare=False)

    def __post_init__(self):
        if not self.value:
            raise ValidationError(f"invalid identifier {self.value!r} (must not be empty)")

        person = is_person_name(self.value)
        space = is_space_name(self.value)
        if person and space:
            raise InvariantViolation(
                f"identifier {self.value!r} looks like both a person name and a space name"
            )
        if not person and not space:
            raise ValidationError(
                f"identifier {self.value!r} is neither a person nor a space identifier"
            )

        object.__setattr__(
            self, "kind", IdentifierKind.PERSON_NAME if person else IdentifierKind.SPACE_NAME
        )

    @property
    def is_person_name(self) -> bool:
        return self.kind is IdentifierKind.PERSON_NAME

    @property
    def is_space_name(self) -> bool:
        return self.kind is IdentifierKind.SPACE_NAME

    def __str__(self) -> str:
        return self.value
