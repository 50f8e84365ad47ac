"""Exceptions raised while turning service responses into person profiles."""


class ProfileError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(ProfileError, ValueError):
    """A value has the wrong shape (malformed date, identifier, mistyped scalar)."""


class TypeMismatchError(ValidationError, TypeError):
    """A typed path lookup found a value of another JSON type."""


class StructuralError(ProfileError):
    """A strict path lookup did not find the object it needed."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        super().__init__(message)
        self.path = path


class InvariantViolation(ProfileError):
    """The input is not the kind of object this layer handles (or a bug was hit)."""
