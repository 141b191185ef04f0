"""
errors.py

Responsibility: The error taxonomy raised while decoding package descriptors.

Every error is a `ValueError` so callers that only care about "bad input" can
catch one type. Errors carry the offending field and, when decoding a
collection, the location of the document that failed.
"""

from __future__ import annotations

from typing import Sequence


class DescriptorError(ValueError):
    """Base class for every package descriptor decode failure."""

    def __init__(self, message: str, *, field: str | None = None, location: str | None = None) -> None:
        self.message = message
        self.field = field
        self.location = location
        super().__init__(self._render())

    def _render(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message

    def _copy_kwargs(self) -> dict[str, object]:
        return {"field": self.field}

    def with_location(self, location: str) -> DescriptorError:
        """Return a copy of this error (same class) that points at `location`."""
        return type(self)(self.message, location=location, **self._copy_kwargs())


class MissingFieldError(DescriptorError):
    pass


class TypeMismatchError(DescriptorError):
    pass


class ReservedKeyError(DescriptorError):
    pass


class DocumentSyntaxError(DescriptorError):
    pass


class UnknownEnumValueError(DescriptorError):
    """The `type` token does not name a declared package type."""

    def __init__(
        self,
        message: str,
        *,
        value: str,
        allowed: Sequence[str],
        field: str | None = None,
        location: str | None = None,
    ) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(message, field=field, location=location)

    def _copy_kwargs(self) -> dict[str, object]:
        return {"field": self.field, "value": self.value, "allowed": self.allowed}
