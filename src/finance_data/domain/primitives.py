"""Validated value types wrapping primitive category fields."""

import uuid
from dataclasses import dataclass


class BlankStringError(ValueError):
    """Raised when a string is empty after trimming whitespace."""

    pass


@dataclass(frozen=True)
class NotBlankTrimmedString:
    """Text that is guaranteed non-empty once surrounding whitespace is removed.

    The stored value is always the trimmed form.
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = self.value.strip()
        if not trimmed:
            raise BlankStringError("Value must not be blank")
        object.__setattr__(self, "value", trimmed)

    @classmethod
    def from_string(cls, raw: str) -> "NotBlankTrimmedString | None":
        """Build from raw text, returning None instead of raising when blank.

        Args:
            raw: The untrimmed input text.

        Returns:
            The validated string, or None if raw is blank.
        """
        if not raw or not raw.strip():
            return None
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ColorInt:
    """A packed ARGB color value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Color must be an int, got {type(self.value).__name__}")


@dataclass(frozen=True)
class CategoryId:
    """Identifier of a category; never interchangeable with other aggregate ids."""

    value: uuid.UUID

    @classmethod
    def new(cls) -> "CategoryId":
        """Generate a random category id."""
        return cls(uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)
