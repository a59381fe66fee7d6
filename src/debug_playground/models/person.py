"""Person record model."""

from enum import Enum

from pydantic import BaseModel


class AgeBand(str, Enum):
    """Advisory bands produced by age validation."""

    NEGATIVE = "negative"
    VALID = "valid"
    TOO_LARGE = "too_large"


class Person(BaseModel):
    """Simple mutable record passed to update routines."""

    name: str
    age: int

    def describe(self) -> str:
        """Render the record with field labels, e.g. ``{Name:Alice Age:25}``."""
        return f"{{Name:{self.name} Age:{self.age}}}"
