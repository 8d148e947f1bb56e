"""Domain value objects for Threads.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from threads.domain.value.common import RootValueObject, ValueObject


class SortOrder(str, Enum):
    """Creation-time sort order for listings."""

    DESC = "desc"  # Newest first
    ASC = "asc"  # Oldest first


class ExternalId(RootValueObject[str]):
    """User id assigned by the identity provider.

    Opaque to this service: only its length is checked.
    """

    @field_validator("root")
    @classmethod
    def validate_external_id(cls, v: str) -> str:
        """Validate external id is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("External id must be 1-255 characters")
        return v


class Username(RootValueObject[str]):
    """Public handle of a user or community.

    Always stored lowercase. 3-30 characters from letters, digits,
    underscores, dots and hyphens.
    Examples: 'ada_lovelace', 'threads.dev', 'rust-lang'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Normalize to lowercase and validate format."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters: letters, digits, '_', '.' or '-'"
            )
        return v


class Page(ValueObject):
    """One page of a paginated listing.

    Page numbers start at 1.
    """

    number: int = 1
    size: int = 20

    @field_validator("number", "size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Page number and size must be positive."""
        if v < 1:
            raise ValueError("Page number and size must be at least 1")
        return v

    @property
    def skip(self) -> int:
        """Number of items before this page."""
        return (self.number - 1) * self.size

    def has_next(self, total: int, returned: int) -> bool:
        """Whether items remain after this page.

        Args:
            total: Total number of matching items
            returned: Number of items on this page
        """
        return total > self.skip + returned
