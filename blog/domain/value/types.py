"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Lowercase, alphanumeric with hyphens, 1-100 characters. Slugs are not
    unique: two posts with the same title words share a slug.
    Examples: 'hello-world', 'cafe-notes-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
