"""Base model for all Variantbox Pydantic models.

This module provides a base model class that enforces consistent validation
and serialization behavior across all Variantbox models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VariantboxBaseModel(BaseModel):
    """Base model class for all Variantbox Pydantic models.

    Models are immutable once constructed. Input accepts both the Python field
    names and their camelCase aliases (``minPlatform``), which is how build
    scripts usually spell them. Unknown keys are rejected so that typos in a
    variant file surface as errors instead of being ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
        # Report error locations with Python field names
        loc_by_alias=False,
    )

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones).

        Returns:
            Dictionary representation including all fields
        """
        return self.model_dump(exclude_unset=False, mode="json")
