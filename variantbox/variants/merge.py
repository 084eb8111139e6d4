"""Per-field merge of variant overrides onto the base configuration."""

import copy
from typing import Any, TypeVar

from variantbox.models.base import VariantboxBaseModel
from variantbox.models.overrides import VariantOverrides
from variantbox.models.variant import BuildConfiguration, BuildVariant


ModelT = TypeVar("ModelT", bound=VariantboxBaseModel)


def _set_fields(overrides: VariantboxBaseModel) -> dict[str, Any]:
    """Fields explicitly given a non-null value."""
    return overrides.model_dump(exclude_unset=True, exclude_none=True)


def merge_section(base: ModelT, overrides: VariantboxBaseModel) -> ModelT:
    """Return a copy of ``base`` with every set override field replacing its own.

    The copy is deep, so mutable leaves (mappings) are never shared with the
    base configuration.
    """
    updates = {
        name: copy.deepcopy(getattr(overrides, name))
        for name in _set_fields(overrides)
    }
    return base.model_copy(update=updates, deep=True)


def apply_overrides(
    name: str, base: BuildConfiguration, overrides: VariantOverrides
) -> BuildVariant:
    """Resolve ``overrides`` against ``base`` into a new named variant.

    Overrides win field by field. The signing identity is an opaque reference
    and is replaced as a whole. Neither input is modified.
    """
    signing = overrides.signing if overrides.signing is not None else base.signing
    return BuildVariant(
        name=name,
        toolchain=merge_section(base.toolchain, overrides.toolchain),
        signing=signing.model_copy(deep=True) if signing is not None else None,
        optimization=merge_section(base.optimization, overrides.optimization),
        application=merge_section(base.application, overrides.application),
    )
