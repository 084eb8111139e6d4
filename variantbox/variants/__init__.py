"""Variant registration, resolution and validation."""

from .merge import apply_overrides
from .registry import VariantRegistry
from .resolver import ResolvedVariants, VariantResolver, create_variant_resolver
from .validation import validate_variant


__all__ = [
    "ResolvedVariants",
    "VariantRegistry",
    "VariantResolver",
    "apply_overrides",
    "create_variant_resolver",
    "validate_variant",
]
