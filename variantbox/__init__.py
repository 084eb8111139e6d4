"""Variantbox - build-variant configuration resolver."""

from importlib.metadata import distribution

from .core.errors import ConfigError, VariantboxError, VariantError
from .models import BuildConfiguration, BuildVariant, VariantOverrides
from .variants import VariantResolver, create_variant_resolver


__version__ = distribution(__package__ or "variantbox").version

__all__ = [
    "BuildConfiguration",
    "BuildVariant",
    "ConfigError",
    "VariantError",
    "VariantOverrides",
    "VariantResolver",
    "VariantboxError",
    "create_variant_resolver",
    "__version__",
]
