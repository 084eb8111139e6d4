"""Configuration loading for Variantbox."""

from .settings import DEFAULT_CONFIG_FILE, VariantboxSettings, create_settings
from .variant_config import (
    VariantFile,
    build_resolver,
    load_variant_config,
    parse_variant_file,
)


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "VariantFile",
    "VariantboxSettings",
    "build_resolver",
    "create_settings",
    "load_variant_config",
    "parse_variant_file",
]
