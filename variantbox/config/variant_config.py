"""
Variant configuration loading module.

This module loads the base configuration, named signing identities and
variant overrides from a YAML file and turns them into a populated, frozen
VariantResolver.

File layout::

    defaults:          # base BuildConfiguration
      toolchain: {...}
    signing_configs:   # named SigningIdentity entries
      release: {alias: ..., credential_ref: ..., keystore_location: ...}
    variants:          # name -> overrides (null for none)
      debug:
      release:
        signing_config: release
        optimization: {shrink_code: true}
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from variantbox.core.errors import ConfigError, VariantError
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.base import VariantboxBaseModel
from variantbox.models.variant import BuildConfiguration, SigningIdentity
from variantbox.variants.resolver import VariantResolver


logger = get_struct_logger(__name__)

SIGNING_REFERENCE_KEYS = ("signing_config", "signingConfig")


class VariantFile(VariantboxBaseModel):
    """Top-level structure of a variant configuration file."""

    defaults: BuildConfiguration = BuildConfiguration()
    signing_configs: dict[str, SigningIdentity] = {}
    variants: dict[str, dict[str, Any] | None] = {}


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Variant configuration not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing variant configuration: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading variant configuration: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid variant configuration format: {config_path}")
    return raw


def parse_variant_file(raw: Mapping[str, Any]) -> VariantFile:
    """Validate raw configuration data.

    Raises:
        ConfigError: If the data does not match the expected structure
    """
    try:
        return VariantFile.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigError(f"Invalid variant configuration: {e}") from e


def _expand_signing_reference(
    name: str,
    overrides: dict[str, Any] | None,
    signing_configs: Mapping[str, SigningIdentity],
) -> dict[str, Any] | None:
    """Replace a ``signing_config`` reference by the identity it names."""
    if not overrides:
        return overrides

    expanded = dict(overrides)
    references = [key for key in SIGNING_REFERENCE_KEYS if key in expanded]
    if not references:
        return expanded
    if len(references) > 1 or "signing" in expanded:
        raise ConfigError(
            f"Variant '{name}' must give either 'signing' or one 'signing_config'"
        )

    reference = expanded.pop(references[0])
    if reference not in signing_configs:
        raise ConfigError(
            f"Variant '{name}' references unknown signing config '{reference}'"
        )
    expanded["signing"] = signing_configs[reference]
    return expanded


def build_resolver(variant_file: VariantFile) -> VariantResolver:
    """Create a resolver populated from a parsed variant file and freeze it.

    Raises:
        ConfigError: If a signing reference cannot be resolved or a
            variant's overrides are invalid
    """
    resolver = VariantResolver(variant_file.defaults)
    for name, overrides in variant_file.variants.items():
        expanded = _expand_signing_reference(
            name, overrides, variant_file.signing_configs
        )
        try:
            resolver.register(name, expanded)
        except VariantError as e:
            raise ConfigError(f"Invalid overrides for variant {e}") from e
    resolver.freeze()
    return resolver


def load_variant_config(config_path: str | Path) -> VariantResolver:
    """Load a variant configuration file into a frozen resolver.

    Args:
        config_path: Path of the YAML file

    Returns:
        VariantResolver with every variant of the file registered

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    path = Path(config_path)
    logger.debug("loading_variant_config", path=str(path))
    variant_file = parse_variant_file(_read_yaml(path))
    resolver = build_resolver(variant_file)
    logger.info(
        "variant_config_loaded",
        path=str(path),
        variants=len(resolver),
        signing_configs=len(variant_file.signing_configs),
    )
    return resolver
