"""Data models shared across Variantbox."""

from .base import VariantboxBaseModel
from .overrides import (
    ApplicationOverrides,
    OptimizationOverrides,
    ToolchainOverrides,
    VariantOverrides,
)
from .results import VariantFailure, VariantResolution, VariantState
from .variant import (
    LATEST,
    ApplicationIdentity,
    BuildConfiguration,
    BuildVariant,
    OptimizationPolicy,
    SigningIdentity,
    ToolchainSpec,
    is_concrete,
    version_key,
)


__all__ = [
    "LATEST",
    "ApplicationIdentity",
    "ApplicationOverrides",
    "BuildConfiguration",
    "BuildVariant",
    "OptimizationOverrides",
    "OptimizationPolicy",
    "SigningIdentity",
    "ToolchainOverrides",
    "ToolchainSpec",
    "VariantFailure",
    "VariantOverrides",
    "VariantResolution",
    "VariantState",
    "VariantboxBaseModel",
    "is_concrete",
    "version_key",
]
