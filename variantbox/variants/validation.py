"""Consistency checks applied to resolved build variants.

Checks run in a fixed order (toolchain, optimization, signing) and the first
failure is raised. Checks never modify the variant.
"""

from variantbox.core.errors import (
    IncompleteSigningError,
    OptimizationPolicyError,
    ToolchainConflictError,
)
from variantbox.models.variant import BuildVariant, is_concrete, version_key


def check_toolchain(variant: BuildVariant) -> None:
    toolchain = variant.toolchain

    if is_concrete(toolchain.target_platform) and (
        toolchain.min_platform > toolchain.target_platform  # type: ignore[operator]
    ):
        raise ToolchainConflictError(
            variant.name,
            f"min platform {toolchain.min_platform} is above "
            f"target platform {toolchain.target_platform}",
            "toolchain.min_platform",
        )

    if (
        is_concrete(toolchain.target_platform)
        and is_concrete(toolchain.compile_platform)
        and toolchain.target_platform > toolchain.compile_platform  # type: ignore[operator]
    ):
        raise ToolchainConflictError(
            variant.name,
            f"target platform {toolchain.target_platform} is above "
            f"compile platform {toolchain.compile_platform}",
            "toolchain.target_platform",
        )

    if version_key(toolchain.compile_level) > version_key(toolchain.target_level):
        raise ToolchainConflictError(
            variant.name,
            f"compile level {toolchain.compile_level} is newer than "
            f"target level {toolchain.target_level}",
            "toolchain.compile_level",
        )

    if toolchain.jvm_target is not None and version_key(
        toolchain.jvm_target
    ) != version_key(toolchain.target_level):
        raise ToolchainConflictError(
            variant.name,
            f"jvm target {toolchain.jvm_target} does not match "
            f"target level {toolchain.target_level}",
            "toolchain.jvm_target",
        )


def check_optimization(variant: BuildVariant) -> None:
    policy = variant.optimization
    if policy.shrink_resources and not policy.shrink_code:
        raise OptimizationPolicyError(
            variant.name,
            "resource shrinking requires code shrinking",
            "optimization.shrink_code",
        )


def check_signing(variant: BuildVariant) -> None:
    if not variant.release_grade:
        return
    if variant.signing is None:
        raise IncompleteSigningError(
            variant.name, "optimized variant has no signing identity", "signing"
        )
    missing = variant.signing.missing_fields()
    if missing:
        raise IncompleteSigningError(
            variant.name,
            f"signing identity is incomplete: {', '.join(missing)} empty",
            f"signing.{missing[0]}",
        )


VALIDATION_CHECKS = (check_toolchain, check_optimization, check_signing)


def validate_variant(variant: BuildVariant) -> BuildVariant:
    """Run every check in order and return the variant unchanged."""
    for check in VALIDATION_CHECKS:
        check(variant)
    return variant
