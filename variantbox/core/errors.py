"""Error hierarchy for Variantbox."""

from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from variantbox.models.results import VariantFailure


class VariantboxError(Exception):
    """Base exception for all Variantbox errors."""


class ConfigError(VariantboxError):
    """Configuration could not be loaded or is malformed."""


class RegistryFrozenError(ConfigError):
    """The variant registry no longer accepts changes."""


class ErrorKind(str, Enum):
    """Kinds of per-variant failures reported to the orchestrator."""

    DUPLICATE_VARIANT = "duplicate_variant"
    UNKNOWN_VARIANT = "unknown_variant"
    INVALID_OVERRIDE = "invalid_override"
    TOOLCHAIN_CONFLICT = "toolchain_conflict"
    OPTIMIZATION_POLICY = "optimization_policy"
    INCOMPLETE_SIGNING = "incomplete_signing"


class VariantError(VariantboxError):
    """A failure tied to a single build variant.

    Carries the variant name, the failure kind and the offending field so
    callers can report the problem without parsing the message.
    """

    error_kind: ErrorKind

    def __init__(
        self,
        variant_name: str,
        message: str,
        offending_field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.variant_name = variant_name
        self.offending_field = offending_field
        self.message = message

    def __str__(self) -> str:
        if self.offending_field:
            return f"{self.variant_name}: {self.message} (field: {self.offending_field})"
        return f"{self.variant_name}: {self.message}"

    def to_failure(self) -> "VariantFailure":
        """Convert the error into a structured failure value."""
        from variantbox.models.results import VariantFailure

        return VariantFailure(
            variant_name=self.variant_name,
            error_kind=self.error_kind,
            offending_field=self.offending_field,
            message=self.message,
        )


class DuplicateVariantError(VariantError):
    error_kind = ErrorKind.DUPLICATE_VARIANT


class UnknownVariantError(VariantError):
    error_kind = ErrorKind.UNKNOWN_VARIANT


class InvalidOverrideError(VariantError):
    """Override values failed type validation at registration."""

    error_kind = ErrorKind.INVALID_OVERRIDE


class ToolchainConflictError(VariantError):
    error_kind = ErrorKind.TOOLCHAIN_CONFLICT


class OptimizationPolicyError(VariantError):
    error_kind = ErrorKind.OPTIMIZATION_POLICY


class IncompleteSigningError(VariantError):
    """An optimized variant lacks a complete signing identity."""

    error_kind = ErrorKind.INCOMPLETE_SIGNING


__all__ = [
    "ConfigError",
    "DuplicateVariantError",
    "ErrorKind",
    "IncompleteSigningError",
    "InvalidOverrideError",
    "OptimizationPolicyError",
    "RegistryFrozenError",
    "ToolchainConflictError",
    "UnknownVariantError",
    "VariantError",
    "VariantboxError",
]
