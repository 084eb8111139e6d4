from .errors import (
    ConfigError,
    DuplicateVariantError,
    ErrorKind,
    IncompleteSigningError,
    InvalidOverrideError,
    OptimizationPolicyError,
    RegistryFrozenError,
    ToolchainConflictError,
    UnknownVariantError,
    VariantboxError,
    VariantError,
)
from .logging import get_logger, setup_logging


__all__ = [
    "setup_logging",
    "get_logger",
    "VariantboxError",
    "ConfigError",
    "RegistryFrozenError",
    "ErrorKind",
    "VariantError",
    "DuplicateVariantError",
    "UnknownVariantError",
    "InvalidOverrideError",
    "ToolchainConflictError",
    "OptimizationPolicyError",
    "IncompleteSigningError",
]
