"""Resolution of named build variants against a base configuration."""

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from variantbox.core.errors import (
    DuplicateVariantError,
    InvalidOverrideError,
    VariantError,
)
from variantbox.core.structlog_logger import StructlogMixin
from variantbox.models.overrides import VariantOverrides
from variantbox.models.results import VariantResolution, VariantState
from variantbox.models.variant import BuildConfiguration, BuildVariant
from variantbox.variants.merge import apply_overrides
from variantbox.variants.registry import VariantRegistry
from variantbox.variants.validation import validate_variant


OverridesInput = VariantOverrides | Mapping[str, Any] | None


class ResolvedVariants:
    """Lazy view over the resolution of every registered variant.

    Each iteration starts over from the current registry, resolving variants
    one at a time in registration order. A failing variant is yielded as a
    failed ``VariantResolution``; it never stops the iteration.
    """

    def __init__(self, resolver: "VariantResolver") -> None:
        self._resolver = resolver

    def __iter__(self) -> Iterator[VariantResolution]:
        for name in self._resolver.names():
            try:
                variant = self._resolver.resolve(name)
            except VariantError as e:
                yield VariantResolution.failed(e.to_failure())
            else:
                yield VariantResolution.validated(variant)

    def __len__(self) -> int:
        return len(self._resolver)

    def buildable(self) -> list[BuildVariant]:
        """Variants that resolved and validated."""
        return [r.variant for r in self if r.variant is not None]

    def failures(self) -> list[VariantResolution]:
        return [r for r in self if not r.ok]


class VariantResolver(StructlogMixin):
    """Resolves registered variant overrides into validated build variants.

    A resolver is created for one build invocation and discarded afterwards;
    it owns its registry and shares no state with other resolvers.
    """

    def __init__(
        self,
        base: BuildConfiguration,
        registry: VariantRegistry | None = None,
    ) -> None:
        super().__init__()
        self.base = base
        self.registry = registry if registry is not None else VariantRegistry()

    def register(self, name: str, overrides: OverridesInput = None) -> None:
        """Store the overrides of a new variant. No resolution happens here.

        A name that is already registered is rejected before the overrides
        are looked at.

        Raises:
            DuplicateVariantError: If ``name`` is already registered
            InvalidOverrideError: If ``name`` is blank or padded with
                whitespace, or ``overrides`` fails type validation
            RegistryFrozenError: If the registry has been frozen
        """
        if not name or not name.strip():
            raise InvalidOverrideError(
                str(name), "variant name must not be empty", "name"
            )
        if name != name.strip():
            # Resolved variants carry the stripped name; keys must match it
            raise InvalidOverrideError(
                name, "variant name must not have surrounding whitespace", "name"
            )
        if name in self.registry:
            raise DuplicateVariantError(name, "variant is already registered")
        parsed = self._parse_overrides(name, overrides)
        self.registry.add(name, parsed)
        self.logger.debug(
            "variant_registered", variant=name, has_overrides=not parsed.is_empty()
        )

    def unregister(self, name: str) -> None:
        """Drop a variant so a corrected override can be registered."""
        self.registry.remove(name)
        self.logger.debug("variant_unregistered", variant=name)

    def resolve(self, name: str) -> BuildVariant:
        """Resolve and validate a registered variant.

        Raises:
            UnknownVariantError: If ``name`` was never registered
            ToolchainConflictError, OptimizationPolicyError,
            IncompleteSigningError: On the first failed check
        """
        overrides = self.registry.get(name)
        log = self.log_operation("resolve", variant=name)
        variant = apply_overrides(name, self.base, overrides)
        log.debug("variant_resolved")
        try:
            self.validate(variant)
        except VariantError as e:
            log.info(
                "variant_validation_failed",
                error_kind=e.error_kind.value,
                field=e.offending_field,
            )
            raise
        return variant

    def validate(self, variant: BuildVariant) -> BuildVariant:
        """Check a variant for consistency, returning it unchanged on success."""
        return validate_variant(variant)

    def resolve_all(self) -> ResolvedVariants:
        """Resolve every registered variant, isolating failures per variant."""
        return ResolvedVariants(self)

    def state_of(self, name: str) -> VariantState:
        """Current lifecycle state of ``name`` before any resolution.

        Only ``UNREGISTERED`` or ``REGISTERED`` is returned. Resolution is not
        cached, so ``RESOLVED`` is never stored; the outcome of a resolution
        is reported as a terminal state on its ``VariantResolution``.
        """
        if name in self.registry:
            return VariantState.REGISTERED
        return VariantState.UNREGISTERED

    def names(self) -> list[str]:
        return self.registry.names()

    def freeze(self) -> None:
        self.registry.freeze()

    def _parse_overrides(self, name: str, overrides: OverridesInput) -> VariantOverrides:
        if overrides is None:
            return VariantOverrides()
        if isinstance(overrides, VariantOverrides):
            return overrides
        try:
            return VariantOverrides.model_validate(dict(overrides))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise InvalidOverrideError(name, first["msg"], field or None) from e

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __len__(self) -> int:
        return len(self.registry)


def create_variant_resolver(
    base: BuildConfiguration | None = None,
    variants: Mapping[str, OverridesInput] | None = None,
) -> VariantResolver:
    """Create a variant resolver, optionally pre-registering variants.

    Args:
        base: Base configuration; defaults to an all-default configuration
        variants: Optional mapping of variant name to overrides

    Returns:
        VariantResolver: New resolver instance
    """
    resolver = VariantResolver(base if base is not None else BuildConfiguration())
    for name, overrides in (variants or {}).items():
        resolver.register(name, overrides)
    return resolver
