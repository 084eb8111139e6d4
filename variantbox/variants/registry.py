"""Registry of variant overrides for a single build invocation."""

from collections.abc import Iterator

from variantbox.core.errors import (
    DuplicateVariantError,
    RegistryFrozenError,
    UnknownVariantError,
)
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.overrides import VariantOverrides


logger = get_struct_logger(__name__)


class VariantRegistry:
    """Mapping of variant name to its overrides, in registration order.

    Populated once while the configuration is loaded and then frozen. There is
    no locking: callers registering from several threads must serialize access
    themselves.
    """

    def __init__(self) -> None:
        self._overrides: dict[str, VariantOverrides] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject further changes for the rest of the invocation."""
        self._frozen = True
        logger.debug("variant_registry_frozen", variants=len(self._overrides))

    def add(self, name: str, overrides: VariantOverrides) -> None:
        if name in self._overrides:
            raise DuplicateVariantError(name, "variant is already registered")
        self._check_mutable(name)
        self._overrides[name] = overrides

    def remove(self, name: str) -> None:
        self._check_mutable(name)
        if name not in self._overrides:
            raise UnknownVariantError(name, "variant is not registered")
        del self._overrides[name]

    def get(self, name: str) -> VariantOverrides:
        try:
            return self._overrides[name]
        except KeyError:
            raise UnknownVariantError(name, "variant is not registered") from None

    def names(self) -> list[str]:
        return list(self._overrides)

    def _check_mutable(self, name: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot change variant '{name}': registry is frozen"
            )

    def __contains__(self, name: object) -> bool:
        return name in self._overrides

    def __len__(self) -> int:
        return len(self._overrides)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._overrides))
