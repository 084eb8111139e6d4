"""Result models for variant resolution."""

from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from variantbox.core.errors import ErrorKind
from variantbox.models.base import VariantboxBaseModel
from variantbox.models.variant import BuildVariant


class VariantState(str, Enum):
    """Lifecycle of a single variant.

    ``RESOLVED`` is the transient step between merging the overrides and
    validating the result. It is never reported: a ``VariantResolution``
    only carries ``VALIDATED`` or one of the failed states.
    """

    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    RESOLVED = "resolved"
    VALIDATED = "validated"
    RESOLUTION_FAILED = "resolution_failed"
    VALIDATION_FAILED = "validation_failed"


_FAILED_STATES = {VariantState.RESOLUTION_FAILED, VariantState.VALIDATION_FAILED}

# Errors raised before validation starts count as resolution failures
_RESOLUTION_KINDS = {
    ErrorKind.DUPLICATE_VARIANT,
    ErrorKind.UNKNOWN_VARIANT,
    ErrorKind.INVALID_OVERRIDE,
}


class VariantFailure(VariantboxBaseModel):
    """Structured description of why a variant could not be used."""

    variant_name: str
    error_kind: ErrorKind
    offending_field: str | None = None
    message: str = ""

    @property
    def state(self) -> VariantState:
        if ErrorKind(self.error_kind) in _RESOLUTION_KINDS:
            return VariantState.RESOLUTION_FAILED
        return VariantState.VALIDATION_FAILED

    def describe(self) -> str:
        text = f"{self.variant_name}: {self.message}"
        if self.offending_field:
            text += f" (field: {self.offending_field})"
        return text


class VariantResolution(VariantboxBaseModel):
    """Outcome of resolving one registered variant.

    Holds either the validated variant or the failure, never both.
    """

    variant_name: str
    state: VariantState
    variant: BuildVariant | None = None
    failure: VariantFailure | None = Field(default=None)

    @model_validator(mode="after")
    def validate_outcome(self) -> "VariantResolution":
        """Ensure the state matches the outcome carried."""
        state = VariantState(self.state)
        if state in _FAILED_STATES:
            if self.failure is None or self.variant is not None:
                raise ValueError("failed resolutions carry a failure and no variant")
        elif state == VariantState.VALIDATED:
            if self.variant is None or self.failure is not None:
                raise ValueError("validated resolutions carry a variant and no failure")
        else:
            raise ValueError(f"{state.value} is not a terminal resolution state")
        return self

    @classmethod
    def validated(cls, variant: BuildVariant) -> "VariantResolution":
        return cls(
            variant_name=variant.name,
            state=VariantState.VALIDATED,
            variant=variant,
        )

    @classmethod
    def failed(cls, failure: VariantFailure) -> "VariantResolution":
        return cls(
            variant_name=failure.variant_name,
            state=failure.state,
            failure=failure,
        )

    @property
    def ok(self) -> bool:
        return self.state == VariantState.VALIDATED

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the resolution."""
        summary: dict[str, Any] = {
            "variant": self.variant_name,
            "state": VariantState(self.state).value,
        }
        if self.failure is not None:
            summary["error_kind"] = ErrorKind(self.failure.error_kind).value
            summary["offending_field"] = self.failure.offending_field
            summary["message"] = self.failure.message
        return summary


__all__ = ["VariantFailure", "VariantResolution", "VariantState"]
