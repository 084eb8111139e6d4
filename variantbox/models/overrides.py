"""Partial configuration models used to register variants.

Every leaf field is optional. Only the fields a variant sets explicitly (and
to a non-null value) take part in the merge; the rest come from the base
configuration.
"""

from typing import Annotated, Any

from pydantic import Field

from variantbox.models.base import VariantboxBaseModel
from variantbox.models.variant import (
    BuildConfiguration,
    PlatformLevel,
    SigningIdentity,
    Version,
)


class ToolchainOverrides(VariantboxBaseModel):
    compile_level: Version | None = None
    target_level: Version | None = None
    jvm_target: Version | None = None
    ndk_version: str | None = None
    min_platform: Annotated[int, Field(ge=1)] | None = None
    target_platform: PlatformLevel | None = None
    compile_platform: PlatformLevel | None = None
    experimental_properties: dict[str, str] | None = None


class OptimizationOverrides(VariantboxBaseModel):
    shrink_code: bool | None = None
    shrink_resources: bool | None = None
    default_rule_file: str | None = None
    rule_files: tuple[str, ...] | None = None


class ApplicationOverrides(VariantboxBaseModel):
    namespace: str | None = None
    application_id: str | None = None
    version_code: Annotated[int, Field(ge=1)] | None = None
    version_name: str | None = None


class VariantOverrides(VariantboxBaseModel):
    """Fields of a variant that differ from the base configuration.

    ``signing`` is an opaque reference: when given it replaces the base
    signing identity as a whole.
    """

    toolchain: ToolchainOverrides = Field(default_factory=ToolchainOverrides)
    signing: SigningIdentity | None = None
    optimization: OptimizationOverrides = Field(default_factory=OptimizationOverrides)
    application: ApplicationOverrides = Field(default_factory=ApplicationOverrides)

    @classmethod
    def from_configuration(cls, config: BuildConfiguration) -> "VariantOverrides":
        """Build overrides that set every field to the value in ``config``."""
        data: dict[str, Any] = {
            "toolchain": dict(config.toolchain),
            "optimization": dict(config.optimization),
            "application": dict(config.application),
        }
        if config.signing is not None:
            data["signing"] = config.signing
        return cls.model_validate(data)

    def is_empty(self) -> bool:
        return not any(
            section.model_dump(exclude_unset=True, exclude_none=True)
            for section in (self.toolchain, self.optimization, self.application)
        ) and self.signing is None
