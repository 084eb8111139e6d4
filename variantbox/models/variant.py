"""Build variant models: toolchain, signing, optimization and application identity."""

import re
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field, SecretStr

from variantbox.models.base import VariantboxBaseModel


LATEST = "latest"

_VERSION_PATTERN = re.compile(r"^\d+(\.\d+)*$")


def _coerce_version(value: Any) -> str:
    """Accept ints, whole floats and dotted strings as version values.

    A fractional float has already lost its spelling (YAML reads ``1.10`` as
    ``1.1``), so dotted versions must be given as strings.
    """
    if isinstance(value, bool):
        raise ValueError("version must be a number or dotted string")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"dotted version {value!r} must be quoted, e.g. '1.8'")
        value = int(value)
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("version must be a number or dotted string")
    value = value.strip()
    # JavaVersion.VERSION_11 style spelling
    if value.upper().startswith("VERSION_"):
        value = value[len("VERSION_") :].replace("_", ".")
    if not _VERSION_PATTERN.match(value):
        raise ValueError(f"invalid version: {value!r}")
    return value


Version = Annotated[str, BeforeValidator(_coerce_version)]
PlatformLevel = Annotated[int, Field(ge=1)] | Literal["latest"]


def version_key(version: str) -> tuple[int, ...]:
    """Return a comparable key for a compatibility level.

    The legacy ``1.N`` spelling is equivalent to ``N``, so ``"1.8"`` and
    ``"8"`` compare equal.
    """
    parts = tuple(int(part) for part in version.split("."))
    if len(parts) > 1 and parts[0] == 1:
        parts = parts[1:]
    # Trailing zeros do not change the level: 11 == 11.0
    while len(parts) > 1 and parts[-1] == 0:
        parts = parts[:-1]
    return parts


def is_concrete(level: int | str) -> bool:
    """Whether a platform level is a number rather than ``"latest"``."""
    return isinstance(level, int)


class ToolchainSpec(VariantboxBaseModel):
    """Compiler and platform versions used to produce a build."""

    compile_level: Version = Field(
        default="11", description="Source compatibility level"
    )
    target_level: Version = Field(
        default="11", description="Target (runtime) compatibility level"
    )
    jvm_target: Version | None = Field(
        default=None, description="Bytecode target of the JVM language compiler"
    )
    ndk_version: str = Field(default="", description="Native toolchain version")
    min_platform: Annotated[int, Field(ge=1)] = Field(
        default=21, description="Lowest platform API level supported"
    )
    target_platform: PlatformLevel = Field(
        default=LATEST, description="Platform API level targeted"
    )
    compile_platform: PlatformLevel = Field(
        default=LATEST, description="Platform API level compiled against"
    )
    experimental_properties: dict[str, str] = Field(default_factory=dict)


class SigningIdentity(VariantboxBaseModel):
    """Credential set used to sign an artifact.

    ``credential_ref`` is an opaque handle (for example the name of an
    environment variable holding the keystore password); it is never
    dereferenced here and is masked in reprs and JSON output.
    """

    alias: str = ""
    credential_ref: SecretStr = SecretStr("")
    keystore_location: str = ""

    @property
    def keystore_path(self) -> Path:
        return Path(self.keystore_location)

    def missing_fields(self) -> list[str]:
        """Names of the fields left empty, in declaration order."""
        missing = []
        if not self.alias:
            missing.append("alias")
        if not self.credential_ref.get_secret_value().strip():
            missing.append("credential_ref")
        if not self.keystore_location:
            missing.append("keystore_location")
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()


class OptimizationPolicy(VariantboxBaseModel):
    """Code and resource shrinking settings."""

    shrink_code: bool = False
    shrink_resources: bool = False
    default_rule_file: str | None = Field(
        default=None,
        description="Platform-provided rule file applied before the project's own",
    )
    rule_files: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return self.shrink_code or self.shrink_resources

    @property
    def effective_rule_files(self) -> tuple[str, ...]:
        if self.default_rule_file:
            return (self.default_rule_file, *self.rule_files)
        return self.rule_files


class ApplicationIdentity(VariantboxBaseModel):
    """Package identity and version of the produced application."""

    namespace: str = ""
    application_id: str = ""
    version_code: Annotated[int, Field(ge=1)] = 1
    version_name: str = "1.0"


class BuildConfiguration(VariantboxBaseModel):
    """Base configuration every variant starts from."""

    toolchain: ToolchainSpec = Field(default_factory=ToolchainSpec)
    signing: SigningIdentity | None = None
    optimization: OptimizationPolicy = Field(default_factory=OptimizationPolicy)
    application: ApplicationIdentity = Field(default_factory=ApplicationIdentity)


class BuildVariant(BuildConfiguration):
    """A fully resolved, named build configuration."""

    name: str = Field(min_length=1)

    def configuration(self) -> BuildConfiguration:
        """Return the settings of this variant without its name."""
        return BuildConfiguration(
            toolchain=self.toolchain,
            signing=self.signing,
            optimization=self.optimization,
            application=self.application,
        )

    @property
    def release_grade(self) -> bool:
        """Variants that shrink code must be fully signed."""
        return self.optimization.enabled
