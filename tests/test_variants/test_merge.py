"""Tests for applying overrides to the base configuration."""

from variantbox.models import SigningIdentity, VariantOverrides
from variantbox.variants import apply_overrides


class TestApplyOverrides:
    def test_no_overrides_returns_base(self, base_configuration):
        variant = apply_overrides("debug", base_configuration, VariantOverrides())

        assert variant.name == "debug"
        assert variant.configuration() == base_configuration

    def test_override_wins_per_field(self, base_configuration):
        overrides = VariantOverrides.model_validate(
            {"toolchain": {"min_platform": 26}, "optimization": {"shrink_code": True}}
        )

        variant = apply_overrides("release", base_configuration, overrides)

        assert variant.toolchain.min_platform == 26
        assert variant.optimization.shrink_code is True
        # Untouched fields come from the base
        assert variant.toolchain.ndk_version == "27.0.12077973"
        assert variant.toolchain.target_platform == "latest"
        assert variant.optimization.shrink_resources is False

    def test_explicit_none_keeps_base_value(self, base_configuration):
        overrides = VariantOverrides.model_validate({"toolchain": {"jvm_target": None}})

        variant = apply_overrides("debug", base_configuration, overrides)

        assert variant.toolchain.jvm_target == "11"

    def test_signing_replaced_as_a_whole(self, base_configuration, release_signing):
        base = base_configuration.model_copy(
            update={"signing": SigningIdentity(alias="base", keystore_location="b.jks")}
        )
        overrides = VariantOverrides(signing=release_signing)

        variant = apply_overrides("release", base, overrides)

        assert variant.signing == release_signing
        assert variant.signing is not release_signing

    def test_base_not_modified(self, base_configuration):
        before = base_configuration.model_copy(deep=True)
        overrides = VariantOverrides.model_validate(
            {"toolchain": {"experimental_properties": {"flag": "1"}}}
        )

        variant = apply_overrides("debug", base_configuration, overrides)

        assert base_configuration == before
        assert variant.toolchain.experimental_properties == {"flag": "1"}

    def test_mutable_leaves_not_shared(self, base_configuration):
        overrides = VariantOverrides.model_validate(
            {"toolchain": {"experimental_properties": {"flag": "1"}}}
        )

        first = apply_overrides("a", base_configuration, overrides)
        second = apply_overrides("b", base_configuration, overrides)

        assert (
            first.toolchain.experimental_properties
            is not second.toolchain.experimental_properties
        )
        assert (
            first.toolchain.experimental_properties
            is not overrides.toolchain.experimental_properties
        )
