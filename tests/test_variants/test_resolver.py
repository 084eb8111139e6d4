"""Tests for VariantResolver."""

import pytest

from variantbox.core.errors import (
    DuplicateVariantError,
    ErrorKind,
    IncompleteSigningError,
    InvalidOverrideError,
    OptimizationPolicyError,
    RegistryFrozenError,
    UnknownVariantError,
)
from variantbox.models import VariantOverrides, VariantState
from variantbox.variants import VariantResolver, create_variant_resolver


class TestRegister:
    def test_register_is_lazy(self, resolver):
        # Invalid combination is accepted until resolution
        resolver.register(
            "broken", {"optimization": {"shrink_code": False, "shrink_resources": True}}
        )

        assert "broken" in resolver
        assert resolver.state_of("broken") == VariantState.REGISTERED

    @pytest.mark.parametrize(
        "overrides",
        [
            None,
            {},
            {"toolchain": {"min_platform": 30}},
            VariantOverrides(),
            {"toolchain": {"min_platform": 0}},
            {"toolchain": {"minSdk": 21}},
        ],
    )
    @pytest.mark.parametrize("frozen", [False, True])
    def test_duplicate_always_fails(self, resolver, overrides, frozen):
        resolver.register("debug")
        if frozen:
            resolver.freeze()

        with pytest.raises(DuplicateVariantError) as exc_info:
            resolver.register("debug", overrides)
        assert exc_info.value.error_kind == ErrorKind.DUPLICATE_VARIANT
        assert resolver.names() == ["debug"]

    def test_invalid_override_types(self, resolver):
        with pytest.raises(InvalidOverrideError) as exc_info:
            resolver.register("bad", {"toolchain": {"min_platform": 0}})

        assert exc_info.value.offending_field == "toolchain.min_platform"
        assert "bad" not in resolver

    def test_unknown_override_field(self, resolver):
        with pytest.raises(InvalidOverrideError) as exc_info:
            resolver.register("bad", {"toolchain": {"minSdk": 21}})
        assert exc_info.value.offending_field == "toolchain.minSdk"

    def test_empty_name_rejected(self, resolver):
        with pytest.raises(InvalidOverrideError):
            resolver.register("  ")

    @pytest.mark.parametrize("name", [" debug ", "debug ", "\tdebug"])
    def test_padded_name_rejected(self, resolver, name):
        with pytest.raises(InvalidOverrideError) as exc_info:
            resolver.register(name)

        assert exc_info.value.offending_field == "name"
        assert len(resolver) == 0

    def test_registered_name_matches_resolved_name(self, resolver):
        resolver.register("debug")

        assert resolver.resolve("debug").name == resolver.names()[0]

    def test_unregister_allows_correction(self, resolver):
        resolver.register("broken", {"optimization": {"shrink_resources": True}})
        with pytest.raises(OptimizationPolicyError):
            resolver.resolve("broken")

        resolver.unregister("broken")
        resolver.register(
            "broken", {"optimization": {"shrink_resources": False}}
        )

        assert resolver.resolve("broken").optimization.shrink_resources is False

    def test_frozen_resolver(self, resolver):
        resolver.register("debug")
        resolver.freeze()

        with pytest.raises(RegistryFrozenError):
            resolver.register("release")
        assert resolver.resolve("debug").name == "debug"


class TestResolve:
    def test_unknown_variant(self, resolver):
        with pytest.raises(UnknownVariantError) as exc_info:
            resolver.resolve("missing")

        assert exc_info.value.variant_name == "missing"
        assert resolver.state_of("missing") == VariantState.UNREGISTERED

    def test_idempotent(self, resolver, release_overrides):
        resolver.register("release", release_overrides)

        first = resolver.resolve("release")
        second = resolver.resolve("release")

        assert first == second
        assert first is not second

    def test_resolution_is_not_stored_as_state(self, resolver):
        resolver.register("debug")
        resolver.resolve("debug")

        assert resolver.state_of("debug") == VariantState.REGISTERED
        states = {VariantState(r.state) for r in resolver.resolve_all()}
        assert VariantState.RESOLVED not in states
        assert first.signing is not second.signing

    def test_round_trip_with_base_as_overrides(self, resolver, base_configuration):
        resolver.register(
            "same", VariantOverrides.from_configuration(base_configuration)
        )

        assert resolver.resolve("same").configuration() == base_configuration

    def test_validate_returns_variant_unchanged(self, resolver):
        resolver.register("debug")
        variant = resolver.resolve("debug")

        assert resolver.validate(variant) is variant


class TestScenario:
    """Debug, release and broken variants over one base configuration."""

    def test_debug_release_broken(
        self, resolver, base_configuration, release_overrides
    ):
        resolver.register("debug")
        resolver.register("release", release_overrides)
        resolver.register(
            "broken",
            {"optimization": {"shrink_resources": True, "shrink_code": False}},
        )

        debug = resolver.resolve("debug")
        assert debug.configuration() == base_configuration

        release = resolver.resolve("release")
        assert release.optimization.shrink_code is True
        assert release.optimization.shrink_resources is True
        assert release.signing is not None and release.signing.is_complete()

        with pytest.raises(OptimizationPolicyError) as exc_info:
            resolver.resolve("broken")
        assert exc_info.value.offending_field == "optimization.shrink_code"

    def test_release_without_signing(self, resolver):
        resolver.register("release", {"optimization": {"shrink_code": True}})

        with pytest.raises(IncompleteSigningError):
            resolver.resolve("release")


class TestResolveAll:
    def setup_variants(self, resolver, release_overrides):
        resolver.register("release", release_overrides)
        resolver.register(
            "broken", {"optimization": {"shrink_resources": True}}
        )
        resolver.register("debug")

    def test_failures_isolated_in_registration_order(self, resolver, release_overrides):
        self.setup_variants(resolver, release_overrides)

        results = list(resolver.resolve_all())

        assert [r.variant_name for r in results] == ["release", "broken", "debug"]
        assert [r.ok for r in results] == [True, False, True]

        broken = results[1]
        assert broken.state == VariantState.VALIDATION_FAILED
        assert broken.variant is None
        assert broken.failure is not None
        assert broken.failure.error_kind == ErrorKind.OPTIMIZATION_POLICY
        assert broken.failure.offending_field == "optimization.shrink_code"

    def test_restartable(self, resolver, release_overrides):
        self.setup_variants(resolver, release_overrides)
        resolved = resolver.resolve_all()

        assert list(resolved) == list(resolved)
        assert len(resolved) == 3

    def test_lazy_view_sees_later_registrations(self, resolver):
        resolved = resolver.resolve_all()
        resolver.register("debug")

        assert [r.variant_name for r in resolved] == ["debug"]

    def test_buildable_and_failures(self, resolver, release_overrides):
        self.setup_variants(resolver, release_overrides)
        resolved = resolver.resolve_all()

        assert [v.name for v in resolved.buildable()] == ["release", "debug"]
        assert [r.variant_name for r in resolved.failures()] == ["broken"]

    def test_summary(self, resolver):
        resolver.register("broken", {"optimization": {"shrink_resources": True}})

        (result,) = resolver.resolve_all()

        assert result.get_summary() == {
            "variant": "broken",
            "state": "validation_failed",
            "error_kind": "optimization_policy",
            "offending_field": "optimization.shrink_code",
            "message": "resource shrinking requires code shrinking",
        }


class TestFactory:
    def test_create_with_variants(self, base_configuration):
        resolver = create_variant_resolver(
            base_configuration, {"debug": None, "profile": {"toolchain": {"min_platform": 24}}}
        )

        assert isinstance(resolver, VariantResolver)
        assert resolver.names() == ["debug", "profile"]
        assert resolver.resolve("profile").toolchain.min_platform == 24

    def test_default_base(self):
        resolver = create_variant_resolver()
        resolver.register("debug")

        assert resolver.resolve("debug").toolchain.min_platform == 21

    def test_resolvers_share_no_state(self, base_configuration):
        first = create_variant_resolver(base_configuration)
        second = create_variant_resolver(base_configuration)
        first.register("debug")

        assert "debug" not in second
