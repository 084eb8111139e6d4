"""Core test fixtures for the variantbox project."""

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from typer.testing import CliRunner

from variantbox.models import (
    BuildConfiguration,
    OptimizationPolicy,
    SigningIdentity,
    ToolchainSpec,
)
from variantbox.variants import VariantResolver


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VARIANTBOX_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("VARIANTBOX_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo logging configuration done by CLI invocations."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()


# ---- Model Fixtures ----


@pytest.fixture
def base_configuration() -> BuildConfiguration:
    """Base configuration modeled on a typical application build script."""
    return BuildConfiguration(
        toolchain=ToolchainSpec(
            compile_level="11",
            target_level="11",
            jvm_target="11",
            ndk_version="27.0.12077973",
            min_platform=21,
            target_platform="latest",
        ),
        optimization=OptimizationPolicy(shrink_code=False, shrink_resources=False),
    )


@pytest.fixture
def release_signing() -> SigningIdentity:
    return SigningIdentity(
        alias="release-key",
        credential_ref="env:RELEASE_KEY_PASSWORD",
        keystore_location="keystores/release.jks",
    )


@pytest.fixture
def release_overrides(release_signing: SigningIdentity) -> dict[str, Any]:
    return {
        "optimization": {
            "shrink_code": True,
            "shrink_resources": True,
            "default_rule_file": "proguard-android-optimize.txt",
            "rule_files": ["proguard-rules.pro"],
        },
        "signing": release_signing,
    }


@pytest.fixture
def resolver(base_configuration: BuildConfiguration) -> VariantResolver:
    return VariantResolver(base_configuration)


# ---- File Fixtures ----


@pytest.fixture
def variant_config_data() -> dict[str, Any]:
    """Raw content of a variant configuration file with one broken variant."""
    return {
        "defaults": {
            "toolchain": {
                "compileLevel": "VERSION_11",
                "targetLevel": "VERSION_11",
                "jvmTarget": "11",
                "ndkVersion": "27.0.12077973",
                "minPlatform": 21,
                "targetPlatform": "latest",
                "experimentalProperties": {
                    "android.ndk.suppressMinSdkVersionError": "21"
                },
            },
            "application": {
                "namespace": "com.example.expense_tracker",
                "application_id": "com.example.expense_tracker",
                "version_code": 3,
                "version_name": "1.2.0",
            },
        },
        "signing_configs": {
            "release": {
                "alias": "androiddebugkey",
                "credential_ref": "env:KEY_PASSWORD",
                "keystore_location": "debug.keystore",
            }
        },
        "variants": {
            "debug": None,
            "release": {
                "signing_config": "release",
                "optimization": {
                    "shrinkCode": True,
                    "shrinkResources": True,
                    "defaultRuleFile": "proguard-android-optimize.txt",
                    "ruleFiles": ["proguard-rules.pro"],
                },
            },
            "broken": {
                "optimization": {"shrink_code": False, "shrink_resources": True},
            },
        },
    }


@pytest.fixture
def write_variant_config(tmp_path: Path):
    """Write configuration data to a YAML file and return its path."""

    def _write(data: Any, name: str = "variants.yaml") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path

    return _write


@pytest.fixture
def variant_config_file(write_variant_config, variant_config_data) -> Path:
    return write_variant_config(variant_config_data)
