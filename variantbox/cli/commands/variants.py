"""Variant listing, resolution and build planning commands."""

from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.console import Console

from variantbox.cli.decorators import handle_errors
from variantbox.cli.helpers import (
    print_failure,
    print_json,
    print_success_message,
    print_warning_message,
)
from variantbox.cli.helpers.theme import TableStyles
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.results import VariantResolution
from variantbox.models.variant import BuildVariant


if TYPE_CHECKING:
    from variantbox.cli.app import AppContext


logger = get_struct_logger(__name__)

JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


def _settings_rows(variant: BuildVariant) -> list[tuple[str, str]]:
    toolchain = variant.toolchain
    optimization = variant.optimization
    application = variant.application
    rows = [
        ("toolchain.compile_level", toolchain.compile_level),
        ("toolchain.target_level", toolchain.target_level),
        ("toolchain.jvm_target", toolchain.jvm_target or "-"),
        ("toolchain.ndk_version", toolchain.ndk_version or "-"),
        ("toolchain.min_platform", str(toolchain.min_platform)),
        ("toolchain.target_platform", str(toolchain.target_platform)),
        ("toolchain.compile_platform", str(toolchain.compile_platform)),
        ("optimization.shrink_code", str(optimization.shrink_code)),
        ("optimization.shrink_resources", str(optimization.shrink_resources)),
        (
            "optimization.rule_files",
            ", ".join(optimization.effective_rule_files) or "-",
        ),
        ("application.application_id", application.application_id or "-"),
        (
            "application.version",
            f"{application.version_name} ({application.version_code})",
        ),
    ]
    for key, value in toolchain.experimental_properties.items():
        rows.append((f"toolchain.experimental_properties.{key}", value))
    if variant.signing is None:
        rows.append(("signing", "unsigned"))
    else:
        rows.append(("signing.alias", variant.signing.alias or "-"))
        rows.append(("signing.keystore_location", variant.signing.keystore_location or "-"))
    return rows


@handle_errors
def list_variants(ctx: typer.Context, output_json: JsonOption = False) -> None:
    """List registered variants without resolving them."""
    app_ctx: AppContext = ctx.obj
    resolver = app_ctx.resolver

    if output_json:
        print_json({"variants": resolver.names()})
        return

    if not len(resolver):
        print_warning_message(
            f"No variants registered in {app_ctx.config_path}", app_ctx.icon_mode
        )
        return

    table = TableStyles.create_variant_table(app_ctx.icon_mode)
    for name in resolver.names():
        overrides = resolver.registry.get(name)
        details = "overrides base" if not overrides.is_empty() else "base only"
        table.add_row(name, resolver.state_of(name).value, details)
    Console().print(table)


@handle_errors
def resolve_variant(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Variant to resolve")],
    output_json: JsonOption = False,
) -> None:
    """Resolve and validate one variant.

    Exits with status 1 and names the offending field when the variant is
    inconsistent.

    \b
    Examples:
        variantbox resolve debug
        variantbox resolve release --json
    """
    app_ctx: AppContext = ctx.obj
    variant = app_ctx.resolver.resolve(name)

    if output_json:
        print_json(variant.to_dict_full())
        return

    table = TableStyles.create_settings_table(f"Variant: {name}", app_ctx.icon_mode)
    for setting, value in _settings_rows(variant):
        table.add_row(setting, value)
    Console().print(table)
    print_success_message(f"Variant '{name}' is valid", app_ctx.icon_mode)


@handle_errors
def plan_variants(
    ctx: typer.Context,
    output_json: JsonOption = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with status 1 if any variant fails"),
    ] = False,
) -> None:
    """Resolve every variant and show which ones can be built.

    Failing variants are reported and excluded from the plan; the others are
    still resolved.
    """
    app_ctx: AppContext = ctx.obj
    results: list[VariantResolution] = list(app_ctx.resolver.resolve_all())
    failures = [r for r in results if not r.ok]

    if output_json:
        payload: dict[str, Any] = {
            "buildable": [r.variant_name for r in results if r.ok],
            "excluded": [r.get_summary() for r in failures],
        }
        print_json(payload)
    else:
        table = TableStyles.create_variant_table(app_ctx.icon_mode)
        for result in results:
            if result.failure is None:
                table.add_row(result.variant_name, result.state, "buildable")
            else:
                table.add_row(
                    result.variant_name,
                    result.state,
                    result.failure.offending_field or result.failure.message,
                )
        Console().print(table)
        for result in failures:
            if result.failure is not None:
                print_failure(result.failure, app_ctx.icon_mode)

    logger.info(
        "variant_plan_complete",
        buildable=len(results) - len(failures),
        excluded=len(failures),
    )
    if strict and failures:
        raise typer.Exit(1)
