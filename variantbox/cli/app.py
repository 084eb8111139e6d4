"""Main CLI application for Variantbox."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from variantbox import __version__
from variantbox.cli.decorators.error_handling import print_stack_trace_if_verbose
from variantbox.config.settings import VariantboxSettings, create_settings
from variantbox.config.variant_config import load_variant_config
from variantbox.core.logging import setup_logging
from variantbox.variants.resolver import VariantResolver


__all__ = ["app", "main", "AppContext"]

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        self.verbose = verbose
        self.log_file = log_file
        self.no_emoji = no_emoji
        self.config_file = config_file
        self.settings: VariantboxSettings = create_settings()
        self._resolver: VariantResolver | None = None

    @property
    def config_path(self) -> Path:
        """The --config flag takes precedence over VARIANTBOX_CONFIG_PATH."""
        if self.config_file:
            return Path(self.config_file).expanduser()
        return self.settings.config_path

    @property
    def icon_mode(self) -> str:
        """CLI --no-emoji flag takes precedence over the settings."""
        if self.no_emoji:
            return "text"
        return self.settings.icon_mode

    @property
    def resolver(self) -> VariantResolver:
        """Resolver for this invocation, loaded from the config file on first use."""
        if self._resolver is None:
            self._resolver = load_variant_config(self.config_path)
        return self._resolver


app = typer.Typer(
    name="variantbox",
    help=f"""Variantbox build-variant resolver v{__version__}

Resolves named build variants (debug, release, ...) against a base
configuration and checks toolchain, shrinking and signing consistency.

Common workflows:
  • List variants:    variantbox list
  • Resolve one:      variantbox resolve release --json
  • Plan all builds:  variantbox plan --strict""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Also log to this file as JSON")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to the variant configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Variantbox build-variant resolver."""
    if version:
        print(f"Variantbox v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, log_file=log_file, config_file=config_file, no_emoji=no_emoji
    )
    ctx.obj = app_context

    # Set log level based on verbosity, debug flag, or settings
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = app_context.settings.get_log_level_int()

    setup_logging(
        level=log_level,
        log_file=log_file,
        json_logs=app_context.settings.log_format == "json",
    )


def _register_commands() -> None:
    from variantbox.cli.commands import register_all_commands

    register_all_commands(app)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
