"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
import typer

from variantbox.cli.helpers.output import print_error_message, print_failure
from variantbox.core.errors import ConfigError, VariantError
from variantbox.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def _icon_mode() -> str:
    ctx = click.get_current_context(silent=True)
    app_ctx = getattr(ctx, "obj", None) if ctx is not None else None
    return getattr(app_ctx, "icon_mode", "emoji")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Prints the offending variant and field (or the configuration problem)
    and exits with status 1.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except VariantError as e:
            logger.error(
                "variant_error",
                variant=e.variant_name,
                error_kind=e.error_kind.value,
                field=e.offending_field,
            )
            print_failure(e.to_failure(), _icon_mode())
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_error_message(f"Configuration error: {e}", _icon_mode())
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_error_message(f"Unexpected error: {e}", _icon_mode())
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
