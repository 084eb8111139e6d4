"""Helper functions for CLI output formatting with Rich integration."""

import json
from typing import Any

import typer

from variantbox.cli.helpers.theme import get_themed_console
from variantbox.models.results import VariantFailure


def print_success_message(message: str, icon_mode: str = "emoji") -> None:
    """Print a success message with a checkmark."""
    get_themed_console(icon_mode).print_success(message)


def print_error_message(message: str, icon_mode: str = "emoji") -> None:
    """Print an error message with an X symbol."""
    get_themed_console(icon_mode).print_error(message)


def print_warning_message(message: str, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode).print_warning(message)


def print_failure(failure: VariantFailure, icon_mode: str = "emoji") -> None:
    """Print the offending variant and field of a failed resolution."""
    print_error_message(f"Variant {failure.describe()}", icon_mode)


def print_json(data: Any) -> None:
    """Print data as indented JSON on stdout, bypassing Rich wrapping."""
    typer.echo(json.dumps(data, indent=2))
