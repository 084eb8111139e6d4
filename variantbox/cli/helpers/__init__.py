"""Helper utilities for CLI commands."""

from variantbox.cli.helpers.output import (
    print_error_message,
    print_failure,
    print_json,
    print_success_message,
    print_warning_message,
)


__all__ = [
    "print_error_message",
    "print_failure",
    "print_json",
    "print_success_message",
    "print_warning_message",
]
