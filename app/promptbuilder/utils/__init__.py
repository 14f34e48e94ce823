"""Utility modules for promptbuilder.

This module exports commonly used console helpers.
"""

from promptbuilder.utils.formatting import (
    console,
    create_entries_table,
    err_console,
    print_error,
    print_info,
    print_notice,
    print_success,
    print_warning,
)
from promptbuilder.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "create_entries_table",
    "err_console",
    "print_error",
    "print_info",
    "print_notice",
    "print_success",
    "print_warning",
]
