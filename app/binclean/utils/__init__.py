"""Utility modules for binclean.

This module exports commonly used utility functions.
"""

from binclean.utils.formatting import (
    console,
    err_console,
    print_fatal,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_fatal",
    "print_info",
    "print_success",
    "print_warning",
]
