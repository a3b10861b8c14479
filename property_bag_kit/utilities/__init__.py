"""
Utility functions for property-bag-kit.
"""

from .console import (
    build_check_table,
    build_field_table,
    print_error,
    print_info,
    print_success,
    print_warning,
    render_report,
)

__all__ = [
    "build_check_table",
    "build_field_table",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "render_report",
]
