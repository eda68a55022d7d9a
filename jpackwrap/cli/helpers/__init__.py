"""CLI helper functions."""

from .output import (
    print_error_message,
    print_list_item,
    print_package_result,
    print_success_message,
)


__all__ = [
    "print_error_message",
    "print_list_item",
    "print_package_result",
    "print_success_message",
]
