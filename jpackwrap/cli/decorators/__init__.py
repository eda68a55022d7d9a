"""CLI command decorators."""

from .error_handling import format_error, handle_errors, print_stack_trace_if_verbose


__all__ = ["format_error", "handle_errors", "print_stack_trace_if_verbose"]
