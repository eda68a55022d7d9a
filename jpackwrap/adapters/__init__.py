"""Adapters package for external system interfaces."""

from jpackwrap.protocols import ProcessRunnerProtocol

from .process_adapter import (
    LoggerOutputMiddleware,
    ProcessAdapter,
    create_process_adapter,
    resolve_executable,
)


__all__ = [
    "LoggerOutputMiddleware",
    "ProcessAdapter",
    "ProcessRunnerProtocol",
    "create_process_adapter",
    "resolve_executable",
]
