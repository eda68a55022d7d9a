"""Protocol definitions for jpackwrap adapters.

Protocols use ``typing.Protocol`` with ``@runtime_checkable`` so they serve
both static type checking and runtime ``isinstance()`` checks, which lets
tests substitute fake implementations.
"""

from .process_runner_protocol import ProcessOutcome, ProcessRunnerProtocol


__all__ = ["ProcessOutcome", "ProcessRunnerProtocol"]
