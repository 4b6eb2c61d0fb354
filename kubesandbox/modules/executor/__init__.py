"""
Executor Module - Black Box Interface

Purpose: Simulate kubectl command execution
Interface: KubectlExecutor.execute(raw) -> ExecutionResult, parse(raw) -> Command
Hidden: Route table, alias normalization, output formatting

Can be replaced with an executor that talks to a real cluster.
"""

from .command_parser import Command, parse
from .errors import KubectlError
from .executor import ExecutionResult, KubectlExecutor

__all__ = ["Command", "parse", "ExecutionResult", "KubectlExecutor", "KubectlError"]
