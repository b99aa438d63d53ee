#!/usr/bin/env python3
"""
Executor package exports.
"""

from .base import BaseExecutor, CommandResult
from .local import LocalExecutor


def get_executor(cwd=None):
    """Factory for the executor used by the CLI entry point."""
    return LocalExecutor(cwd=cwd)


__all__ = ['BaseExecutor', 'CommandResult', 'LocalExecutor', 'get_executor']
