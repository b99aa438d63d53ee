#!/usr/bin/env python3
"""
Base executor interface for running external commands.
"""

from collections import namedtuple

CommandResult = namedtuple('CommandResult', ['returncode', 'stdout'])


class BaseExecutor:
    """Interface for command executors (subprocess in CI, fakes in tests)."""

    def execute(self, command, args=None, capture=False):
        """
        Run a command line and wait for it to exit.

        Args:
            command: Command line, split shell-style (quotes are honoured)
            args: Extra arguments appended verbatim, without splitting
            capture: Collect standard output into the result

        Returns:
            CommandResult(returncode, stdout); stdout is '' when not captured

        Raises:
            CommandFailure if the process exits non-zero
        """
        raise NotImplementedError("Subclasses must implement execute()")
