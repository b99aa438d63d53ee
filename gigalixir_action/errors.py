#!/usr/bin/env python3
"""
Error types raised during a deployment run.

Anything derived from DeployError ends the run; its message becomes the
failure reason reported to the CI runner.
"""


class DeployError(Exception):
    """Base class for errors that fail the run."""


class ConfigError(DeployError, ValueError):
    """Action input missing or malformed."""


class ParseError(DeployError, ValueError):
    """CLI output could not be interpreted."""


class CommandFailure(DeployError, RuntimeError):
    """External command exited non-zero."""

    def __init__(self, command, returncode):
        self.command = command
        self.returncode = returncode
        super().__init__(f"The process '{command}' failed with exit code {returncode}")


class TimeoutExceeded(DeployError):
    """Release did not become healthy within the retry budget."""

    def __init__(self, target_version, attempts):
        self.target_version = target_version
        self.attempts = attempts
        super().__init__("Taking too long for new release to deploy")


class MigrationFailure(DeployError):
    """Migration command failed; rollback has already been attempted where possible."""

    def __init__(self, message, release):
        self.release = release
        super().__init__(message)
