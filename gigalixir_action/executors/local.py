#!/usr/bin/env python3
"""
Local executor - runs commands on the CI runner with subprocess.
"""

import shlex
import subprocess

from .base import BaseExecutor, CommandResult
from ..errors import CommandFailure, DeployError


class LocalExecutor(BaseExecutor):
    """Runs commands on the local machine, echoing each command line first."""

    def __init__(self, cwd=None, env=None):
        self.cwd = cwd
        self.env = env

    def build_cmd(self, command, args=None):
        return shlex.split(command) + [str(arg) for arg in (args or [])]

    def execute(self, command, args=None, capture=False):
        cmd = self.build_cmd(command, args)
        print(f"[command]{' '.join(cmd)}", flush=True)

        try:
            if capture:
                result = subprocess.run(cmd, cwd=self.cwd, env=self.env, stdout=subprocess.PIPE,
                                        encoding='utf-8', errors='replace')
                print(result.stdout, flush=True)
            else:
                result = subprocess.run(cmd, cwd=self.cwd, env=self.env)
        except FileNotFoundError as e:
            raise DeployError(f"Unable to locate executable file: {cmd[0]}") from e
        except OSError as e:
            raise DeployError(f"Unable to run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            raise CommandFailure(cmd[0], result.returncode)

        return CommandResult(result.returncode, result.stdout if capture else '')
