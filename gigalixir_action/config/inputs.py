#!/usr/bin/env python3
"""
Action inputs.

GitHub Actions exposes each `with:` input as an INPUT_<NAME> environment
variable. They are read once into an immutable ActionInputs that is handed
to the orchestrator.
"""

import json
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..errors import ConfigError


def get_input(name, environ=None, required=False):
    """Read one input, trimmed. Missing required inputs raise ConfigError."""
    if environ is None:
        environ = os.environ
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = environ.get(key, '').strip()

    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")

    return value


def parse_retry_attempts(value, default):
    if not value:
        return default
    try:
        attempts = int(value)
    except ValueError:
        raise ConfigError(f"MAX_RETRY_ATTEMPTS must be an integer, got '{value}'") from None
    if attempts < 0:
        raise ConfigError(f"MAX_RETRY_ATTEMPTS must not be negative, got {attempts}")
    return attempts


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def parse_migrations_flag(value):
    """
    MIGRATIONS is a JSON literal; its truthiness decides whether the SSH key is required.

    Truthiness follows JSON.parse in the CI runner: empty arrays and objects are
    truthy, and NaN/Infinity are rejected.
    """
    try:
        parsed = json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        raise ConfigError(f"MIGRATIONS must be a JSON value such as true or false, got '{value}'") from None

    if isinstance(parsed, (list, dict)):
        return True
    return bool(parsed)


@dataclass(frozen=True)
class ActionInputs:
    app: str
    username: str
    password: str
    migrations: bool
    max_retry_attempts: int
    app_subfolder: Optional[str] = None
    clean_cache: bool = False
    ssh_private_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, default_retry_attempts: int = 0):
        app_subfolder = get_input('APP_SUBFOLDER', environ)
        app = get_input('GIGALIXIR_APP', environ, required=True)
        clean = get_input('GIGALIXIR_CLEAN', environ)
        username = get_input('GIGALIXIR_USERNAME', environ, required=True)
        password = get_input('GIGALIXIR_PASSWORD', environ, required=True)
        max_retry_attempts = parse_retry_attempts(
            get_input('MAX_RETRY_ATTEMPTS', environ), default_retry_attempts
        )
        migrations = get_input('MIGRATIONS', environ, required=True)
        ssh_private_key = get_input(
            'SSH_PRIVATE_KEY', environ, required=parse_migrations_flag(migrations)
        )

        return cls(
            app=app,
            username=username,
            password=password,
            # Only the literal "true" runs migrations
            migrations=(migrations == 'true'),
            max_retry_attempts=max_retry_attempts,
            app_subfolder=app_subfolder or None,
            clean_cache=(clean == 'true'),
            ssh_private_key=ssh_private_key or None,
        )
