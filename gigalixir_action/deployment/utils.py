#!/usr/bin/env python3
"""
Deployment utilities - shared helper functions.

Logging goes to stdout using the GitHub Actions workflow command syntax
(::group::, ::warning::, ::error::, ::add-mask::) so the runner can fold
and annotate the output.
"""

import os
from contextlib import contextmanager
from pathlib import Path

import yaml


def load_yaml(file_path):
    with open(file_path, 'r') as f:
        return yaml.safe_load(f)


def deep_merge(base, override):
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config(config_dir=None):
    """
    Load settings with optional local overrides.
    - Default: deploy-config.yaml
    - DEPLOYMENT_ENV=local: merges deploy-config.local.yaml overrides
    """
    if config_dir is None:
        config_dir = Path(__file__).parent.parent.parent / "config"
    config_dir = Path(config_dir)
    base_config = load_yaml(config_dir / "deploy-config.yaml") or {}

    env = os.environ.get('DEPLOYMENT_ENV', '').strip()
    if env == 'local':
        override_path = config_dir / "deploy-config.local.yaml"
        if override_path.exists():
            override_config = load_yaml(override_path) or {}
            return deep_merge(base_config, override_config)

    return base_config


def _escape_data(value):
    """Encode characters that would otherwise end a workflow command early."""
    return str(value).replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def info(message):
    print(message, flush=True)


def warning(message):
    print(f"::warning::{_escape_data(message)}", flush=True)


def error(message):
    print(f"::error::{_escape_data(message)}", flush=True)


def set_secret(value):
    """
    Ask the runner to mask value in all later log output.

    Each line of a multi-line value (an SSH key) is registered separately so
    lines printed on their own are masked too.
    """
    if not value:
        return
    print(f"::add-mask::{_escape_data(value)}", flush=True)
    lines = [line.strip() for line in value.splitlines()]
    if len(lines) > 1:
        for line in lines:
            if line:
                print(f"::add-mask::{_escape_data(line)}", flush=True)


@contextmanager
def group(label):
    """Fold everything printed inside the block under a collapsible label."""
    print(f"::group::{_escape_data(label)}", flush=True)
    try:
        yield
    finally:
        print("::endgroup::", flush=True)
