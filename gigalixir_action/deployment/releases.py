#!/usr/bin/env python3
"""
Release inspection.

Parses `gigalixir ps` and `gigalixir releases` output into ReleaseSet and
release history, and answers whether a given release is fully rolled out.
"""

import json
from collections import namedtuple

from .utils import group
from ..config.validation import validate_against_schema, PS_SCHEMA, RELEASES_SCHEMA
from ..errors import ParseError

HEALTHY = "Healthy"

# Version 0 is never issued by Gigalixir; it marks an app with no releases yet.
NO_RELEASE = 0

Pod = namedtuple('Pod', ['version', 'status'])
ReleaseSet = namedtuple('ReleaseSet', ['pods', 'replicas_desired'])
ReleaseHistoryEntry = namedtuple('ReleaseHistoryEntry', ['version'])


def _decode(text, schema_name, what):
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise ParseError(f"Could not parse {what} output as JSON: {e}") from e

    is_valid, errors = validate_against_schema(payload, schema_name)
    if not is_valid:
        raise ParseError(f"Unexpected {what} output: {'; '.join(errors)}")
    return payload


def _version(value, what):
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"Invalid release version in {what} output: {value!r}") from None


def parse_release_set(text):
    """Parse `gigalixir ps` JSON into a ReleaseSet."""
    payload = _decode(text, PS_SCHEMA, "ps")
    pods = tuple(
        Pod(_version(pod['version'], "ps"), pod['status'])
        for pod in payload['pods']
    )
    return ReleaseSet(pods, payload['replicas_desired'])


def parse_release_history(text):
    """Parse `gigalixir releases` JSON (newest first) into history entries."""
    payload = _decode(text, RELEASES_SCHEMA, "releases")
    return [ReleaseHistoryEntry(_version(entry['version'], "releases")) for entry in payload]


def is_release_healthy(release_set, target_version):
    healthy = sum(
        1 for pod in release_set.pods
        if pod.version == target_version and pod.status == HEALTHY
    )
    return healthy >= release_set.replicas_desired


def current_release(history):
    return history[0].version if history else NO_RELEASE


def format_release_message(release):
    if release:
        return f"The current release is {release}"
    return "This is the first release"


def get_release_set(executor, app):
    with group("Getting current replicas"):
        result = executor.execute(f"gigalixir ps -a {app}", capture=True)
    return parse_release_set(result.stdout)


def get_current_release(executor, app):
    with group("Getting current release"):
        result = executor.execute(f"gigalixir releases -a {app}", capture=True)
    return current_release(parse_release_history(result.stdout))
