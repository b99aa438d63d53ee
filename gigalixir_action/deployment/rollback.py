#!/usr/bin/env python3
"""
Migrations and automatic rollback.

A failed migration rolls the app back to the release that was live before
the push. A first-ever release has nothing to roll back to.
"""

from .releases import NO_RELEASE
from .utils import group, warning, error
from ..errors import CommandFailure, MigrationFailure


def rollback(executor, app, release):
    """Roll app back to release."""
    with group("Rolling back"):
        executor.execute(f"gigalixir releases:rollback -a {app} -r {release}")


def run_migrations(executor, app, previous_release):
    """
    Run migrations on the new release.

    Raises MigrationFailure when the migration fails, after rolling back to
    previous_release if there is one. A failing rollback is logged and the
    migration error is still what fails the run.
    """
    try:
        with group("Running migrations"):
            executor.execute(f'gigalixir ps:migrate -o "-tt" -a {app}')
    except CommandFailure as e:
        if previous_release == NO_RELEASE:
            warning("Migration failed")
        else:
            warning(f"Migration failed, rolling back to the previous release: {previous_release}")
            try:
                rollback(executor, app, previous_release)
            except CommandFailure as rollback_error:
                error(f"Rollback to release {previous_release} failed: {rollback_error}")

        raise MigrationFailure(str(e), previous_release) from e
