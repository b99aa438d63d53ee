"""
Gigalixir deployment action.

Pushes an application to Gigalixir from a CI pipeline, optionally runs
migrations once the new release is healthy, and rolls back on failure.
"""

__version__ = '1.0.0'
