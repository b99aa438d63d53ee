"""
Configuration and validation package.

This package contains modules for reading the action inputs from the CI
environment and validating the JSON printed by the Gigalixir CLI.
"""

__all__ = ['inputs', 'validation']
