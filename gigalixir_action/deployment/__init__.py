"""
Deployment and orchestration package.

This package contains modules for pushing to Gigalixir, inspecting
releases, waiting for a release to converge, and migrating with rollback.
"""

__all__ = ['orchestrator', 'releases', 'poller', 'rollback', 'utils']
