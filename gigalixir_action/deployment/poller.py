#!/usr/bin/env python3
"""
Release convergence polling.

After a push, Gigalixir rolls the new release out pod by pod. Migrations
must not start until the new release is healthy, so the poller re-reads
`gigalixir ps` at a fixed interval until enough pods of the target
release report Healthy, or the attempt budget is spent.
"""

import time

from .releases import get_release_set, is_release_healthy
from .utils import info
from ..errors import TimeoutExceeded

DEFAULT_INTERVAL = 10


class ConvergencePoller:
    """
    Waits for a release to become healthy.

    check(target_version) -> bool is called once per attempt. The worst case
    is max_attempts + 1 checks separated by max_attempts sleeps.
    """

    def __init__(self, check, interval=DEFAULT_INTERVAL, sleep=time.sleep):
        self.check = check
        self.interval = interval
        self.sleep = sleep

    @classmethod
    def for_app(cls, executor, app, interval=DEFAULT_INTERVAL, sleep=time.sleep):
        """Poller that checks live `gigalixir ps` output for app."""
        def check(target_version):
            return is_release_healthy(get_release_set(executor, app), target_version)
        return cls(check, interval=interval, sleep=sleep)

    def wait(self, seconds):
        info(f"Waiting {seconds} seconds...")
        self.sleep(seconds)

    def wait_for_healthy(self, target_version, max_attempts):
        attempt = 1
        while True:
            if self.check(target_version):
                return True

            if attempt > max_attempts:
                raise TimeoutExceeded(target_version, attempt)

            self.wait(self.interval)
            attempt += 1
