#!/usr/bin/env python3
"""
Gigalixir Deployment Orchestrator
Pushes an app to Gigalixir and, when enabled, runs migrations with automatic rollback
"""

import sys
import time
import shlex
import argparse
from pathlib import Path

from .utils import load_config, group, info, error, set_secret
from .releases import get_current_release, format_release_message
from .poller import ConvergencePoller
from .rollback import run_migrations
from ..config.inputs import ActionInputs, get_input, parse_retry_attempts
from ..errors import DeployError
from ..executors import get_executor

ROOT = Path(__file__).parent.parent.parent


def _print_phase(phase_name):
    print(f"\n{'='*60}")
    print(phase_name)
    print(f"{'='*60}", flush=True)


def clean_cache_flag(clean_cache):
    """Extra git config that tells Gigalixir to build without its cache."""
    return '-c http.extraheader="GIGALIXIR-CLEAN: true" ' if clean_cache else ''


def build_push_command(inputs, settings):
    remote = settings['gigalixir']['git_remote']
    branch = settings['gigalixir']['branch']
    flag = clean_cache_flag(inputs.clean_cache)

    if inputs.app_subfolder:
        return f"git {flag}subtree push --prefix {shlex.quote(inputs.app_subfolder)} {remote} {branch}"
    return f"git {flag}push -f {remote} HEAD:refs/heads/{branch}"


def install_cli(executor, settings):
    with group("Installing gigalixir"):
        executor.execute(settings['gigalixir']['install_command'])


def login(executor, inputs):
    with group("Logging in to gigalixir"):
        executor.execute("gigalixir login", ["-e", inputs.username, "-y", "-p", inputs.password])


def set_git_remote(executor, app):
    with group("Setting git remote for gigalixir"):
        executor.execute(f"gigalixir git:remote {app}")


def push(executor, inputs, settings):
    with group("Deploying to gigalixir"):
        executor.execute(build_push_command(inputs, settings))


def add_private_key(executor, ssh_private_key, settings):
    script = ROOT / settings['deployment']['add_private_key_script']
    with group("Adding private key to gigalixir"):
        executor.execute(shlex.quote(str(script)), [ssh_private_key])


def deploy_command(inputs, executor, settings, sleep=time.sleep):
    """Full deployment: login, push, then optionally wait, migrate and roll back."""
    _print_phase(f"DEPLOYING {inputs.app} TO GIGALIXIR")

    install_cli(executor, settings)
    login(executor, inputs)
    set_git_remote(executor, inputs.app)

    current_release = get_current_release(executor, inputs.app)
    info(format_release_message(current_release))

    push(executor, inputs, settings)

    if inputs.migrations:
        add_private_key(executor, inputs.ssh_private_key, settings)

        new_release = get_current_release(executor, inputs.app)

        poller = ConvergencePoller.for_app(
            executor, inputs.app,
            interval=settings['deployment']['retry_interval'],
            sleep=sleep,
        )
        with group(f"Waiting for new release to deploy: {new_release}"):
            poller.wait_for_healthy(new_release, inputs.max_retry_attempts)

        run_migrations(executor, inputs.app, current_release)

    _print_phase("DEPLOYMENT COMPLETE")


def current_release_command(app, executor):
    """Print the release currently live on app."""
    release = get_current_release(executor, app)
    info(format_release_message(release))
    return release


def wait_command(app, release, max_attempts, executor, settings, sleep=time.sleep):
    """Block until release is healthy on app."""
    poller = ConvergencePoller.for_app(
        executor, app,
        interval=settings['deployment']['retry_interval'],
        sleep=sleep,
    )
    with group(f"Waiting for new release to deploy: {release}"):
        poller.wait_for_healthy(release, max_attempts)
    info(f"Release {release} is healthy")


def run(command='deploy', environ=None, executor=None, settings=None, sleep=time.sleep,
        release=None, max_attempts=None):
    """
    Run a command and translate failures into the runner's exit status.

    Returns 0 on success, 1 after reporting the failure with ::error::.
    Errors outside DeployError (bad settings, OS failures) are reported the
    same way.
    """
    try:
        if settings is None:
            settings = load_config()
        if executor is None:
            executor = get_executor()
        default_attempts = settings['deployment']['max_retry_attempts']

        if command == 'deploy':
            inputs = ActionInputs.from_env(environ, default_retry_attempts=default_attempts)
            set_secret(inputs.password)
            set_secret(inputs.ssh_private_key)
            deploy_command(inputs, executor, settings, sleep=sleep)
        elif command == 'current-release':
            current_release_command(get_input('GIGALIXIR_APP', environ, required=True), executor)
        elif command == 'wait':
            app = get_input('GIGALIXIR_APP', environ, required=True)
            if max_attempts is None:
                max_attempts = parse_retry_attempts(get_input('MAX_RETRY_ATTEMPTS', environ), default_attempts)
            wait_command(app, release, max_attempts, executor, settings, sleep=sleep)
        else:
            raise DeployError(f"Unknown command: {command}")
    except Exception as e:
        error(str(e) or type(e).__name__)
        return 1

    return 0


def main():
    """Main entry point - parse command line and run deployment."""
    parser = argparse.ArgumentParser(
        description='Gigalixir Deployment Orchestrator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Inputs are read from INPUT_* environment variables, as set by GitHub Actions.

Examples:
  # Full deployment (what the action runs)
  python -m gigalixir_action deploy

  # Show the release currently live on INPUT_GIGALIXIR_APP
  python -m gigalixir_action current-release

  # Wait for release 42 to become healthy
  python -m gigalixir_action wait --release 42 --max-attempts 10
        """
    )
    parser.add_argument('command', nargs='?', default='deploy',
                        choices=['deploy', 'current-release', 'wait'], help='Command to run')
    parser.add_argument('--release', type=int, help='Release version to wait for')
    parser.add_argument('--max-attempts', type=int, help='Retry budget (defaults to MAX_RETRY_ATTEMPTS)')
    args = parser.parse_args()

    if args.command == 'wait' and args.release is None:
        parser.error("wait requires --release argument")
    if args.max_attempts is not None and args.max_attempts < 0:
        parser.error("--max-attempts must not be negative")

    sys.exit(run(args.command, release=args.release, max_attempts=args.max_attempts))


if __name__ == '__main__':
    main()
