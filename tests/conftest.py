import pytest


@pytest.fixture
def settings():
    return {
        'gigalixir': {
            'install_command': 'pip3 install gigalixir',
            'git_remote': 'gigalixir',
            'branch': 'master',
        },
        'deployment': {
            'max_retry_attempts': 5,
            'retry_interval': 10,
            'add_private_key_script': 'bin/add-private-key',
        },
    }


@pytest.fixture
def action_env():
    return {
        'INPUT_GIGALIXIR_APP': 'my-app',
        'INPUT_GIGALIXIR_USERNAME': 'deploy@example.com',
        'INPUT_GIGALIXIR_PASSWORD': 's3cret',
        'INPUT_MIGRATIONS': 'false',
    }
