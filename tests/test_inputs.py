import pytest

from gigalixir_action.config.inputs import ActionInputs, get_input, parse_retry_attempts
from gigalixir_action.errors import ConfigError


def test_get_input_trims_and_normalises_name():
    environ = {'INPUT_SOME_NAME': '  value \n'}
    assert get_input('some name', environ) == 'value'
    assert get_input('missing', environ) == ''


def test_missing_required_input():
    with pytest.raises(ConfigError, match="Input required and not supplied: GIGALIXIR_APP"):
        get_input('GIGALIXIR_APP', {}, required=True)


def test_minimal_inputs(action_env):
    inputs = ActionInputs.from_env(action_env, default_retry_attempts=5)

    assert inputs.app == 'my-app'
    assert inputs.username == 'deploy@example.com'
    assert inputs.password == 's3cret'
    assert inputs.migrations is False
    assert inputs.max_retry_attempts == 5
    assert inputs.app_subfolder is None
    assert inputs.clean_cache is False
    assert inputs.ssh_private_key is None


def test_inputs_are_immutable(action_env):
    inputs = ActionInputs.from_env(action_env)
    with pytest.raises(AttributeError):
        inputs.app = 'other'


def test_optional_inputs(action_env):
    action_env.update({
        'INPUT_APP_SUBFOLDER': 'backend',
        'INPUT_GIGALIXIR_CLEAN': 'true',
        'INPUT_MAX_RETRY_ATTEMPTS': '12',
    })
    inputs = ActionInputs.from_env(action_env, default_retry_attempts=5)

    assert inputs.app_subfolder == 'backend'
    assert inputs.clean_cache is True
    assert inputs.max_retry_attempts == 12


def test_clean_requires_literal_true(action_env):
    action_env['INPUT_GIGALIXIR_CLEAN'] = 'yes'
    assert ActionInputs.from_env(action_env).clean_cache is False


def test_migrations_require_ssh_key(action_env):
    action_env['INPUT_MIGRATIONS'] = 'true'
    with pytest.raises(ConfigError, match="SSH_PRIVATE_KEY"):
        ActionInputs.from_env(action_env)

    action_env['INPUT_SSH_PRIVATE_KEY'] = '-----BEGIN KEY-----'
    inputs = ActionInputs.from_env(action_env)
    assert inputs.migrations is True
    assert inputs.ssh_private_key == '-----BEGIN KEY-----'


def test_truthy_non_true_migrations_needs_key_but_does_not_migrate(action_env):
    action_env['INPUT_MIGRATIONS'] = '1'
    action_env['INPUT_SSH_PRIVATE_KEY'] = 'key'
    assert ActionInputs.from_env(action_env).migrations is False


def test_invalid_migrations_value(action_env):
    action_env['INPUT_MIGRATIONS'] = 'yes please'
    with pytest.raises(ConfigError, match="MIGRATIONS"):
        ActionInputs.from_env(action_env)


@pytest.mark.parametrize("value, expected", [('', 5), ('0', 0), ('3', 3)])
def test_parse_retry_attempts(value, expected):
    assert parse_retry_attempts(value, 5) == expected


@pytest.mark.parametrize("value", ['many', '-1', '2.5'])
def test_parse_retry_attempts_rejects_bad_values(value):
    with pytest.raises(ConfigError):
        parse_retry_attempts(value, 5)


@pytest.mark.parametrize("value", ['[]', '{}', '"no"', '2'])
def test_truthy_json_values_require_ssh_key(action_env, value):
    action_env['INPUT_MIGRATIONS'] = value
    with pytest.raises(ConfigError, match="SSH_PRIVATE_KEY"):
        ActionInputs.from_env(action_env)


@pytest.mark.parametrize("value", ['0', 'null', '""', 'false'])
def test_falsy_json_values_do_not_require_ssh_key(action_env, value):
    action_env['INPUT_MIGRATIONS'] = value
    assert ActionInputs.from_env(action_env).ssh_private_key is None


@pytest.mark.parametrize("value", ['NaN', 'Infinity', '-Infinity'])
def test_non_standard_json_constants_rejected(action_env, value):
    action_env['INPUT_MIGRATIONS'] = value
    with pytest.raises(ConfigError, match="MIGRATIONS"):
        ActionInputs.from_env(action_env)
