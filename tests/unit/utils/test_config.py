"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env() and project_root() read APP_ENV and PROJECT_ROOT.

2. YAML loading
   - Ensures load_yaml() parses mappings, returns {} for empty files,
     and rejects missing files, invalid YAML and non-mapping documents.

3. Bounds resolution
   - Defaults when nothing is configured.
   - Explicit path, LINKSHORTENER_CONFIG and config/<APP_ENV>.yml discovery.
   - Environment variables override YAML values.
   - Non-integer or inconsistent values raise BadConfigurationError.
"""

from pathlib import Path

import pytest

from linkshortener.constants import ENV
from linkshortener.exceptions import BadConfigurationError, ConfigurationError
from linkshortener.models import Bounds
from linkshortener.utils import config


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and working directory."""
    for name in (*ENV.Bounds, ENV.App.CONFIG_PATH, ENV.App.APP_ENV):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV.App.PROJECT_ROOT, str(tmp_path))


@pytest.fixture
def write_yaml(tmp_path):
    def _write(text: str, name: str = 'bounds.yml') -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
        return path

    return _write


# -------------------------------
# 1. Environment variables
# -------------------------------


def test_app_env_defaults_to_local():
    assert config.app_env() == 'local'


def test_app_env_is_lowercased(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'TEST')
    assert config.app_env() == 'test'


def test_project_root_reads_environment(tmp_path):
    assert config.project_root() == tmp_path


# -------------------------------
# 2. YAML loading
# -------------------------------


def test_load_yaml_parses_mapping(write_yaml):
    path = write_yaml('ttl:\n  min: 2\n  max: 10\n')
    assert config.load_yaml(path) == {'ttl': {'min': 2, 'max': 10}}


def test_load_yaml_empty_file_returns_empty_dict(write_yaml):
    assert config.load_yaml(write_yaml('')) == {}


def test_load_yaml_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        config.load_yaml(tmp_path / 'missing.yml')


@pytest.mark.parametrize('text', ['ttl: [unclosed', '- 1\n- 2\n'])
def test_load_yaml_rejects_bad_documents(write_yaml, text):
    with pytest.raises(BadConfigurationError):
        config.load_yaml(write_yaml(text))


# -------------------------------
# 3. Bounds resolution
# -------------------------------


def test_load_bounds_defaults():
    assert config.load_bounds() == Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=100)


def test_load_bounds_from_explicit_path(write_yaml):
    path = write_yaml('ttl:\n  min: 2\n  max: 12\nlimit:\n  min: 3\n  max: 30\n')
    assert config.load_bounds(path) == Bounds(ttl_min=2, ttl_max=12, limit_min=3, limit_max=30)


def test_load_bounds_partial_yaml_keeps_defaults(write_yaml):
    path = write_yaml('limit:\n  max: 5\n')
    assert config.load_bounds(path) == Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=5)


def test_load_bounds_from_config_env_variable(monkeypatch, write_yaml):
    path = write_yaml('ttl:\n  max: 6\n', name='custom.yml')
    monkeypatch.setenv(ENV.App.CONFIG_PATH, str(path))
    assert config.load_bounds().ttl_max == 6


def test_load_bounds_discovers_app_env_file(monkeypatch, write_yaml):
    write_yaml('limit:\n  max: 7\n', name='config/test.yml')
    monkeypatch.setenv(ENV.App.APP_ENV, 'test')
    assert config.load_bounds().limit_max == 7


def test_environment_overrides_yaml(monkeypatch, write_yaml):
    path = write_yaml('ttl:\n  min: 2\n  max: 12\n')
    monkeypatch.setenv(ENV.Bounds.TTL_MAX, '24')
    monkeypatch.setenv(ENV.Bounds.LIMIT_MAX, '10')
    assert config.load_bounds(path) == Bounds(ttl_min=2, ttl_max=24, limit_min=1, limit_max=10)


def test_load_bounds_missing_explicit_path_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        config.load_bounds(tmp_path / 'nope.yml')


@pytest.mark.parametrize('value', ['abc', '1.5', ''])
def test_non_integer_environment_value_raises(monkeypatch, value):
    monkeypatch.setenv(ENV.Bounds.LIMIT_MIN, value)
    if value == '':
        # empty variables are ignored
        assert config.load_bounds().limit_min == 1
    else:
        with pytest.raises(BadConfigurationError):
            config.load_bounds()


@pytest.mark.parametrize(
    'text',
    ['ttl:\n  min: abc\n', 'ttl:\n  max: true\n', 'ttl: 5\n', 'ttl:\n  max: 1.9\n', 'limit:\n  max: 10.5\n'],
)
def test_bad_yaml_values_raise(write_yaml, text):
    with pytest.raises(BadConfigurationError):
        config.load_bounds(write_yaml(text))


def test_integral_yaml_float_is_accepted(write_yaml):
    assert config.load_bounds(write_yaml('ttl:\n  max: 12.0\n')).ttl_max == 12


def test_ttl_max_above_ceiling_raises(monkeypatch, write_yaml):
    monkeypatch.setenv(ENV.Bounds.TTL_MAX, '100000000')
    with pytest.raises(BadConfigurationError, match='ttl_max'):
        config.load_bounds()

    monkeypatch.delenv(ENV.Bounds.TTL_MAX)
    with pytest.raises(BadConfigurationError, match='ttl_max'):
        config.load_bounds(write_yaml('ttl:\n  max: 100000000\n'))


def test_inconsistent_bounds_raise(monkeypatch):
    monkeypatch.setenv(ENV.Bounds.TTL_MIN, '50')
    with pytest.raises(BadConfigurationError):
        config.load_bounds()
