import pytest
from pydantic import ValidationError

from cache_repos.config import load_config
from cache_repos.errors import ConfigError

ENV = {
    "GITHUB_ACCESS_TOKEN": "ghp_secret",
    "GITHUB_ORGANIZATION": "acme",
    "S3_BUCKET": "acme-public",
    "S3_KEY": "repos.json",
}


@pytest.fixture
def full_env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)


def test_load_config_reads_all_four_values(full_env):
    config = load_config(env_file=None)

    assert config.github_access_token == "ghp_secret"
    assert config.github_organization == "acme"
    assert config.s3_bucket == "acme-public"
    assert config.s3_key == "repos.json"


@pytest.mark.parametrize("missing", list(ENV))
def test_load_config_names_missing_key(full_env, monkeypatch, missing):
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigError) as excinfo:
        load_config(env_file=None)

    assert excinfo.value.key == missing
    assert str(excinfo.value) == f"{missing} undefined"


def test_load_config_reports_first_missing_in_declared_order(monkeypatch):
    for name in ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GITHUB_ORGANIZATION", "acme")

    with pytest.raises(ConfigError) as excinfo:
        load_config(env_file=None)

    assert excinfo.value.key == "GITHUB_ACCESS_TOKEN"
    assert excinfo.value.missing == ["GITHUB_ACCESS_TOKEN", "S3_BUCKET", "S3_KEY"]


def test_load_config_does_not_validate_contents(full_env, monkeypatch):
    monkeypatch.setenv("GITHUB_ACCESS_TOKEN", "")

    assert load_config(env_file=None).github_access_token == ""


def test_load_config_reads_env_file(tmp_path, monkeypatch):
    for name in ENV:
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("".join(f"{name}={value}\n" for name, value in ENV.items()))
    monkeypatch.setenv("S3_KEY", "override.json")

    config = load_config(env_file=str(env_file))

    assert config.github_organization == "acme"
    assert config.s3_key == "override.json"


def test_configuration_is_immutable(full_env):
    config = load_config(env_file=None)

    with pytest.raises(ValidationError):
        config.s3_key = "other.json"


def test_load_config_requires_exact_variable_names(full_env, monkeypatch):
    monkeypatch.delenv("GITHUB_ACCESS_TOKEN")
    monkeypatch.setenv("github_access_token", "ghp_lowercase")

    with pytest.raises(ConfigError) as excinfo:
        load_config(env_file=None)

    assert excinfo.value.key == "GITHUB_ACCESS_TOKEN"
