import pytest

from cache_repos.config import Configuration


@pytest.fixture
def config():
    return Configuration(
        GITHUB_ACCESS_TOKEN="ghp_secret",
        GITHUB_ORGANIZATION="acme",
        S3_BUCKET="acme-public",
        S3_KEY="repos.json",
        _env_file=None,
    )
