class CacheReposError(Exception):
    """Base class for every failure that ends an invocation."""


class ConfigError(CacheReposError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        self.key = missing[0]
        super().__init__(f"{self.key} undefined")


class ProviderError(CacheReposError):
    """A GitHub API call failed. Carries whatever was fetched before the failure."""

    def __init__(self, message: str, status: int | None = None, partial: list | None = None):
        self.status = status
        self.partial = partial if partial is not None else []
        super().__init__(message)


class SerializationError(CacheReposError):
    pass


class StorageError(CacheReposError):
    """Upload to S3 failed. `code` is the service's error code when it sent one."""

    def __init__(self, message: str, code: str | None = None):
        self.code = code
        super().__init__(message)
