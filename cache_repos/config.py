from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class Configuration(BaseSettings):
    # Variable names must match exactly; `github_access_token` does not satisfy GITHUB_ACCESS_TOKEN
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        case_sensitive=True,
    )

    github_access_token: str = Field(validation_alias="GITHUB_ACCESS_TOKEN")
    github_organization: str = Field(validation_alias="GITHUB_ORGANIZATION")

    s3_bucket: str = Field(validation_alias="S3_BUCKET")
    s3_key: str = Field(validation_alias="S3_KEY")


def load_config(env_file: str | None = ".env") -> Configuration:
    """Read the four required settings, failing on the first one that is absent."""
    try:
        return Configuration(_env_file=env_file)
    except ValidationError as e:
        missing = [
            str(error["loc"][0])
            for error in e.errors()
            if error["type"] == "missing"
        ]
        if not missing:
            raise
        # Report in declaration order regardless of how pydantic sorted them
        order = [field.validation_alias for field in Configuration.model_fields.values()]
        missing.sort(key=order.index)
        raise ConfigError(missing) from e
