from datetime import datetime

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class RawRepository(BaseModel):
    """Repository as returned by GitHub's REST API; unused fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str | None = None
    stargazers_count: int
    forks_count: int
    language: str | None = None
    pushed_at: datetime | None = None
    html_url: str


class RepositorySummary(BaseModel):
    name: str
    description: str
    stars: NonNegativeInt
    forks: NonNegativeInt
    language: str
    pushed_at: str
    url: str
