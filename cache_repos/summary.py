from datetime import datetime, timezone

from .models import RawRepository, RepositorySummary

# Go's time.Time.String() layout for a UTC instant, which published consumers read
PUSHED_AT_FORMAT = "%Y-%m-%d %H:%M:%S +0000 UTC"


def format_pushed_at(pushed_at: datetime | None) -> str:
    if pushed_at is None:
        return ""
    if pushed_at.tzinfo is None:
        pushed_at = pushed_at.replace(tzinfo=timezone.utc)
    return pushed_at.astimezone(timezone.utc).strftime(PUSHED_AT_FORMAT)


def summarize(repo: RawRepository) -> RepositorySummary:
    # Optional text fields are published as "" rather than null
    return RepositorySummary(
        name=repo.name,
        description=repo.description or "",
        stars=repo.stargazers_count,
        forks=repo.forks_count,
        language=repo.language or "",
        pushed_at=format_pushed_at(repo.pushed_at),
        url=repo.html_url,
    )


def project(repos: list[RawRepository]) -> list[RepositorySummary]:
    return [summarize(repo) for repo in repos]
