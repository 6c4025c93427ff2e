import asyncio
import logging
import time

import aiohttp
import ujson

from .config import Configuration
from .errors import ProviderError
from .models import RawRepository

GITHUB_API_URL = "https://api.github.com"

# GitHub REST max per page
PER_PAGE = 100


class GitHubService:
    def __init__(self, session: aiohttp.ClientSession, api_url: str = GITHUB_API_URL):
        self.session = session
        self.api_url = api_url.rstrip("/")

    @classmethod
    async def create(cls, config: Configuration, api_url: str = GITHUB_API_URL):
        session = aiohttp.ClientSession(
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.github_access_token}",
            },
            json_serialize=ujson.dumps,
        )
        return cls(session, api_url)

    async def close(self):
        await self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def fetch_page(
        self,
        organization: str,
        page: int,
    ) -> tuple[list[RawRepository], int | None]:
        """Fetch one page of an organization's repositories.

        Returns the page's repositories and the number of the next page, or None
        when GitHub's Link header has no "next" relation.
        """
        url = f"{self.api_url}/orgs/{organization}/repos"
        params = {"per_page": PER_PAGE, "page": page}

        try:
            request_start = time.time()
            async with self.session.get(url, params=params) as response:
                logging.info(f"Page {page} query time: {time.time() - request_start:.2f}s")
                if response.status != 200:
                    raise ProviderError(
                        await self.error_message(response), status=response.status
                    )

                # ujson is faster than the built-in json module
                result = await response.json(loads=ujson.loads)

                remaining = response.headers.get("x-ratelimit-remaining")
                if remaining:
                    logging.debug(f"Rate limit remaining: {remaining}")

                next_link = response.links.get("next")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError(
                f"Request for page {page} of {organization} failed: {e!r}"
            ) from e

        next_page = None
        if next_link is not None:
            next_page = int(next_link["url"].query["page"])

        return [RawRepository.model_validate(item) for item in result], next_page

    async def list_repositories(self, organization: str) -> list[RawRepository]:
        repos: list[RawRepository] = []
        page = 1

        while page is not None:
            try:
                items, page = await self.fetch_page(organization, page)
            except ProviderError as e:
                e.partial = repos
                logging.error(f"Failed to list repositories for {organization}: {e}")
                raise

            repos.extend(items)
            logging.info(f"Total repos fetched: {len(repos)}")

        return repos

    @staticmethod
    async def error_message(response: aiohttp.ClientResponse) -> str:
        text = await response.text()
        try:
            message = ujson.loads(text).get("message")
        except (ValueError, AttributeError):
            message = None
        return f"GitHub returned {response.status}: {message or text[:300]}"
