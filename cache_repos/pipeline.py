"""
Caches a summary of every repository in a GitHub organization as a public JSON object in S3.
Each run lists the whole organization from scratch and overwrites the published object.
Nothing is published unless every page was listed; no step is retried.
"""

import logging
import time

from .config import Configuration, load_config
from .errors import ConfigError, SerializationError, StorageError
from .publisher import S3Publisher
from .service import GitHubService
from .summary import project


async def cache_repositories(
    config: Configuration | None = None,
    service: GitHubService | None = None,
    publisher: S3Publisher | None = None,
):
    if config is None:
        try:
            config = load_config()
        except ConfigError as e:
            logging.error(f"Configuration error: {e}")
            raise

    if publisher is None:
        publisher = S3Publisher.create()

    # Collaborators passed in by the caller are left open
    owns_service = service is None
    if service is None:
        service = await GitHubService.create(config)

    start_time = time.time()
    logging.info(f"Fetching repositories of {config.github_organization} from GitHub...")

    try:
        repos = await service.list_repositories(config.github_organization)
    finally:
        if owns_service:
            await service.close()

    summaries = project(repos)

    try:
        publisher.publish(config.s3_bucket, config.s3_key, summaries)
    except StorageError as e:
        logging.error(f"S3 error ({e.code or 'no code'}): {e}")
        raise
    except SerializationError as e:
        logging.error(str(e))
        raise

    logging.info(f"Elapsed time: {time.time() - start_time:.2f}s")
