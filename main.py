import asyncio
import logging
import sys
import time

from cache_repos.errors import CacheReposError
from cache_repos.pipeline import cache_repositories


def handler(event, context):
    """AWS Lambda entry point. The event is not used; failures propagate to Lambda."""
    # Lambda installs its own root handler at WARNING
    logging.getLogger().setLevel(logging.INFO)
    asyncio.run(cache_repositories())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logging.info("Starting...")
    start_time = time.time()
    try:
        asyncio.run(cache_repositories())
    except CacheReposError:
        sys.exit(1)
    finally:
        logging.info(f"Execution time: {time.time() - start_time:.2f}s")
