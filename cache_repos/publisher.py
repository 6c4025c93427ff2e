import logging
import time

import boto3
import ujson
from botocore.exceptions import BotoCoreError, ClientError

from .errors import SerializationError, StorageError
from .models import RepositorySummary


def encode_summaries(summaries: list[RepositorySummary]) -> bytes:
    """Serialize to a JSON array; an empty list encodes as `[]`, never `null`."""
    try:
        return ujson.dumps(
            [summary.model_dump() for summary in summaries],
            ensure_ascii=False,
            escape_forward_slashes=False,
        ).encode("utf-8")
    except (TypeError, ValueError, OverflowError) as e:
        raise SerializationError(f"Could not encode repository summaries: {e}") from e


def decode_summaries(data: bytes | str) -> list[RepositorySummary]:
    return [RepositorySummary.model_validate(item) for item in ujson.loads(data)]


class S3Publisher:
    def __init__(self, client):
        self.client = client

    @classmethod
    def create(cls):
        # Credentials and region come from the default boto3 chain
        return cls(boto3.client("s3"))

    def publish(self, bucket: str, key: str, summaries: list[RepositorySummary]):
        body = encode_summaries(summaries)

        start_time = time.time()
        try:
            self.client.put_object(
                ACL="public-read",
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType="application/json",
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            raise StorageError(
                f"Upload to s3://{bucket}/{key} failed: {error.get('Message') or e}",
                code=error.get("Code"),
            ) from e
        except BotoCoreError as e:
            raise StorageError(f"Upload to s3://{bucket}/{key} failed: {e}") from e

        logging.info(
            f"Published {len(summaries)} repositories ({len(body)} bytes) to s3://{bucket}/{key} "
            f"in {time.time() - start_time:.2f}s"
        )
