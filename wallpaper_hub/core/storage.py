"""
Object storage access.

Wallpaper assets live in an S3 compatible bucket (Cloudflare R2, Supabase
S3 or MinIO). The API never streams file bytes; it hands out short-lived
presigned GET URLs that carry the attachment filename.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import unquote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from wallpaper_hub.core.logging_config import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when a presigned URL cannot be produced."""


class ObjectStorage:
    """Presigned URL generation for one bucket.

    Args:
        client: boto3 S3 client
        bucket: Bucket name
        public_base_url: Public URL prefix of the bucket, used to recognise
            asset URLs that point into it
    """

    def __init__(self, client: Any, bucket: str, public_base_url: Optional[str] = None) -> None:
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None

    @classmethod
    def from_config(cls, config) -> Optional["ObjectStorage"]:
        """Build from a ``StorageConfig``; None when storage is not configured."""
        if not config.enabled:
            logger.info("Object storage not configured; downloads will use stored asset URLs")
            return None
        client = boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            config=Config(signature_version="s3v4"),
            region_name=config.region,
        )
        logger.info(f"Object storage initialized: bucket={config.bucket}")
        return cls(client, config.bucket, config.public_base_url)

    def key_for_url(self, url: Optional[str]) -> Optional[str]:
        """Object key of ``url`` when it lies under the bucket's public URL."""
        if not url or not self.public_base_url:
            return None
        prefix = f"{self.public_base_url}/"
        if not url.startswith(prefix):
            return None
        key = unquote(url[len(prefix):].split("?", 1)[0])
        return key or None

    def presigned_url(self, key: str, expires_in: int, filename: Optional[str] = None) -> str:
        """Presigned GET URL for ``key``.

        Args:
            key: Object key inside the bucket
            expires_in: Lifetime in seconds
            filename: Suggested download filename, sent back as Content-Disposition

        Raises:
            StorageError: The SDK could not sign the request
        """
        params = {"Bucket": self.bucket, "Key": key}
        if filename:
            params["ResponseContentDisposition"] = content_disposition(filename)
        try:
            return self.client.generate_presigned_url("get_object", Params=params, ExpiresIn=expires_in)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Could not sign '{key}': {e}") from e


def content_disposition(filename: str) -> str:
    return f'attachment; filename="{filename}"'
