"""Resume file storage on an S3-compatible bucket (Cloudflare R2)."""

import logging
import time

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from jobflow.core.config import Settings, settings
from jobflow.core.exceptions import ObjectStorageError

logger = logging.getLogger(__name__)


class ResumeStorage:
    """Upload, delete and presign resume objects.

    Failures are raised as ``ObjectStorageError`` without retrying.
    """

    def __init__(
        self,
        bucket_name: str,
        public_url: str,
        client=None,
        presigned_expiry: int = 3600,
    ):
        self.bucket_name = bucket_name
        self.public_url = public_url.rstrip("/")
        self.presigned_expiry = presigned_expiry
        self._client = client

    @classmethod
    def from_settings(cls, config: Settings) -> "ResumeStorage":
        client = boto3.client(
            "s3",
            endpoint_url=config.cloudflare_r2_endpoint,
            aws_access_key_id=config.cloudflare_r2_access_key_id,
            aws_secret_access_key=config.cloudflare_r2_secret_access_key,
            region_name="auto",
        )
        return cls(
            bucket_name=config.cloudflare_r2_bucket_name,
            public_url=config.cloudflare_r2_public_url,
            client=client,
            presigned_expiry=config.presigned_url_expiry_seconds,
        )

    @staticmethod
    def generate_resume_key(user_id: str, filename: str) -> str:
        """Build ``resumes/{user_id}/{ms_timestamp}.{extension}``."""
        timestamp = int(time.time() * 1000)
        extension = filename.rsplit(".", 1)[-1]
        return f"resumes/{user_id}/{timestamp}.{extension}"

    @staticmethod
    def user_prefix(user_id: str) -> str:
        return f"resumes/{user_id}/"

    def public_url_for(self, key: str) -> str:
        return f"{self.public_url}/{key}"

    def upload_file(self, data: bytes, key: str, content_type: str) -> str:
        """Upload ``data`` under ``key`` and return its public URL."""
        try:
            self._client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to upload {key}: {e}")
            raise ObjectStorageError("upload", key, str(e)) from e

        logger.info(f"Uploaded {key} ({len(data)} bytes)")
        return self.public_url_for(key)

    def delete_file(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self.bucket_name, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to delete {key}: {e}")
            raise ObjectStorageError("delete", key, str(e)) from e
        logger.info(f"Deleted {key}")

    def get_presigned_upload_url(
        self, key: str, content_type: str, expires_in: int | None = None
    ) -> str:
        """Return a time-limited URL for uploading ``key`` directly."""
        try:
            return self._client.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": self.bucket_name,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in or self.presigned_expiry,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to presign {key}: {e}")
            raise ObjectStorageError("presign", key, str(e)) from e


_resume_storage: ResumeStorage | None = None


def get_resume_storage() -> ResumeStorage:
    """Get or create the resume storage client."""
    global _resume_storage
    if _resume_storage is None:
        _resume_storage = ResumeStorage.from_settings(settings)
    return _resume_storage
