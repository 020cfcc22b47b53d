import logging

from typing import BinaryIO

logger = logging.getLogger(__name__)


class S3UploadSink:
    """Upload thumbnails to a single S3 bucket."""

    def __init__(self, client, bucket: str):
        self.client = client
        self.bucket = bucket

    def __call__(self, name: str, body: BinaryIO, content_type: str) -> None:
        self.client.upload_fileobj(
            body, self.bucket, name, ExtraArgs={"ContentType": content_type}
        )
        logger.info("Uploaded s3://%s/%s", self.bucket, name)
