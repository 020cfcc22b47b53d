import logging
import os

from urllib.parse import unquote_plus

import boto3

from thumbnails.config import ThumbnailConfig
from thumbnails.generator import ThumbnailGenerator
from thumbnails.naming import object_url
from thumbnails.storage import S3UploadSink

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

s3_client = boto3.client("s3")


def uploaded_objects(event):
    # S3 notification, or a direct invocation with a single object
    if "Records" in event:
        for record in event["Records"]:
            yield record["s3"]["bucket"]["name"], unquote_plus(record["s3"]["object"]["key"])
    else:
        yield event["bucket"], unquote_plus(event["key"])


def handler(event, context):
    config = ThumbnailConfig.from_environ()
    generate = ThumbnailGenerator(config, S3UploadSink(s3_client, config.output_bucket))

    created = 0
    for bucket, key in uploaded_objects(event):
        source_url = object_url(bucket, key)
        if generate.encoder_for(source_url) is None:
            continue

        # Download
        body = s3_client.get_object(Bucket=bucket, Key=key)["Body"]

        # Resize and write back to S3
        try:
            created += generate(source_url, body)
        finally:
            body.close()

    return {
        "bucket": config.output_bucket,
        "thumbnails": created,
    }
