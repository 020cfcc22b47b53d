import monocdk as core

from monocdk import aws_s3, aws_s3_notifications, aws_lambda

from infrastructure.utils import (
    Stack,
    build_path_to_lambdas,
    python_function_bundling_options,
)


class ThumbnailStack(Stack):
    def __init__(
        self,
        scope: core.Construct,
        id: str,
        big_width: int = 1024,
        medium_width: int = 512,
        small_width: int = 128,
        **kwargs,
    ):
        super().__init__(scope, id, **kwargs)

        # Bucket where images are uploaded
        uploaded_image_bucket = aws_s3.Bucket(
            self,
            "uploaded-image",
            removal_policy=core.RemovalPolicy.DESTROY,
        )
        # Kept apart from the upload bucket so thumbnails do not trigger the function
        thumbnail_image_bucket = aws_s3.Bucket(
            self,
            "thumbnail-image",
            removal_policy=core.RemovalPolicy.DESTROY,
        )

        thumbnail_code = aws_lambda.Code.from_asset(
            path=build_path_to_lambdas("thumbnail"),
            bundling=python_function_bundling_options,
        )

        thumbnail_create_function = aws_lambda.Function(
            self,
            "ThumbnailCreate",
            code=thumbnail_code,
            handler="create.handler",
            runtime=aws_lambda.Runtime.PYTHON_3_9,
            environment={
                "BIG_WIDTH": str(big_width),
                "MEDIUM_WIDTH": str(medium_width),
                "SMALL_WIDTH": str(small_width),
                "OUTPUT_CONTAINER_NAME": thumbnail_image_bucket.bucket_name,
                "LOG_LEVEL": "INFO",
            },
            memory_size=512,
            timeout=core.Duration.minutes(amount=1),
        )
        uploaded_image_bucket.grant_read(thumbnail_create_function)
        thumbnail_image_bucket.grant_write(thumbnail_create_function)

        # S3 suffix filters are case sensitive, so every upload triggers the function
        uploaded_image_bucket.add_event_notification(
            aws_s3.EventType.OBJECT_CREATED,
            aws_s3_notifications.LambdaDestination(thumbnail_create_function),
        )

        self.add_outputs(uploaded_image_bucket, thumbnail_image_bucket)
