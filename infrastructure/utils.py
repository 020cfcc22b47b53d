import os

import monocdk as core
from monocdk import aws_lambda, aws_s3


def build_path_to_lambdas(path):
    return os.path.join("lambdas", path)


python_function_bundling_options = core.BundlingOptions(
    image=aws_lambda.Runtime.PYTHON_3_9.bundling_docker_image,
    command=[
        "bash",
        "-c",
        "\n        pip install -r requirements.txt -t /asset-output &&\n        cp -au . /asset-output\n        ",
    ],
)


class Stack(core.Stack):
    def __init__(self, scope: core.Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

    def add_outputs(self, uploaded: aws_s3.Bucket, thumbnails: aws_s3.Bucket):
        core.CfnOutput(self, "UploadBucket", value=uploaded.bucket_name)
        core.CfnOutput(self, "ThumbnailBucket", value=thumbnails.bucket_name)
