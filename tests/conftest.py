import io
import os

import pytest
from PIL import Image

# create.py builds its S3 client at import time
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")


class RecordingSink:
    def __init__(self):
        self.uploads = {}
        self.content_types = {}

    def __call__(self, name, body, content_type):
        self.uploads[name] = body.read()
        self.content_types[name] = content_type


def encode_image(size, format, mode="RGB"):
    buffer = io.BytesIO()
    Image.new(mode, size, color="red" if mode == "RGB" else 0).save(buffer, format=format)
    return buffer.getvalue()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def png_1000x500():
    return encode_image((1000, 500), "PNG")


def encode_animation(size, colors, duration=100, loop=0):
    frames = [Image.new("RGB", size, color=color) for color in colors]
    buffer = io.BytesIO()
    frames[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=duration,
        loop=loop,
    )
    return buffer.getvalue()
