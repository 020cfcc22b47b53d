import io
import logging

from decimal import ROUND_HALF_UP, Decimal
from typing import BinaryIO, Callable, Iterable, List, Optional

from PIL import Image, ImageSequence

from thumbnails.config import TargetSpec, ThumbnailConfig
from thumbnails.encoders import Encoder, select_encoder
from thumbnails.errors import DegenerateScaleError
from thumbnails.naming import derive_name, extension_of, object_key_from_url

logger = logging.getLogger(__name__)

UploadSink = Callable[[str, BinaryIO, str], None]


def compute_height(original_width: int, original_height: int, width: int) -> int:
    """Height of a ``width`` wide thumbnail, keeping the source proportions.

    The source is scaled down by the whole number of times ``width`` fits
    into it, and the height is rounded half away from zero.
    """
    divisor = original_width // width
    if divisor == 0:
        raise DegenerateScaleError(
            f"cannot scale a {original_width}px wide image to {width}px"
        )

    height = int(
        (Decimal(original_height) / Decimal(divisor)).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
    )
    if height == 0:
        raise DegenerateScaleError(
            f"a {original_width}x{original_height} image has no height at {width}px"
        )

    return height


def animation_params(image: Image.Image) -> dict:
    durations = [frame.info.get("duration", 0) for frame in ImageSequence.Iterator(image)]
    image.seek(0)

    params = {"duration": durations}
    if "loop" in image.info:
        params["loop"] = image.info["loop"]

    return params


def generate_thumbnails(
    source_url: str,
    image_bytes: BinaryIO,
    targets: Iterable[TargetSpec],
    encoder: Encoder,
    upload_sink: UploadSink,
) -> List[str]:
    data = image_bytes.read()
    uploaded = []

    for width, tag in targets:
        # Decode again for every size so each one starts from the original
        with Image.open(io.BytesIO(data)) as image:
            try:
                height = compute_height(image.width, image.height, width)
            except DegenerateScaleError as e:
                logger.warning("Skipping %s thumbnail of %s: %s", tag, source_url, e)
                continue

            if encoder.animated and getattr(image, "n_frames", 1) > 1:
                frames = [frame.resize((width, height)) for frame in ImageSequence.Iterator(image)]
                params = animation_params(image)
            else:
                frames = [image.resize((width, height))]
                params = {}

        name = derive_name(source_url, tag)

        with io.BytesIO() as output:
            encoder.encode(frames, output, **params)
            output.seek(0)
            upload_sink(name, output, encoder.content_type)

        logger.info("Created %sx%s thumbnail %s", width, height, name)
        uploaded.append(name)

    return uploaded


class ThumbnailGenerator:
    """Create every configured thumbnail of one uploaded image."""

    def __init__(
        self,
        config: ThumbnailConfig,
        upload_sink: UploadSink,
        name_resolver: Callable[[str], str] = object_key_from_url,
    ):
        self.config = config
        self.upload_sink = upload_sink
        self.name_resolver = name_resolver

    def _upload(self, name: str, body: BinaryIO, content_type: str) -> None:
        self.upload_sink(self.name_resolver(name), body, content_type)

    def encoder_for(self, source_url: str) -> Optional[Encoder]:
        encoder = select_encoder(extension_of(source_url))
        if encoder is None:
            logger.info("No encoder support for: %s", source_url)

        return encoder

    def __call__(self, source_url: str, content_stream: BinaryIO) -> int:
        encoder = self.encoder_for(source_url)
        if encoder is None:
            return 0

        try:
            uploaded = generate_thumbnails(
                source_url,
                content_stream,
                self.config.targets,
                encoder,
                self._upload,
            )
        except Exception:
            logger.exception("Failed to create thumbnails for %s", source_url)
            raise

        return len(uploaded)
