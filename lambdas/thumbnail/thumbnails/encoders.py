import re

from typing import BinaryIO, NamedTuple, Optional, Sequence

from PIL import Image

SUPPORTED_EXTENSION = re.compile(r"gif|png|jpe?g", re.IGNORECASE)


class Encoder(NamedTuple):
    format: str
    content_type: str
    modes: tuple
    animated: bool = False

    def encode(self, frames: Sequence[Image.Image], fp: BinaryIO, **params) -> None:
        """Write ``frames`` to ``fp``.

        Every frame is kept when the format can hold an animation, otherwise
        only the first one is written. ``params`` go to ``Image.save`` for
        animations (``duration``, ``loop``).
        """
        first, *rest = [
            frame if frame.mode in self.modes else frame.convert("RGB")
            for frame in frames
        ]

        if rest and self.animated:
            first.save(fp, format=self.format, save_all=True, append_images=rest, **params)
        else:
            first.save(fp, format=self.format)


PNG = Encoder("PNG", "image/png", ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"))
JPEG = Encoder("JPEG", "image/jpeg", ("1", "L", "RGB", "CMYK"))
GIF = Encoder("GIF", "image/gif", ("1", "L", "P", "RGB", "RGBA"), animated=True)

ENCODERS = {
    "png": PNG,
    "jpg": JPEG,
    "jpeg": JPEG,
    "gif": GIF,
}


def select_encoder(extension: str) -> Optional[Encoder]:
    extension = extension.lstrip(".")

    if not SUPPORTED_EXTENSION.fullmatch(extension):
        return None

    return ENCODERS[extension.lower()]
