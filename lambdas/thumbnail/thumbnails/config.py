import logging
import os

from dataclasses import dataclass
from typing import List, Mapping, NamedTuple

from thumbnails.errors import ConfigurationError

logger = logging.getLogger(__name__)


class TargetSpec(NamedTuple):
    width: int
    tag: str


def _positive_int(environ: Mapping[str, str], name: str) -> int:
    raw = environ.get(name)
    if raw is None:
        raise ConfigurationError(f"{name} is not set")

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")

    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")

    return value


@dataclass(frozen=True)
class ThumbnailConfig:
    big_width: int
    medium_width: int
    small_width: int
    output_bucket: str

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] = os.environ) -> "ThumbnailConfig":
        output_bucket = environ.get("OUTPUT_CONTAINER_NAME")
        if not output_bucket:
            raise ConfigurationError("OUTPUT_CONTAINER_NAME is not set")

        return cls(
            big_width=_positive_int(environ, "BIG_WIDTH"),
            medium_width=_positive_int(environ, "MEDIUM_WIDTH"),
            small_width=_positive_int(environ, "SMALL_WIDTH"),
            output_bucket=output_bucket,
        )

    @property
    def targets(self) -> List[TargetSpec]:
        # Keyed by width: two equal widths end up as a single target
        tags = {
            self.big_width: "-b",
            self.medium_width: "-m",
            self.small_width: "-s",
        }
        if len(tags) < 3:
            logger.warning(
                "Duplicate thumbnail widths (%s, %s, %s), generating %s sizes",
                self.big_width,
                self.medium_width,
                self.small_width,
                len(tags),
            )

        return [TargetSpec(width, tag) for width, tag in tags.items()]
