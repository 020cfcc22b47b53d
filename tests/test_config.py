import logging

import pytest

from thumbnails.config import TargetSpec, ThumbnailConfig
from thumbnails.errors import ConfigurationError

ENVIRON = {
    "BIG_WIDTH": "1024",
    "MEDIUM_WIDTH": "512",
    "SMALL_WIDTH": "128",
    "OUTPUT_CONTAINER_NAME": "thumbnails",
}


def test_from_environ():
    config = ThumbnailConfig.from_environ(ENVIRON)

    assert config == ThumbnailConfig(1024, 512, 128, "thumbnails")
    assert config.targets == [
        TargetSpec(1024, "-b"),
        TargetSpec(512, "-m"),
        TargetSpec(128, "-s"),
    ]


@pytest.mark.parametrize("name", sorted(ENVIRON))
def test_from_environ_missing_variable(name):
    environ = {k: v for k, v in ENVIRON.items() if k != name}

    with pytest.raises(ConfigurationError, match=name):
        ThumbnailConfig.from_environ(environ)


@pytest.mark.parametrize("value", ["abc", "0", "-5", "12.5", ""])
def test_from_environ_invalid_width(value):
    with pytest.raises(ConfigurationError, match="SMALL_WIDTH"):
        ThumbnailConfig.from_environ({**ENVIRON, "SMALL_WIDTH": value})


def test_duplicate_widths_collapse(caplog):
    config = ThumbnailConfig(512, 128, 128, "thumbnails")

    with caplog.at_level(logging.WARNING):
        targets = config.targets

    assert targets == [TargetSpec(512, "-b"), TargetSpec(128, "-s")]
    assert "Duplicate thumbnail widths" in caplog.text
