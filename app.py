#!/usr/bin/env python3
import monocdk as core

from infrastructure.main import ThumbnailStack

app = core.App()

ThumbnailStack(
    app,
    "ThumbnailStack",
    big_width=int(app.node.try_get_context("big_width") or 1024),
    medium_width=int(app.node.try_get_context("medium_width") or 512),
    small_width=int(app.node.try_get_context("small_width") or 128),
)

app.synth()
