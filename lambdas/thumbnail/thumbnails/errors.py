class ThumbnailError(Exception):
    pass


class ConfigurationError(ThumbnailError):
    pass


class DegenerateScaleError(ThumbnailError):
    """The requested width cannot be reached by scaling the source down."""
