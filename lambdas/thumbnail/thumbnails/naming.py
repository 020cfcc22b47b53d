import re

from urllib.parse import quote, unquote, urlparse

# s3.amazonaws.com, s3.eu-west-1.amazonaws.com, s3-eu-west-1.amazonaws.com
PATH_STYLE = re.compile(r"^s3(?:[.-][a-z0-9-]+)?\.amazonaws\.com$")


def derive_name(source_url: str, tag: str) -> str:
    """Insert ``tag`` before the extension of ``source_url``.

    Only the last dot counts, and only when it follows a regular character.
    A dot right after ``/``, ``?`` or ``#`` (or no dot at all) means there
    is no extension, so the tag is appended to the end instead.
    """
    last_dot = source_url.rfind(".")

    if last_dot > 0 and source_url[last_dot - 1] not in "/?#":
        return source_url[:last_dot] + tag + source_url[last_dot:]

    return source_url + tag


def extension_of(source_url: str) -> str:
    """Extension of the last path segment, dot included.

    A leading dot counts, so a key named ``.png`` has the extension ``.png``.
    """
    name = source_url.rpartition("/")[2]
    last_dot = name.rfind(".")

    if last_dot == -1 or last_dot == len(name) - 1:
        return ""

    return name[last_dot:]


def object_url(bucket: str, key: str) -> str:
    return f"s3://{bucket}/{quote(key, safe='/')}"


def object_key_from_url(url: str) -> str:
    """Return the storage key an object reference points to."""
    parsed = urlparse(url)
    path = parsed.path.lstrip("/")

    if parsed.scheme != "s3" and PATH_STYLE.match(parsed.hostname or ""):
        # s3.amazonaws.com/<bucket>/<key>
        path = path.partition("/")[2]

    return unquote(path)
