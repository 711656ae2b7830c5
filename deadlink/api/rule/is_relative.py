from urllib.parse import urlparse


def is_relative(uri: str) -> bool:
    """Return True if ``uri`` has no scheme (e.g. ``/docs``, ``../a.md``, ``//host/x``)."""
    return urlparse(uri).scheme == ""
