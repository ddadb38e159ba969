"""
URL resolution for cue files and the images they reference.

Image references inside a cue file are usually relative to the cue file
itself, which in turn may be relative to the page hosting the player.
"""

from typing import Optional
from urllib.parse import urlsplit

from .utils import trim_slashes


def is_fully_qualified(reference: str) -> bool:
    """Check whether a reference already carries a host or is a data URI."""
    return '//' in reference or reference.startswith('data:')


def resolve_url(reference: str, base: str) -> str:
    """
    Resolve a reference against a base URL.

    References that already contain ``//`` or are data URIs are returned
    unchanged. Protocol-relative bases (``//host/...``) and bases with a
    scheme are joined with exactly one slash. Anything else cannot be
    resolved and the reference is returned as given.

    Args:
        reference: Image or cue file reference
        base: Directory URL to resolve against

    Returns:
        Resolved URL, or the reference itself when resolution is impossible

    Example:
        >>> resolve_url("thumbs.jpg", "//cdn.example.com/video/")
        '//cdn.example.com/video/thumbs.jpg'
    """
    if is_fully_qualified(reference):
        return reference

    if base.startswith('//'):
        return '/'.join([base.rstrip('/'), trim_slashes(reference)])

    if base.find('//') > 0:
        return '/'.join([trim_slashes(base), trim_slashes(reference)])

    return reference


def source_directory(src: str) -> str:
    """Everything up to and including the last slash of src."""
    return src[:src.rfind('/') + 1]


def page_base_url(page_url: Optional[str]) -> str:
    """
    Build the directory URL of the page hosting the player.

    Mirrors what a browser exposes through its location object: scheme,
    host, port and path, with the trailing file name removed.

    Example:
        >>> page_base_url("https://example.com:8080/watch/index.html?v=1")
        'https://example.com:8080/watch/'
    """
    if not page_url:
        return ""

    parts = urlsplit(page_url)
    port = f":{parts.port}" if parts.port else ""
    location = f"{parts.scheme}:" if parts.scheme else ""
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    location += f"//{host}{port}{parts.path}"
    return source_directory(location)


def effective_base(src: str, page_url: Optional[str] = None) -> str:
    """
    Base URL for images referenced from the cue file at src.

    A fully qualified cue file is its own base; otherwise the cue file's
    directory is appended to the page's base URL.
    """
    if '//' in src:
        return source_directory(src)
    return page_base_url(page_url) + source_directory(src)
