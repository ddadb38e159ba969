"""
Sprite resolution for thumbnail cues.

Turns the image reference of a cue, either a plain image URL or an URL
with a ``#xywh=x,y,w,h`` media fragment, into the style applied to the
thumbnail holder.
"""

import re
from typing import Optional, Tuple

from .models import FullImageStyle, SpriteStyle, StyleDescriptor
from .urls import effective_base, resolve_url

_XYWH_PATTERN = re.compile(r'#xywh=', re.IGNORECASE)
_DIGITS_PATTERN = re.compile(r'\d+')


def parse_xywh(fragment: str) -> Tuple[int, int, int, int]:
    """
    Extract x, y, width and height from an xywh fragment.

    Takes the first four digit runs in order, so any separator works.

    Raises:
        ValueError: If fewer than four numbers are present
    """
    numbers = _DIGITS_PATTERN.findall(fragment)
    if len(numbers) < 4:
        raise ValueError(f"xywh fragment needs four numbers: {fragment!r}")
    x, y, w, h = (int(n) for n in numbers[:4])
    return x, y, w, h


def resolve_style(
    image_ref: str,
    source: str = "",
    page_url: Optional[str] = None
) -> StyleDescriptor:
    """
    Build the style descriptor for a cue's image reference.

    Args:
        image_ref: Image reference line of the cue
        source: URL of the cue file, used as the base for relative images
        page_url: URL of the page hosting the player

    Returns:
        FullImageStyle for plain images, SpriteStyle for xywh regions

    Raises:
        ValueError: If the reference is empty or its xywh fragment is malformed

    Example:
        >>> resolve_style("img.jpg#xywh=10,20,100,50").background
        'url("img.jpg") no-repeat -10px -20px'
    """
    image_ref = (image_ref or "").strip()
    if not image_ref:
        raise ValueError("empty image reference")

    resolved = resolve_url(image_ref, effective_base(source or "", page_url))

    if not _XYWH_PATTERN.search(resolved):
        return FullImageStyle(background=f'url("{resolved}")')

    image, fragment = _XYWH_PATTERN.split(resolved, maxsplit=1)
    x, y, w, h = parse_xywh(fragment)

    return SpriteStyle(
        background=f'url("{image}") no-repeat -{x}px -{y}px',
        width=f"{w}px",
        height=f"{h}px",
        url=image,
    )
