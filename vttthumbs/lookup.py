"""
Playback-to-style lookup and thumbnail positioning.

Finds the cue active at a point in time, warms the image preload cache
for sprite sheets as they are first needed, and computes where the
thumbnail sits on the progress bar so that it never overflows it.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from .models import CueDescriptor, StyleDescriptor

logger = logging.getLogger(__name__)


class ImagePreloadCache:
    """
    Set of image URLs whose loading has already been started.

    The loader is called once per distinct URL and whatever it returns is
    kept so the underlying image stays referenced. Entries are never
    evicted.
    """

    def __init__(self, loader: Optional[Callable[[str], Any]] = None):
        self._loader = loader
        self._entries: Dict[str, Any] = {}

    def is_seen(self, url: str) -> bool:
        return url in self._entries

    def mark_seen(self, url: str) -> None:
        if url in self._entries:
            return
        logger.debug(f"Preloading thumbnail image: {url}")
        self._entries[url] = self._loader(url) if self._loader else None

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def find_cue(cues: Sequence[CueDescriptor], time: float) -> Optional[CueDescriptor]:
    """Return the first cue, in source order, with start <= time < end."""
    for cue in cues:
        if cue.contains(time):
            return cue
    return None


def style_for_time(
    cues: Sequence[CueDescriptor],
    time: float,
    cache: Optional[ImagePreloadCache] = None
) -> Optional[StyleDescriptor]:
    """
    Resolve the style to show at a playback time.

    Args:
        cues: Cue descriptors in source order
        time: Playback time in seconds
        cache: Preload cache warmed with the sprite sheet of the match

    Returns:
        Style of the first matching cue, or None when no cue covers time
    """
    cue = find_cue(cues, time)
    if cue is None:
        return None

    key = cue.style.preload_key
    if cache is not None and key and not cache.is_seen(key):
        cache.mark_seen(key)

    return cue.style


class ThumbnailLookup:
    """Cue list of one source together with the preload cache it warms."""

    def __init__(self, cues: Sequence[CueDescriptor], cache: Optional[ImagePreloadCache] = None):
        self.cues = tuple(cues)
        self.cache = cache if cache is not None else ImagePreloadCache()

    def style_for_time(self, time: float) -> Optional[StyleDescriptor]:
        return style_for_time(self.cues, time, self.cache)

    def __len__(self) -> int:
        return len(self.cues)


def compute_offset(percent: float, bar_width: float, thumbnail_width: float) -> float:
    """
    Horizontal offset of the thumbnail within the progress bar.

    The thumbnail is centred on the pointer while it fits; otherwise it
    is pinned to the left edge (offset 0) or to the right edge
    (bar_width - thumbnail_width).

    Example:
        >>> compute_offset(0.5, 300, 100)
        100.0
        >>> compute_offset(1, 300, 100)
        200
    """
    x_pos = percent * bar_width
    half_width = int(thumbnail_width) // 2
    margin_left = x_pos - half_width
    margin_right = bar_width - (x_pos + half_width)

    if margin_left > 0 and margin_right > 0:
        return x_pos - half_width
    if margin_left <= 0:
        return 0
    return bar_width - thumbnail_width
