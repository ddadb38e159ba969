"""
vttthumbs - Thumbnail previews for video scrub bars

Parses WebVTT thumbnail files (time ranges mapped to images or sprite
sheet regions) and drives a thumbnail overlay on a player's progress bar.

Features:
- Tolerant cue file parsing with skipped-block reporting
- Sprite sheet regions via #xywh=x,y,w,h fragments
- Relative image references resolved against the cue file and page URL
- Time to thumbnail lookup with image preloading
- Thumbnail positioning clamped to the progress bar

Example usage:
    >>> from vttthumbs import parse_cues, style_for_time, compute_offset
    >>>
    >>> result = parse_cues(content, source="https://cdn.example.com/video/thumbs.vtt")
    >>> style = style_for_time(result.cues, 42)
    >>> offset = compute_offset(0.5, 640, style.width_px)
"""

import logging

__version__ = "0.1.0"
__author__ = "vttthumbs Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Timestamp codec
from .utils import timestamp_to_seconds, seconds_to_timestamp, trim_slashes

# URL and sprite resolution
from .urls import resolve_url, page_base_url, source_directory, effective_base
from .sprites import resolve_style, parse_xywh

# Parsing
from .parser import parse_cues, VTTThumbnailParser, CueParseError

# Lookup and positioning
from .lookup import (
    ImagePreloadCache,
    ThumbnailLookup,
    find_cue,
    style_for_time,
    compute_offset,
)

# Fetching
from .downloader import fetch_cue_file, CueFileDownloader, CueFetchError

# Plugin
from .plugin import VTTThumbnails, HostPlayer, RenderSurface, vtt_thumbnails

# Data models
from .models import (
    CueDescriptor,
    FullImageStyle,
    SpriteStyle,
    SkippedBlock,
    ParseResult,
    ThumbnailConfig,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Timestamps and URLs
    "timestamp_to_seconds",
    "seconds_to_timestamp",
    "trim_slashes",
    "resolve_url",
    "page_base_url",
    "source_directory",
    "effective_base",

    # Parsing
    "parse_cues",
    "resolve_style",
    "parse_xywh",
    "VTTThumbnailParser",
    "CueParseError",

    # Lookup and positioning
    "ImagePreloadCache",
    "ThumbnailLookup",
    "find_cue",
    "style_for_time",
    "compute_offset",

    # Fetching
    "fetch_cue_file",
    "CueFileDownloader",
    "CueFetchError",

    # Plugin
    "VTTThumbnails",
    "HostPlayer",
    "RenderSurface",
    "vtt_thumbnails",

    # Models
    "CueDescriptor",
    "FullImageStyle",
    "SpriteStyle",
    "SkippedBlock",
    "ParseResult",
    "ThumbnailConfig",
]
