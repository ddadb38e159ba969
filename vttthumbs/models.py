"""
Data models for vttthumbs.

Defines the cue descriptors produced by the parser, the two style
variants applied to the thumbnail holder, and the plugin configuration.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FullImageStyle:
    """Displays a whole image; clears any tile size so the holder takes the image size."""
    background: str  # url("...")

    @property
    def preload_key(self) -> Optional[str]:
        return None

    @property
    def width_px(self) -> Optional[int]:
        return None

    def css(self) -> Dict[str, str]:
        return {"background": self.background, "width": "", "height": ""}


@dataclass(frozen=True)
class SpriteStyle:
    """Displays one tile of a sprite sheet."""
    background: str  # url("...") no-repeat -Xpx -Ypx
    width: str       # e.g. "100px"
    height: str      # e.g. "50px"
    url: str         # bare image url, key for the preload cache

    @property
    def preload_key(self) -> Optional[str]:
        return self.url or None

    @property
    def width_px(self) -> Optional[int]:
        return int(self.width.replace("px", ""))

    def css(self) -> Dict[str, str]:
        return {
            "background": self.background,
            "width": self.width,
            "height": self.height,
        }


StyleDescriptor = Union[FullImageStyle, SpriteStyle]


@dataclass(frozen=True)
class CueDescriptor:
    """A time range (whole seconds, end exclusive) and the style shown for it."""
    start: int
    end: int
    style: StyleDescriptor

    def contains(self, time: float) -> bool:
        return self.start <= time < self.end


@dataclass(frozen=True)
class SkippedBlock:
    """A block of the cue file that did not become a cue."""
    index: int
    text: str
    reason: str


@dataclass(frozen=True)
class ParseResult:
    """Accepted cues in source order plus the blocks that were skipped."""
    cues: Tuple[CueDescriptor, ...] = ()
    skipped: Tuple[SkippedBlock, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[CueDescriptor]:
        return iter(self.cues)


@dataclass
class ThumbnailConfig:
    """Configuration for the thumbnail plugin."""
    src: Optional[str] = None
    show_timestamp: bool = False
    page_url: Optional[str] = None  # URL of the page hosting the player
    timeout: int = 30
    verify_ssl: bool = True
    missing_image: str = "skip"  # "skip" or "error"

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "ThumbnailConfig":
        """
        Build a config from a plain options mapping merged over the defaults.

        Accepts the camel-case ``showTimestamp`` spelling used by player
        option objects. Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            if key == "showTimestamp":
                key = "show_timestamp"
            if key in known:
                values[key] = value
            else:
                logger.debug(f"Ignoring unknown thumbnail option: {key}")
        return cls(**values)
