"""
Thumbnail cue file parser.

Splits a WebVTT-like thumbnail file into blocks, keeps the blocks that
start with a timing line, and resolves each cue's image reference into a
style descriptor. Parsing is tolerant: anything that does not look like
a cue is skipped and recorded rather than raised.
"""

import logging
import re
from typing import List, Optional

from .models import CueDescriptor, ParseResult, SkippedBlock
from .sprites import resolve_style
from .utils import timestamp_to_seconds, seconds_to_timestamp

logger = logging.getLogger(__name__)

SKIP = "skip"
ERROR = "error"
MISSING_IMAGE_POLICIES = (SKIP, ERROR)

_BLOCK_SEPARATOR = re.compile(r'\n\s*\n')
_TIMESTAMP = r'(?:\d+:)?(?:\d{1,2}:)?\d{1,2}(?:\.\d+)?'
_TIMING_PATTERN = re.compile(rf'^\s*({_TIMESTAMP})\s*--!?>\s*({_TIMESTAMP})')


class CueParseError(ValueError):
    """Raised for a cue without a usable image when the policy is 'error'."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"Cue block {index}: {reason}")
        self.index = index
        self.reason = reason


def _split_blocks(raw_text: str) -> List[str]:
    text = raw_text.replace('\r\n', '\n').replace('\r', '\n')
    return [block.strip('\n') for block in _BLOCK_SEPARATOR.split(text) if block.strip()]


def parse_cues(
    raw_text: str,
    source: str = "",
    page_url: Optional[str] = None,
    missing_image: str = SKIP
) -> ParseResult:
    """
    Parse thumbnail cue text into cue descriptors.

    A block is a cue when its first line (or its second, after a cue
    identifier) is a timing line ``<start> --> <end>``. The line after
    the timing line is the image reference. Blocks without a timing line,
    such as the ``WEBVTT`` header, are skipped. Cues keep source order;
    overlapping cues are kept as they are.

    Args:
        raw_text: Cue file content
        source: URL of the cue file, base for relative image references
        page_url: URL of the page hosting the player
        missing_image: "skip" to record cues without a usable image as
            skipped, "error" to raise CueParseError for them

    Returns:
        ParseResult with accepted cues and skipped blocks

    Raises:
        CueParseError: For a cue without a usable image under the "error" policy
        ValueError: For an unknown policy

    Example:
        >>> content = "WEBVTT\\n\\n00:00.000 --> 00:05.000\\nsprite.jpg#xywh=0,0,160,90"
        >>> result = parse_cues(content)
        >>> len(result), result.skipped_count
        (1, 1)
    """
    if missing_image not in MISSING_IMAGE_POLICIES:
        raise ValueError(f"Unsupported missing image policy: {missing_image}")

    cues: List[CueDescriptor] = []
    skipped: List[SkippedBlock] = []

    for index, block in enumerate(_split_blocks(raw_text or "")):
        lines = block.split('\n')

        match = _TIMING_PATTERN.match(lines[0])
        if not match and len(lines) > 1:
            # Leading cue identifier
            match = _TIMING_PATTERN.match(lines[1])
            lines = lines[1:]

        if not match:
            logger.debug(f"Skipping block {index}: no timing line")
            skipped.append(SkippedBlock(index=index, text=block, reason="no timing line"))
            continue

        start = timestamp_to_seconds(match.group(1))
        end = timestamp_to_seconds(match.group(2))
        image_ref = lines[1].strip() if len(lines) > 1 else ""

        try:
            style = resolve_style(image_ref, source, page_url)
        except ValueError as e:
            if missing_image == ERROR:
                raise CueParseError(index, str(e)) from e
            logger.warning(f"Skipping cue {seconds_to_timestamp(start)}: {str(e)}")
            skipped.append(SkippedBlock(index=index, text=block, reason=str(e)))
            continue

        cues.append(CueDescriptor(start=start, end=end, style=style))

    logger.info(f"Parsed {len(cues)} thumbnail cues, skipped {len(skipped)} blocks")
    return ParseResult(cues=tuple(cues), skipped=tuple(skipped))


class VTTThumbnailParser:
    """
    Parser for thumbnail cue files.

    Holds the page URL and the missing image policy so that several cue
    sources can be parsed with the same settings.
    """

    def __init__(self, page_url: Optional[str] = None, missing_image: str = SKIP):
        if missing_image not in MISSING_IMAGE_POLICIES:
            raise ValueError(f"Unsupported missing image policy: {missing_image}")
        self.page_url = page_url
        self.missing_image = missing_image

    def parse_content(self, raw_text: str, source: str = "") -> ParseResult:
        """Parse cue text loaded from source."""
        return parse_cues(raw_text, source, self.page_url, self.missing_image)

    def parse_file(self, path: str, source: Optional[str] = None) -> ParseResult:
        """
        Parse a cue file from disk.

        Args:
            path: Local path of the cue file
            source: URL the file is served from; defaults to path

        Returns:
            ParseResult with accepted cues and skipped blocks
        """
        logger.info(f"Parsing thumbnail cue file: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

        return self.parse_content(content, source if source is not None else path)
