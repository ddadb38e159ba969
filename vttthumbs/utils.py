"""
Shared utility functions for vttthumbs.

Timestamp conversion for cue timing lines and the slash trimming used
when joining URLs.
"""

import re

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
_EDGE_SLASHES = re.compile(r'^\s*/+\s*|\s*/+\s*$')


def _leading_int(text: str) -> int:
    """Parse the leading integer of text, 0 when there is none."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def timestamp_to_seconds(timestamp: str) -> int:
    """
    Convert a [[HH:]MM:]SS[.mmm] timestamp to whole seconds.

    Missing leading fields count as zero and non-numeric fields parse
    as zero, so this never raises. Milliseconds are added before the
    total is truncated, which means sub-second precision is lost:
    cue ranges always start and end on whole seconds.

    Args:
        timestamp: Timestamp text from a cue timing line

    Returns:
        Time in whole seconds

    Example:
        >>> timestamp_to_seconds("01:02:03.400")
        3723
        >>> timestamp_to_seconds("02:03")
        123
    """
    parts = (timestamp or "").split('.')
    milliseconds = _leading_int(parts[1]) if len(parts) > 1 else 0
    fields = parts[0].split(':')

    seconds = _leading_int(fields.pop()) if fields else 0
    minutes = _leading_int(fields.pop()) if fields else 0
    hours = _leading_int(fields.pop()) if fields else 0

    return int(hours * 3600 + minutes * 60 + seconds + milliseconds / 1000)


def seconds_to_timestamp(seconds: float) -> str:
    """
    Convert seconds to HH:MM:SS.mmm format.

    Example:
        >>> seconds_to_timestamp(90.5)
        '00:01:30.500'
    """
    hours = int(seconds / 3600)
    minutes = int((seconds % 3600) / 60)
    seconds_remainder = seconds % 60
    milliseconds = int((seconds_remainder - int(seconds_remainder)) * 1000)

    return f"{hours:02d}:{minutes:02d}:{int(seconds_remainder):02d}.{milliseconds:03d}"


def trim_slashes(text: str) -> str:
    """Strip leading and trailing slashes, and whitespace around them."""
    return _EDGE_SLASHES.sub('', text)
