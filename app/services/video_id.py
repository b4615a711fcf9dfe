"""
Extraction of a video identifier from the links users paste.
"""
import re
from typing import Optional

# The id runs until a query/fragment delimiter, a path separator or a newline
_ID = r"([^&\n?#/]+)"

# Tried in order, first match wins
VIDEO_ID_PATTERNS = (
    re.compile(r"youtube\.com/watch\?(?:[^#\n]*?&)??v=" + _ID),
    re.compile(r"youtu\.be/" + _ID),
    re.compile(r"youtube\.com/embed/" + _ID),
    re.compile(r"youtube\.com/shorts/" + _ID),
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Return the video id in a watch, short-link, embed or shorts URL.

    Returns None for anything else; callers report that as invalid input.
    """
    if not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None
