"""
Application-wide constants and limits.

Grouped into static classes for namespace management and discoverability.
"""


class TitleConfig:
    """Configuration for title variation generation."""
    MAX_VARIATIONS = 5
    MAX_OUTPUT_TOKENS = 500  # Same ceiling for every backend
    TEMPERATURE = 0.7


class YouTubeConfig:
    """Configuration for the YouTube Data API client."""
    VIDEOS_ENDPOINT = "https://www.googleapis.com/youtube/v3/videos"
    VIDEO_PARTS = "snippet,contentDetails,statistics"
    # Order matters: the first thumbnail variant present wins
    THUMBNAIL_PREFERENCE = ("high", "default")
