"""
YouTube service for looking up video metadata in the YouTube Data API.
"""
from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError as SchemaError

from app.core.constants import YouTubeConfig
from app.core.exceptions import ConfigurationError, NotFoundError, ProviderError
from app.models import VideoItem, VideoListResponse, VideoSummary
from app.services.formatting import format_duration


class YouTubeService:
    """
    Client for the ``videos.list`` endpoint of the YouTube Data API v3.

    Each lookup issues exactly one GET request with the transport's default
    timeout, no retries, and maps the payload into a VideoSummary.
    """

    def __init__(
        self,
        api_key: Optional[str],
        endpoint: str = YouTubeConfig.VIDEOS_ENDPOINT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        not_found_status: int = 500,
        provider_error_status: int = 500,
    ):
        """
        Initialize the YouTubeService.

        Args:
            api_key: YouTube Data API key. None when not configured.
            endpoint: URL of the videos.list endpoint.
            transport: Optional httpx transport (used by tests to stub the API).
            not_found_status: HTTP status reported for unknown video ids.
            provider_error_status: HTTP status reported for upstream failures.
        """
        self.api_key = api_key
        self.endpoint = endpoint
        self.transport = transport
        self.not_found_status = not_found_status
        self.provider_error_status = provider_error_status

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when no API key is available."""
        if not self.api_key:
            raise ConfigurationError("YouTube API key not configured")

    async def fetch_video_summary(self, video_id: str) -> VideoSummary:
        """
        Fetch snippet, content details and statistics for one video.

        Args:
            video_id: The YouTube video id.

        Returns:
            VideoSummary: The reshaped metadata.

        Raises:
            ConfigurationError: If no API key is configured.
            NotFoundError: If the API reports no matching video.
            ProviderError: On network failure, non-2xx status or an unexpected payload.
        """
        self.ensure_configured()

        params = {
            "part": YouTubeConfig.VIDEO_PARTS,
            "id": video_id,
            "key": self.api_key,
        }

        logger.info(f"Fetching video info for {video_id}")
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.endpoint, params=params)
        except httpx.HTTPError as e:
            logger.error(f"YouTube API request failed for {video_id}: {type(e).__name__}")
            raise ProviderError(
                f"YouTube API error: {type(e).__name__}",
                status_code=self.provider_error_status,
            ) from e

        if not response.is_success:
            logger.error(f"YouTube API returned {response.status_code} for {video_id}")
            raise ProviderError(
                f"YouTube API error: {response.reason_phrase or response.status_code}",
                status_code=self.provider_error_status,
            )

        try:
            payload = VideoListResponse.model_validate(response.json())
        except (ValueError, SchemaError) as e:
            logger.error(f"Unexpected YouTube API payload for {video_id}: {e}")
            raise ProviderError(
                "YouTube API returned an unexpected response",
                status_code=self.provider_error_status,
            ) from e

        if not payload.items:
            logger.warning(f"Video not found: {video_id}")
            raise NotFoundError("Video not found", status_code=self.not_found_status)

        return self.to_summary(payload.items[0])

    def to_summary(self, item: VideoItem) -> VideoSummary:
        """Map one catalog item to a VideoSummary."""
        thumbnails = item.snippet.thumbnails
        thumbnail = None
        for variant in YouTubeConfig.THUMBNAIL_PREFERENCE:
            thumbnail = getattr(thumbnails, variant)
            if thumbnail:
                break
        if thumbnail is None:
            raise ProviderError(
                "YouTube API response has no thumbnail",
                status_code=self.provider_error_status,
            )

        return VideoSummary(
            title=item.snippet.title,
            thumbnail_url=thumbnail.url,
            duration_text=format_duration(item.content_details.duration),
            channel_title=item.snippet.channel_title,
            view_count=item.statistics.view_count or "0",
            like_count=item.statistics.like_count or "0",
        )
