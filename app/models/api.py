"""
Pydantic models for API request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.youtube import VideoSummary


class GenerateTitlesRequest(BaseModel):
    """Request model for title variation generation."""

    # Optional so a missing title is reported by the handler, not as a schema error
    title: Optional[str] = None


class GenerateTitlesResponse(BaseModel):
    """Response model for title variation generation."""

    variations: list[str]

    model_config = ConfigDict(frozen=True)


class VideoInfoResponse(BaseModel):
    """Video metadata as exposed to clients."""

    title: str
    thumbnail: str
    duration: str
    channel_title: str = Field(alias="channelTitle")
    view_count: str = Field(default="0", alias="viewCount")
    like_count: str = Field(default="0", alias="likeCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_summary(cls, summary: VideoSummary) -> "VideoInfoResponse":
        return cls(
            title=summary.title,
            thumbnail=summary.thumbnail_url,
            duration=summary.duration_text,
            channel_title=summary.channel_title,
            view_count=summary.view_count,
            like_count=summary.like_count,
        )
