from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

# --- Internal Parsing Models (YouTube Data API v3, videos.list) ---

class Thumbnail(BaseModel):
    url: str

    model_config = ConfigDict(extra='ignore')

class Thumbnails(BaseModel):
    default: Optional[Thumbnail] = None
    high: Optional[Thumbnail] = None

    model_config = ConfigDict(extra='ignore')

class Snippet(BaseModel):
    title: str
    channel_title: str = Field(alias="channelTitle")
    thumbnails: Thumbnails = Field(default_factory=Thumbnails)

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class ContentDetails(BaseModel):
    duration: str = ""

    model_config = ConfigDict(extra='ignore')

class Statistics(BaseModel):
    view_count: Optional[str] = Field(default=None, alias="viewCount")
    like_count: Optional[str] = Field(default=None, alias="likeCount")

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class VideoItem(BaseModel):
    id: Optional[str] = None
    snippet: Snippet
    content_details: ContentDetails = Field(alias="contentDetails")
    statistics: Statistics = Field(default_factory=Statistics)

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class VideoListResponse(BaseModel):
    items: List[VideoItem] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class VideoSummary(BaseModel):
    title: str
    thumbnail_url: str
    duration_text: str
    channel_title: str
    view_count: str = "0"
    like_count: str = "0"

    model_config = ConfigDict(frozen=True)
