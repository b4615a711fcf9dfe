"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from app.main import app
from app.api.dependencies import get_title_service, get_youtube_service
from app.models import VideoSummary
from app.services.titles import TitleService
from app.services.youtube import YouTubeService


def make_video_item(
    video_id="dQw4w9WgXcQ",
    title="My Cool Video",
    duration="PT3M33S",
    thumbnails=None,
    statistics=None,
):
    """Build one ``items[]`` entry shaped like the YouTube Data API payload."""
    if thumbnails is None:
        thumbnails = {
            "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg", "width": 120, "height": 90},
            "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg", "width": 480, "height": 360},
        }
    if statistics is None:
        statistics = {"viewCount": "1534000", "likeCount": "18200"}
    return {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {
            "title": title,
            "channelTitle": "Cool Channel",
            "thumbnails": thumbnails,
        },
        "contentDetails": {"duration": duration},
        "statistics": statistics,
    }


@pytest.fixture
def sample_summary():
    return VideoSummary(
        title="My Cool Video",
        thumbnail_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        duration_text="3:33",
        channel_title="Cool Channel",
        view_count="1534000",
        like_count="18200",
    )


@pytest.fixture
def mock_youtube_service(sample_summary):
    """Create a mock YouTubeService that returns the sample summary."""
    service = MagicMock(spec=YouTubeService)
    service.ensure_configured.return_value = None
    service.fetch_video_summary = AsyncMock(return_value=sample_summary)
    return service


@pytest.fixture
def mock_title_service():
    """Create a mock TitleService."""
    service = MagicMock(spec=TitleService)
    service.ensure_configured.return_value = None
    service.generate_variations = AsyncMock(return_value=["Alpha", "Beta"])
    return service


@pytest.fixture
def override_dependencies(mock_youtube_service, mock_title_service):
    """Override FastAPI dependencies for testing."""
    app.dependency_overrides[get_youtube_service] = lambda: mock_youtube_service
    app.dependency_overrides[get_title_service] = lambda: mock_title_service

    yield

    app.dependency_overrides.clear()


@pytest.fixture
def video_item():
    """Factory for YouTube Data API ``items[]`` entries."""
    return make_video_item
