"""
Page state for the single-page UI.

The currently loaded video is not kept on the server. Each action receives
it as an explicit value and returns a fresh PageState to render, so the
latest response always replaces whatever the page showed before.
"""
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import AppException
from app.models import MessageKind, VideoSummary
from app.services.titles import TitleService
from app.services.video_id import extract_video_id
from app.services.youtube import YouTubeService

GENERIC_ERROR = "Something went wrong. Please try again."


class PageMessage(BaseModel):
    """Inline notice rendered above the results."""
    text: str
    kind: MessageKind = MessageKind.ERROR

    model_config = ConfigDict(frozen=True)


class PageState(BaseModel):
    """Everything the page template needs for one render."""
    url: str = ""
    video: Optional[VideoSummary] = None
    variations: list[str] = Field(default_factory=list)
    message: Optional[PageMessage] = None
    titles_message: Optional[PageMessage] = None

    model_config = ConfigDict(frozen=True)


async def load_video(url: str, youtube_service: YouTubeService) -> PageState:
    """
    Resolve a pasted link to a video and fetch its summary.

    Input problems and upstream failures become an inline error message,
    and so does anything unexpected, so the page always renders.
    """
    url = (url or "").strip()
    if not url:
        return PageState(message=PageMessage(text="Please enter a YouTube URL"))

    video_id = extract_video_id(url)
    if not video_id:
        logger.info(f"Rejected unrecognized URL: {url}")
        return PageState(
            url=url,
            message=PageMessage(text="Invalid YouTube URL. Please check and try again."),
        )

    try:
        video = await youtube_service.fetch_video_summary(video_id)
    except AppException as e:
        return PageState(url=url, message=PageMessage(text=e.detail))
    except Exception as e:
        logger.exception(f"Unexpected error loading video {video_id}: {e}")
        return PageState(url=url, message=PageMessage(text=GENERIC_ERROR))

    return PageState(url=url, video=video)


async def generate_titles(
    video: Optional[VideoSummary],
    title_service: TitleService,
    url: str = "",
) -> PageState:
    """
    Generate title variations for the video currently shown on the page.

    Without a video there is nothing to generate for, and the page is
    returned unchanged.
    """
    if video is None:
        return PageState(url=url)

    try:
        variations = await title_service.generate_variations(video.title)
    except AppException as e:
        return PageState(url=url, video=video, titles_message=PageMessage(text=e.detail))
    except Exception as e:
        logger.exception(f"Unexpected error generating titles: {e}")
        return PageState(url=url, video=video, titles_message=PageMessage(text=GENERIC_ERROR))

    if not variations:
        return PageState(
            url=url,
            video=video,
            titles_message=PageMessage(
                text="The model did not return any title variations. Please try again.",
                kind=MessageKind.NOTICE,
            ),
        )

    return PageState(url=url, video=video, variations=variations)
