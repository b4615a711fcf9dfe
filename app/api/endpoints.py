"""
API endpoints for video lookup and title variation generation.
"""
import time
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query
from loguru import logger

from app.api.dependencies import get_title_service, get_youtube_service
from app.core.exceptions import ErrorResponse, ValidationError
from app.models.api import GenerateTitlesRequest, GenerateTitlesResponse, VideoInfoResponse
from app.services.titles import TitleService
from app.services.youtube import YouTubeService


router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def _video_info(video_id: Optional[str], youtube_service: YouTubeService) -> VideoInfoResponse:
    video_id = (video_id or "").strip()
    if not video_id:
        raise ValidationError("Video ID is required")

    youtube_service.ensure_configured()

    start_time = time.perf_counter()
    summary = await youtube_service.fetch_video_summary(video_id)
    duration = time.perf_counter() - start_time
    logger.info(f"Video info for {video_id} fetched in {duration:.2f}s")
    return VideoInfoResponse.from_summary(summary)


@router.get("/video-info", response_model=VideoInfoResponse, responses=ERROR_RESPONSES)
async def get_video_info_by_query(
    video_id: Optional[str] = Query(default=None, alias="videoId"),
    youtube_service: YouTubeService = Depends(get_youtube_service),
):
    """
    Returns title, thumbnail, duration, channel and counts for a video.

    Args:
        video_id: The YouTube video id (``?videoId=`` query parameter).
        youtube_service: Client for the YouTube Data API.

    Returns:
        VideoInfoResponse: The reshaped video metadata.
    """
    return await _video_info(video_id, youtube_service)


@router.get("/video-info/{video_id}", response_model=VideoInfoResponse, responses=ERROR_RESPONSES)
async def get_video_info(
    video_id: str,
    youtube_service: YouTubeService = Depends(get_youtube_service),
):
    """Path-parameter form of ``GET /video-info?videoId=``."""
    return await _video_info(video_id, youtube_service)


@router.post("/generate-titles", response_model=GenerateTitlesResponse, responses=ERROR_RESPONSES)
async def generate_titles(
    payload: Optional[GenerateTitlesRequest] = Body(default=None),
    title_service: TitleService = Depends(get_title_service),
):
    """
    Generates up to five alternative titles for the given title.

    Args:
        payload: The request body containing the seed title.
        title_service: The service wrapping the configured LLM backend.

    Returns:
        GenerateTitlesResponse: The normalized title variations.
    """
    title = (payload.title if payload else None) or ""
    if not title.strip():
        raise ValidationError("Title is required")

    title_service.ensure_configured()

    logger.info(f"Incoming title generation request for: {title}")
    start_time = time.perf_counter()
    variations = await title_service.generate_variations(title)
    duration = time.perf_counter() - start_time
    logger.info(f"Title generation completed in {duration:.2f}s")
    return GenerateTitlesResponse(variations=variations)
