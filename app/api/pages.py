"""
Server-rendered single page: paste a link, see the video, generate titles.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from pydantic import ValidationError as SchemaError

from app.api.dependencies import get_title_service, get_youtube_service
from app.core.config import settings
from app.models import VideoSummary
from app.services import session
from app.services.formatting import format_count
from app.services.titles import TitleService
from app.services.youtube import YouTubeService


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["compact_count"] = format_count

router = APIRouter()


def _render(request: Request, state: session.PageState) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"state": state, "project_name": settings.PROJECT_NAME},
    )


def _parse_video(raw: Optional[str]) -> Optional[VideoSummary]:
    """Read the video the page sent back; anything unreadable means no video."""
    if not raw:
        return None
    try:
        return VideoSummary.model_validate_json(raw)
    except SchemaError:
        logger.warning("Discarding unreadable video state from form")
        return None


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    url: Optional[str] = Query(default=None),
    youtube_service: YouTubeService = Depends(get_youtube_service),
):
    """Render the page, loading the video when a link was submitted."""
    if url is None:
        return _render(request, session.PageState())

    state = await session.load_video(url, youtube_service)
    return _render(request, state)


@router.post("/titles", response_class=HTMLResponse)
async def titles(
    request: Request,
    video: Optional[str] = Form(default=None),
    url: str = Form(default=""),
    title_service: TitleService = Depends(get_title_service),
):
    """Generate variations for the video the page currently shows."""
    state = await session.generate_titles(_parse_video(video), title_service, url=url)
    return _render(request, state)
