import pytest
from unittest.mock import AsyncMock

from app.core.exceptions import NotFoundError, ProviderError
from app.models import MessageKind
from app.services import session


@pytest.mark.asyncio
async def test_load_video_empty_input(mock_youtube_service):
    state = await session.load_video("   ", mock_youtube_service)

    assert state.video is None
    assert state.message.text == "Please enter a YouTube URL"
    assert state.message.kind == MessageKind.ERROR
    mock_youtube_service.fetch_video_summary.assert_not_called()


@pytest.mark.asyncio
async def test_load_video_invalid_url(mock_youtube_service):
    state = await session.load_video("https://example.com/video", mock_youtube_service)

    assert state.video is None
    assert state.message.text == "Invalid YouTube URL. Please check and try again."
    mock_youtube_service.fetch_video_summary.assert_not_called()


@pytest.mark.asyncio
async def test_load_video_success(mock_youtube_service, sample_summary):
    state = await session.load_video("https://youtu.be/dQw4w9WgXcQ", mock_youtube_service)

    assert state.video == sample_summary
    assert state.message is None
    mock_youtube_service.fetch_video_summary.assert_awaited_once_with("dQw4w9WgXcQ")


@pytest.mark.asyncio
async def test_load_video_upstream_error_becomes_message(mock_youtube_service):
    mock_youtube_service.fetch_video_summary.side_effect = NotFoundError()

    state = await session.load_video("https://youtu.be/nope", mock_youtube_service)

    assert state.video is None
    assert state.message.text == "Video not found"


@pytest.mark.asyncio
async def test_generate_titles_uses_threaded_video(mock_title_service, sample_summary):
    state = await session.generate_titles(sample_summary, mock_title_service)

    assert state.video == sample_summary
    assert state.variations == ["Alpha", "Beta"]
    mock_title_service.generate_variations.assert_awaited_once_with("My Cool Video")


@pytest.mark.asyncio
async def test_generate_titles_without_video_does_nothing(mock_title_service):
    state = await session.generate_titles(None, mock_title_service)

    assert state.video is None
    assert state.variations == []
    mock_title_service.generate_variations.assert_not_called()


@pytest.mark.asyncio
async def test_generate_titles_error_keeps_video(mock_title_service, sample_summary):
    mock_title_service.generate_variations.side_effect = ProviderError("Groq API error: APIConnectionError")

    state = await session.generate_titles(sample_summary, mock_title_service)

    assert state.video == sample_summary
    assert state.variations == []
    assert state.titles_message.text == "Groq API error: APIConnectionError"


@pytest.mark.asyncio
async def test_generate_titles_empty_result_shows_notice(mock_title_service, sample_summary):
    mock_title_service.generate_variations = AsyncMock(return_value=[])

    state = await session.generate_titles(sample_summary, mock_title_service)

    assert state.variations == []
    assert "did not return any title variations" in state.titles_message.text
    assert state.titles_message.kind == MessageKind.NOTICE


@pytest.mark.asyncio
async def test_load_video_unexpected_error_becomes_message(mock_youtube_service):
    mock_youtube_service.fetch_video_summary.side_effect = RuntimeError("boom")

    state = await session.load_video("https://youtu.be/dQw4w9WgXcQ", mock_youtube_service)

    assert state.video is None
    assert state.url == "https://youtu.be/dQw4w9WgXcQ"
    assert state.message.text == "Something went wrong. Please try again."
    assert state.message.kind == MessageKind.ERROR


@pytest.mark.asyncio
async def test_generate_titles_unexpected_error_keeps_video(mock_title_service, sample_summary):
    mock_title_service.generate_variations.side_effect = RuntimeError("boom")

    state = await session.generate_titles(sample_summary, mock_title_service)

    assert state.video == sample_summary
    assert state.variations == []
    assert state.titles_message.text == "Something went wrong. Please try again."
