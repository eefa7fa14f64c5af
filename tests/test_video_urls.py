"""Tests for YouTube/Vimeo URL handling"""

import pytest

from portfolio_cms.services.exceptions import DomainValidationError
from portfolio_cms.services.video_urls import (
    detect_video_type,
    extract_video_id,
    thumbnail_url,
    to_embed_url,
)


class TestVideoUrls:

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        ],
    )
    def test_youtube_embed(self, url):
        assert to_embed_url(url, "youtube") == "https://www.youtube.com/embed/dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url", ["https://vimeo.com/76979871", "https://player.vimeo.com/video/76979871"]
    )
    def test_vimeo_embed(self, url):
        assert to_embed_url(url, "vimeo") == "https://player.vimeo.com/video/76979871"

    def test_invalid_url_raises(self):
        with pytest.raises(DomainValidationError) as exc_info:
            to_embed_url("https://example.com/video", "youtube")

        assert exc_info.value.errors[0]["field"] == "video_url"

    def test_detect_video_type(self):
        assert detect_video_type("https://YOUTU.BE/abc") == "youtube"
        assert detect_video_type("https://vimeo.com/1") == "vimeo"
        assert detect_video_type("https://example.com/clip.mp4") is None
        assert detect_video_type(None) is None

    def test_extract_video_id_unknown_type(self):
        assert extract_video_id("https://youtu.be/abc", "upload") is None

    def test_thumbnail_url(self):
        assert thumbnail_url("https://youtu.be/abc123", "youtube") == "https://img.youtube.com/vi/abc123/hqdefault.jpg"
        assert thumbnail_url("https://vimeo.com/1", "vimeo") is None
        assert thumbnail_url("https://example.com", "youtube") is None
