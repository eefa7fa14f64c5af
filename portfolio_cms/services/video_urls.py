"""Conversion of YouTube/Vimeo page links into embeddable player URLs"""

import re
from typing import Optional

from portfolio_cms.services.exceptions import DomainValidationError

YOUTUBE_ID_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#/]+)")
VIMEO_ID_PATTERN = re.compile(r"vimeo\.com/(?:video/)?(\d+)")

EMBED_URLS = {
    "youtube": "https://www.youtube.com/embed/{video_id}",
    "vimeo": "https://player.vimeo.com/video/{video_id}",
}

PATTERNS = {
    "youtube": YOUTUBE_ID_PATTERN,
    "vimeo": VIMEO_ID_PATTERN,
}


def detect_video_type(url: str) -> Optional[str]:
    """'youtube' or 'vimeo' when the URL points at one of them"""
    lowered = (url or "").lower()
    if "youtube.com" in lowered or "youtu.be" in lowered:
        return "youtube"
    if "vimeo.com" in lowered:
        return "vimeo"
    return None


def extract_video_id(url: str, video_type: str) -> Optional[str]:
    pattern = PATTERNS.get(video_type)
    if pattern is None or not url:
        return None
    match = pattern.search(url)
    return match.group(1) if match else None


def to_embed_url(url: str, video_type: str) -> str:
    """
    Embeddable player URL for a YouTube or Vimeo link.

    Raises:
        DomainValidationError: If no video id can be found in the URL
    """
    video_id = extract_video_id(url, video_type)
    if not video_id:
        raise DomainValidationError(
            f"Could not find a {video_type} video id in '{url}'",
            errors=[{"field": "video_url", "message": f"Not a valid {video_type} URL"}],
        )
    return EMBED_URLS[video_type].format(video_id=video_id)


def thumbnail_url(url: str, video_type: str) -> Optional[str]:
    """Preview image for YouTube videos; Vimeo needs an API call and gets none"""
    if video_type != "youtube":
        return None
    video_id = extract_video_id(url, video_type)
    if not video_id:
        return None
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
