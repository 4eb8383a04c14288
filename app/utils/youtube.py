"""Derive YouTube thumbnail URLs from lesson video links.

Accepted inputs:
- https://www.youtube.com/watch?v=VIDEO_ID
- https://youtu.be/VIDEO_ID
- https://www.youtube.com/embed/VIDEO_ID
- VIDEO_ID
"""
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from app.core.constants import ThumbnailQualityEnum

_VIDEO_ID = re.compile(r"^[A-Za-z0-9_-]{6,}$")


def extract_video_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None

    url = url.strip()
    if "://" not in url and "/" not in url and "?" not in url:
        return url if _VIDEO_ID.match(url) else None

    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    video_id = None

    if host == "youtu.be":
        video_id = parsed.path.lstrip("/").split("/")[0]
    elif host.endswith("youtube.com"):
        query_id = parse_qs(parsed.query).get("v")
        if query_id:
            video_id = query_id[0]
        else:
            parts = [p for p in parsed.path.split("/") if p]
            if len(parts) >= 2 and parts[0] == "embed":
                video_id = parts[1]

    if video_id and _VIDEO_ID.match(video_id):
        return video_id
    return None


def thumbnail_url(video_id: str, quality: ThumbnailQualityEnum = ThumbnailQualityEnum.HIGH) -> str:
    return f"https://img.youtube.com/vi/{video_id}/{quality.value}.jpg"


def extract_thumbnail_url(url: Optional[str], quality: ThumbnailQualityEnum = ThumbnailQualityEnum.HIGH) -> Optional[str]:
    video_id = extract_video_id(url)
    if video_id is None:
        return None
    return thumbnail_url(video_id, quality)
