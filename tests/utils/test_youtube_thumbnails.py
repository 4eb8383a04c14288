import pytest

from app.core.constants import ThumbnailQualityEnum
from app.utils.youtube import extract_thumbnail_url, extract_video_id, thumbnail_url


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ&t=42",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?t=10",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1",
    "dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    None,
    "",
    "https://vimeo.com/123456",
    "https://cdn.example.com/videos/intro.mp4",
    "https://www.youtube.com/",
    "https://www.youtube.com/channel/",
])
def test_extract_video_id_rejects_non_youtube(url):
    assert extract_video_id(url) is None


def test_thumbnail_url_quality():
    assert thumbnail_url("abc123XYZ") == "https://img.youtube.com/vi/abc123XYZ/hqdefault.jpg"
    assert thumbnail_url("abc123XYZ", ThumbnailQualityEnum.MAXRES) == "https://img.youtube.com/vi/abc123XYZ/maxresdefault.jpg"


def test_extract_thumbnail_url():
    assert extract_thumbnail_url("https://youtu.be/dQw4w9WgXcQ") == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
    assert extract_thumbnail_url("https://vimeo.com/123456") is None
