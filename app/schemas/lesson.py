from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class LessonBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    video_url: str = ""
    duration: int = Field(default=0, ge=0) # Duration in minutes


class LessonCreate(LessonBase):
    slug: Optional[str] = None


class LessonUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)


class LessonSummary(BaseModel):
    """Entry of a course's `classes` list. Never carries the video URL."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    slug: str


class LessonDetail(BaseModel):
    id: int
    title: str
    description: str
    slug: str
    video: str
    duration: int
    thumbnail: Optional[str] = None
