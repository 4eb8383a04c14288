from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from app.schemas.lesson import LessonSummary
from app.schemas.teacher import Teacher


class CourseBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    thumbnail: str = ""


class CourseCreate(CourseBase):
    slug: Optional[str] = None


class CourseUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None


class CourseListItem(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    average_rating: float = 0.0
    total_ratings: int = 0


class CourseDetail(CourseListItem):
    rating_distribution: Dict[int, int]
    teachers: List[Teacher] = Field(default_factory=list)
    classes: List[LessonSummary] = Field(default_factory=list)
