from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional
from datetime import datetime

from app.core.constants import RATING_MIN, RATING_MAX


class CourseRatingBase(BaseModel):
    user_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX)


class CourseRatingCreate(CourseRatingBase):
    pass


class CourseRatingUpdate(CourseRatingBase):
    pass


class CourseRating(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    user_id: int
    rating: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class CourseRatingStats(BaseModel):
    average_rating: float
    total_ratings: int
    rating_distribution: Dict[int, int]
