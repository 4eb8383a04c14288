from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Mapping
from sqlalchemy.orm import Session

from app.core.constants import RATING_VALUES, RATING_STATS_CACHE_KEY
from app.crud.course_rating import course_rating as crud_rating
from app.schemas.course_rating import CourseRatingStats
from app.utils import cache

_TWO_PLACES = Decimal("0.01")


def build_rating_stats(counts: Mapping[int, int]) -> CourseRatingStats:
    """Fold per-value counts of active ratings into RatingStatistics.

    Every bucket 1..5 is present. The average is rounded half-up to two
    decimals and is 0.0 when there are no ratings.
    """
    distribution = {value: int(counts.get(value, 0)) for value in RATING_VALUES}
    total = sum(distribution.values())

    if total == 0:
        average = 0.0
    else:
        weighted = sum(value * count for value, count in distribution.items())
        average = float((Decimal(weighted) / Decimal(total)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))

    return CourseRatingStats(
        average_rating=average,
        total_ratings=total,
        rating_distribution=distribution,
    )


class RatingStatsService:

    def _cache_key(self, course_id: int) -> str:
        return RATING_STATS_CACHE_KEY.format(course_id=course_id)

    def compute_statistics(self, db: Session, course_id: int) -> CourseRatingStats:
        cache_key = self._cache_key(course_id)
        cached = cache.get(cache_key)
        if cached is not None:
            return cached.model_copy(deep=True)

        # Read before counting: a write that lands mid-query must not be masked.
        generation = cache.generation(cache_key)
        stats = build_rating_stats(crud_rating.get_value_counts(db, course_id=course_id))
        cache.set(cache_key, stats, expected_generation=generation)
        return stats.model_copy(deep=True)

    def summaries_for_courses(self, db: Session, course_ids: Iterable[int]) -> Dict[int, CourseRatingStats]:
        counts_by_course = crud_rating.get_value_counts_for_courses(db, course_ids)
        return {
            course_id: build_rating_stats(counts)
            for course_id, counts in counts_by_course.items()
        }

    def invalidate(self, course_id: int) -> None:
        cache.delete(self._cache_key(course_id))


rating_stats_service = RatingStatsService()
