from enum import Enum


RATING_MIN = 1
RATING_MAX = 5
RATING_VALUES = tuple(range(RATING_MIN, RATING_MAX + 1))

RATING_STATS_CACHE_KEY = "course_rating_stats_{course_id}"


class ThumbnailQualityEnum(str, Enum):
    HIGH = "hqdefault"
    MAXRES = "maxresdefault"
