import logging
from sqlalchemy.engine import Engine

from app.core.database import Base, engine

logger = logging.getLogger(__name__)


def init_db(bind: Engine = None) -> None:
    # Register every mapped table on Base.metadata before creating them.
    from app.models import course, course_rating, course_teacher, lesson, teacher  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")
