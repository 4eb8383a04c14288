import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient
from app.core.config import settings
from app.core.database import Base, create_db_engine, get_db
from app.core.init_db import init_db
from app.utils import cache
from app.utils import deps as deps_utils
import main


@pytest.fixture(scope="function")
def database_engine(tmp_path):
    test_db_url = settings.TEST_DATABASE_URL or f"sqlite:///{tmp_path / 'test.db'}"
    engine = create_db_engine(test_db_url)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def session_factory(database_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=database_engine)

@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.rollback()
        db.close()

@pytest.fixture(autouse=True)
def _clear_stats_cache():
    cache.clear()
    yield
    cache.clear()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def course_factory(db_session):
    from tests.helpers.factories import create_course_factory
    return create_course_factory(db_session)

@pytest.fixture
def teacher_factory(db_session):
    from tests.helpers.factories import create_teacher_factory
    return create_teacher_factory(db_session)

@pytest.fixture
def lesson_factory(db_session):
    from tests.helpers.factories import create_lesson_factory
    return create_lesson_factory(db_session)

@pytest.fixture
def rating_factory(db_session):
    from tests.helpers.factories import create_rating_factory
    return create_rating_factory(db_session)
