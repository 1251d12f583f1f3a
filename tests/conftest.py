from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lifetracer.core.palette import CategoryColor
from lifetracer.db.session import get_db
from lifetracer.main import app
from lifetracer.models import Base
from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent

OWNER = "user-1"


def make_category(category_id: str, name: str = None, color: CategoryColor = CategoryColor.BLUE) -> Category:
    return Category(id=category_id, owner_id=OWNER, name=name or category_id.title(), color=color)


def make_event(
    event_id: str,
    day: str,
    category_id: str = "travel",
    is_important: bool = False,
) -> LifeEvent:
    return LifeEvent(
        id=event_id,
        owner_id=OWNER,
        title=f"Event {event_id}",
        date=date.fromisoformat(day),
        category_id=category_id,
        is_important=is_important,
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    test_client = TestClient(app)
    test_client.headers.update({"X-Owner-Id": OWNER})
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()
