import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from backend.main import app
from backend.config.db import get_sessionmaker
from backend.domains.shared.db_base import Base
from backend.domains.member.models import Member
from backend.domains.board.models import CategoryBoard
from backend.domains.board.schemas import BoardCreateRequest
from backend.domains.board.service import BoardService
from backend.domains.comment.service import CommentService

# Use an in-memory SQLite database shared by every session in a test
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEADLINE = datetime.datetime(2030, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture(autouse=True)
def setup_database():
    # Fresh tables per test so generated IDs start at 1
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory() -> sessionmaker:
    return TestingSessionLocal


@pytest.fixture
def db_session() -> Session:
    """Fixture to provide a database session for each test."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


def make_member(db_session: Session, member_id: int, nickname: str) -> Member:
    member = Member(id=member_id, email=f"{nickname}@example.com", nickname=nickname)
    db_session.add(member)
    db_session.commit()
    db_session.refresh(member)
    return member


@pytest.fixture
def owner(db_session: Session) -> Member:
    """The member who writes boards in most tests."""
    return make_member(db_session, 7, "owner")


@pytest.fixture
def other_member(db_session: Session) -> Member:
    return make_member(db_session, 8, "stranger")


@pytest.fixture
def board_service(session_factory) -> BoardService:
    return BoardService(session_factory)


@pytest.fixture
def comment_service(session_factory) -> CommentService:
    return CommentService(session_factory)


@pytest.fixture
def board_request():
    """Build a valid create request; keyword overrides replace single fields."""
    def _make(member_id: int, title: str = "Should I buy this?", **overrides) -> BoardCreateRequest:
        fields = dict(
            member_id=member_id,
            title=title,
            content="Thinking about it.",
            category=CategoryBoard.VOTE,
            deadline=DEADLINE,
            images=["boards/a.png", "boards/b.png"],
        )
        fields.update(overrides)
        return BoardCreateRequest(**fields)
    return _make


@pytest.fixture
def client() -> TestClient:
    """Fixture to provide a test client for the FastAPI application."""
    app.dependency_overrides[get_sessionmaker] = lambda: TestingSessionLocal
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def deadline() -> datetime.datetime:
    return DEADLINE
