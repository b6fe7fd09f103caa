import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.domains.member.models import Member
from backend.domains.member.repository import SqlAlchemyMemberRepository


@pytest.fixture
def repo(db_session: Session) -> SqlAlchemyMemberRepository:
    return SqlAlchemyMemberRepository(db_session)


def test_add_and_get(repo):
    member = repo.add(Member(email="mina@example.com", nickname="mina"))

    assert member.id is not None
    assert member.created_at is not None
    assert repo.get(member.id).nickname == "mina"
    assert repo.get(member.id + 1) is None


def test_get_by_email(repo, owner):
    found = repo.get_by_email("owner@example.com")
    assert found is not None
    assert found.id == owner.id
    assert repo.get_by_email("nobody@example.com") is None


def test_email_is_unique(repo, owner):
    with pytest.raises(IntegrityError):
        repo.add(Member(email="owner@example.com", nickname="copycat"))
