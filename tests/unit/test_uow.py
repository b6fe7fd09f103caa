import pytest

from backend.domains.member.models import Member
from backend.domains.shared.uow import SqlAlchemyUoW


def count_members(session_factory) -> int:
    session = session_factory()
    try:
        return session.query(Member).count()
    finally:
        session.close()


def test_commits_on_clean_exit(session_factory):
    with SqlAlchemyUoW(session_factory) as uow:
        uow.session.add(Member(email="a@example.com", nickname="a"))

    assert count_members(session_factory) == 1


def test_rolls_back_on_exception(session_factory):
    with pytest.raises(RuntimeError):
        with SqlAlchemyUoW(session_factory) as uow:
            uow.session.add(Member(email="a@example.com", nickname="a"))
            uow.flush()
            raise RuntimeError("boom")

    assert count_members(session_factory) == 0


def test_read_only_discards_writes(session_factory):
    with SqlAlchemyUoW(session_factory, read_only=True) as uow:
        uow.session.add(Member(email="a@example.com", nickname="a"))
        uow.flush()

    assert count_members(session_factory) == 0


def test_read_only_refuses_commit(session_factory):
    with pytest.raises(RuntimeError):
        with SqlAlchemyUoW(session_factory, read_only=True) as uow:
            uow.commit()


def test_session_is_closed_after_exit(session_factory):
    with SqlAlchemyUoW(session_factory) as uow:
        session = uow.session
    assert not session.in_transaction()
