import pytest

from backend.domains.board.exceptions import BoardNotFoundException
from backend.domains.comment.exceptions import CommentNotFoundException, UnauthorizedCommentAccessException
from backend.domains.comment.schemas import CommentCreateRequest, CommentUpdateRequest
from backend.domains.member.exceptions import MemberNotFoundException


@pytest.fixture
def board_id(board_service, owner, board_request) -> int:
    return board_service.create_board(board_request(owner.id)).board_id


def test_create_and_list_comments(comment_service, board_id, owner, other_member):
    first = comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=other_member.id, content="Buy it.")
    )
    comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=owner.id, content="Thanks!")
    )

    assert first.nickname == "stranger"
    comments = comment_service.list_comments(board_id)
    assert [c.content for c in comments] == ["Buy it.", "Thanks!"]
    assert [c.member_id for c in comments] == [other_member.id, owner.id]


def test_create_comment_on_missing_board(comment_service, owner):
    with pytest.raises(BoardNotFoundException):
        comment_service.create_comment(
            CommentCreateRequest(board_id=77, member_id=owner.id, content="?")
        )


def test_create_comment_by_unknown_member(comment_service, board_id):
    with pytest.raises(MemberNotFoundException):
        comment_service.create_comment(
            CommentCreateRequest(board_id=board_id, member_id=404, content="?")
        )


def test_list_comments_of_missing_board(comment_service):
    with pytest.raises(BoardNotFoundException):
        comment_service.list_comments(1)


def test_author_updates_comment(comment_service, board_id, other_member):
    created = comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=other_member.id, content="Buy it.")
    )

    updated = comment_service.update_comment(
        created.id, CommentUpdateRequest(member_id=other_member.id, content="Actually, don't.")
    )

    assert updated.content == "Actually, don't."
    assert comment_service.list_comments(board_id)[0].content == "Actually, don't."


def test_non_author_cannot_update_comment(comment_service, board_id, owner, other_member):
    created = comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=other_member.id, content="Buy it.")
    )

    with pytest.raises(UnauthorizedCommentAccessException):
        comment_service.update_comment(
            created.id, CommentUpdateRequest(member_id=owner.id, content="edited")
        )
    assert comment_service.list_comments(board_id)[0].content == "Buy it."


def test_update_missing_comment(comment_service, owner):
    with pytest.raises(CommentNotFoundException):
        comment_service.update_comment(1, CommentUpdateRequest(member_id=owner.id, content="x"))


def test_delete_comment(comment_service, board_id, owner):
    created = comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=owner.id, content="bye")
    )

    comment_service.delete_comment(created.id)

    assert comment_service.list_comments(board_id) == []
    with pytest.raises(CommentNotFoundException):
        comment_service.delete_comment(created.id)


def test_deleting_board_removes_its_comments(comment_service, board_service, board_id, owner):
    created = comment_service.create_comment(
        CommentCreateRequest(board_id=board_id, member_id=owner.id, content="bye")
    )

    board_service.delete_board(board_id)

    with pytest.raises(CommentNotFoundException):
        comment_service.update_comment(created.id, CommentUpdateRequest(member_id=owner.id, content="x"))
