import logging
from typing import List

from sqlalchemy.orm import sessionmaker

from backend.domains.comment.models import Comment
from backend.domains.comment.schemas import CommentCreateRequest, CommentUpdateRequest, CommentResponse
from backend.domains.comment.repository import SqlAlchemyCommentRepository
from backend.domains.comment.exceptions import CommentNotFoundException, UnauthorizedCommentAccessException
from backend.domains.board.repository import SqlAlchemyBoardRepository
from backend.domains.board.exceptions import BoardNotFoundException
from backend.domains.board.policy import Action, enforce_policy
from backend.domains.member.repository import SqlAlchemyMemberRepository
from backend.domains.member.exceptions import MemberNotFoundException
from backend.domains.shared.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_comment(self, request: CommentCreateRequest) -> CommentResponse:
        with SqlAlchemyUoW(self._session_factory) as uow:
            board = SqlAlchemyBoardRepository(uow.session).get(request.board_id)
            if not board:
                raise BoardNotFoundException(f"Board {request.board_id} not found")

            member = SqlAlchemyMemberRepository(uow.session).get(request.member_id)
            if not member:
                raise MemberNotFoundException(f"Member {request.member_id} not found")

            comment = Comment(
                board=board,
                member=member,
                content=request.content,
            )
            SqlAlchemyCommentRepository(uow.session).add(comment)
            logger.info("Created comment %s on board %s", comment.id, board.id)
            return CommentResponse.of(comment)

    def list_comments(self, board_id: int) -> List[CommentResponse]:
        with SqlAlchemyUoW(self._session_factory, read_only=True) as uow:
            if not SqlAlchemyBoardRepository(uow.session).exists(board_id):
                raise BoardNotFoundException(f"Board {board_id} not found")

            comments = SqlAlchemyCommentRepository(uow.session).get_by_board(board_id)
            return [CommentResponse.of(comment) for comment in comments]

    def update_comment(self, comment_id: int, request: CommentUpdateRequest) -> CommentResponse:
        with SqlAlchemyUoW(self._session_factory) as uow:
            comment = self._get_comment_entity(SqlAlchemyCommentRepository(uow.session), comment_id)

            try:
                enforce_policy(action=Action.EDIT, resource=comment, member_id=request.member_id)
            except PermissionError as e:
                raise UnauthorizedCommentAccessException(str(e))

            comment.content = request.content
            uow.flush()
            logger.info("Updated comment %s", comment.id)
            return CommentResponse.of(comment)

    def delete_comment(self, comment_id: int) -> None:
        with SqlAlchemyUoW(self._session_factory) as uow:
            comment_repo = SqlAlchemyCommentRepository(uow.session)
            comment = self._get_comment_entity(comment_repo, comment_id)
            # Always allowed for now, like board deletion; the owner check lands
            # here once delete requests carry the requesting member
            enforce_policy(action=Action.DELETE, resource=comment)

            comment_repo.delete(comment)
            logger.info("Deleted comment %s", comment_id)

    def _get_comment_entity(self, comment_repo: SqlAlchemyCommentRepository, comment_id: int) -> Comment:
        comment = comment_repo.get(comment_id)
        if not comment:
            raise CommentNotFoundException(f"Comment {comment_id} not found")
        return comment
