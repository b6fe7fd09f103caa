"""Board application service: one transaction per operation."""

import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from backend.domains.board.models import Board, SortType
from backend.domains.board.schemas import (
    BoardCreateRequest,
    BoardUpdateRequest,
    BoardCreateResponse,
    BoardGetResponse,
    BoardSearchResponse,
)
from backend.domains.board.repository import SqlAlchemyBoardRepository
from backend.domains.board.policy import Action, enforce_policy
from backend.domains.board.exceptions import BoardNotFoundException, UnauthorizedBoardAccessException
from backend.domains.member.repository import SqlAlchemyMemberRepository
from backend.domains.member.exceptions import MemberNotFoundException
from backend.domains.shared.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)


class BoardService:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_board(self, request: BoardCreateRequest) -> BoardCreateResponse:
        with SqlAlchemyUoW(self._session_factory) as uow:
            member = SqlAlchemyMemberRepository(uow.session).get(request.member_id)
            if not member:
                raise MemberNotFoundException(f"Member {request.member_id} not found")

            board = Board(
                member=member,
                title=request.title,
                content=request.content,
                category=request.category,
                deadline=request.deadline,
            )
            board.replace_images(request.images)
            SqlAlchemyBoardRepository(uow.session).add(board)
            logger.info("Created board %s for member %s", board.id, member.id)
            return BoardCreateResponse(board_id=board.id)

    def get_board(self, board_id: int) -> BoardGetResponse:
        with SqlAlchemyUoW(self._session_factory, read_only=True) as uow:
            board = self._get_board_entity(SqlAlchemyBoardRepository(uow.session), board_id)
            return BoardGetResponse.of(board)

    def search_boards(
        self,
        cursor_id: Optional[int],
        page_size: int,
        sort: SortType = SortType.LATEST
    ) -> BoardSearchResponse:
        """
        Return one page of boards, newest first.

        Pass the previous page's ``next_cursor_id`` to continue. One extra row
        is fetched to tell whether another page exists.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        # LATEST is the only ordering boards support
        logger.info("Searching boards by %s (cursor=%s, size=%s)", sort.value, cursor_id, page_size)
        with SqlAlchemyUoW(self._session_factory, read_only=True) as uow:
            board_repo = SqlAlchemyBoardRepository(uow.session)
            if cursor_id is None:
                rows = board_repo.list_latest(page_size + 1)
            else:
                rows = board_repo.list_latest_before(cursor_id, page_size + 1)

            has_next = len(rows) > page_size
            boards = rows[:page_size]
            return BoardSearchResponse(
                boards=[BoardGetResponse.of(board) for board in boards],
                has_next=has_next,
                next_cursor_id=boards[-1].id if boards else None,
            )

    def update_board(self, board_id: int, request: BoardUpdateRequest) -> BoardGetResponse:
        with SqlAlchemyUoW(self._session_factory) as uow:
            board = self._get_board_entity(SqlAlchemyBoardRepository(uow.session), board_id)

            try:
                enforce_policy(action=Action.EDIT, resource=board, member_id=request.member_id)
            except PermissionError as e:
                raise UnauthorizedBoardAccessException(str(e))

            changed = board.update(
                title=request.title,
                content=request.content,
                category=request.category,
                deadline=request.deadline,
                image_paths=request.images,
            )
            uow.flush()
            logger.info("Updated board %s (fields: %s)", board.id, ", ".join(changed) or "none")
            return BoardGetResponse.of(board)

    def delete_board(self, board_id: int) -> None:
        with SqlAlchemyUoW(self._session_factory) as uow:
            board_repo = SqlAlchemyBoardRepository(uow.session)
            board = self._get_board_entity(board_repo, board_id)
            # Always allowed for now; TODO: pass the requesting member here once
            # delete requests carry one so the owner check can take effect
            enforce_policy(action=Action.DELETE, resource=board)

            # images and comments are deleted by cascade
            board_repo.delete(board)
            logger.info("Deleted board %s", board_id)

    def _get_board_entity(self, board_repo: SqlAlchemyBoardRepository, board_id: int) -> Board:
        board = board_repo.get_with_details(board_id)
        if not board:
            raise BoardNotFoundException(f"Board {board_id} not found")
        return board
