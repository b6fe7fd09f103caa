"""Common dependencies for FastAPI routes."""

from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from .db import get_sessionmaker
from ..domains.board.service import BoardService
from ..domains.comment.service import CommentService


def get_board_service(session_factory: sessionmaker = Depends(get_sessionmaker)) -> BoardService:
    return BoardService(session_factory)


def get_comment_service(session_factory: sessionmaker = Depends(get_sessionmaker)) -> CommentService:
    return CommentService(session_factory)


__all__ = [
    "get_sessionmaker",
    "get_board_service",
    "get_comment_service",
]
