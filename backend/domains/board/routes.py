"""Board API routes - thin routing layer."""

from typing import Optional

from fastapi import Depends, HTTPException, Query, Response, status

from backend.config.dependencies import get_board_service
from backend.config.settings import get_settings
from backend.domains.board.models import SortType
from backend.domains.board.schemas import (
    BoardCreateRequest,
    BoardUpdateRequest,
    BoardCreateResponse,
    BoardGetResponse,
    BoardSearchResponse,
)
from backend.domains.board.service import BoardService
from backend.domains.shared.exceptions import NotFoundException, UnauthorizedException


def create_board(
    request: BoardCreateRequest,
    service: BoardService = Depends(get_board_service)
) -> BoardCreateResponse:
    """Create a new board."""
    try:
        return service.create_board(request)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)


def search_boards(
    cursor_id: Optional[int] = Query(None, ge=1, description="ID of the last board on the previous page"),
    size: Optional[int] = Query(None, ge=1, description="Page size"),
    sort: SortType = Query(SortType.LATEST, description="Sort order"),
    service: BoardService = Depends(get_board_service)
) -> BoardSearchResponse:
    """List boards newest first using cursor pagination."""
    settings = get_settings()
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    try:
        return service.search_boards(cursor_id, page_size, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def get_board(
    board_id: int,
    service: BoardService = Depends(get_board_service)
) -> BoardGetResponse:
    """Get a specific board with its images."""
    try:
        return service.get_board(board_id)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)


def update_board(
    board_id: int,
    request: BoardUpdateRequest,
    service: BoardService = Depends(get_board_service)
) -> BoardGetResponse:
    """Update an existing board. Only its owner may do so."""
    try:
        return service.update_board(board_id, request)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except UnauthorizedException as e:
        raise HTTPException(status_code=403, detail=e.detail)


def delete_board(
    board_id: int,
    service: BoardService = Depends(get_board_service)
) -> Response:
    """Delete a board with its images and comments."""
    try:
        service.delete_board(board_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)
