"""Comment API routes - thin routing layer."""

from typing import List

from fastapi import Body, Depends, HTTPException, Response, status

from backend.config.dependencies import get_comment_service
from backend.domains.comment.schemas import CommentCreateRequest, CommentUpdateRequest, CommentResponse
from backend.domains.comment.service import CommentService
from backend.domains.shared.exceptions import NotFoundException, UnauthorizedException


def create_comment(
    board_id: int,
    member_id: int = Body(...),
    content: str = Body(...),
    service: CommentService = Depends(get_comment_service)
) -> CommentResponse:
    """Create a comment on a board."""
    try:
        request = CommentCreateRequest(board_id=board_id, member_id=member_id, content=content)
        return service.create_comment(request)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)


def list_board_comments(
    board_id: int,
    service: CommentService = Depends(get_comment_service)
) -> List[CommentResponse]:
    """Get comments for a specific board, oldest first."""
    try:
        return service.list_comments(board_id)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)


def update_comment(
    comment_id: int,
    request: CommentUpdateRequest,
    service: CommentService = Depends(get_comment_service)
) -> CommentResponse:
    """Update an existing comment. Only its author may do so."""
    try:
        return service.update_comment(comment_id, request)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except UnauthorizedException as e:
        raise HTTPException(status_code=403, detail=e.detail)


def delete_comment(
    comment_id: int,
    service: CommentService = Depends(get_comment_service)
) -> Response:
    """Delete a comment."""
    try:
        service.delete_comment(comment_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except NotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)
