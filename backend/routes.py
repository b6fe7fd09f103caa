"""Consolidated API router for all domain endpoints."""

from fastapi import APIRouter
from typing import List

# Import domain route modules
from backend.domains.board import routes as board
from backend.domains.comment import routes as comment

# Import schemas for response models
from backend.domains.board.schemas import BoardCreateResponse, BoardGetResponse, BoardSearchResponse
from backend.domains.comment.schemas import CommentResponse

# Create main API router
router = APIRouter(prefix="/api/v1")

# Board endpoints
router.add_api_route(
    "/boards",
    board.create_board,
    methods=["POST"],
    response_model=BoardCreateResponse,
    status_code=201,
    tags=["boards"]
)
router.add_api_route(
    "/boards",
    board.search_boards,
    methods=["GET"],
    response_model=BoardSearchResponse,
    tags=["boards"]
)
router.add_api_route(
    "/boards/{board_id}",
    board.get_board,
    methods=["GET"],
    response_model=BoardGetResponse,
    tags=["boards"]
)
router.add_api_route(
    "/boards/{board_id}",
    board.update_board,
    methods=["PUT"],
    response_model=BoardGetResponse,
    tags=["boards"]
)
router.add_api_route(
    "/boards/{board_id}",
    board.delete_board,
    methods=["DELETE"],
    status_code=204,
    tags=["boards"]
)

# Comment endpoints
router.add_api_route(
    "/boards/{board_id}/comments",
    comment.create_comment,
    methods=["POST"],
    response_model=CommentResponse,
    status_code=201,
    tags=["comments"]
)
router.add_api_route(
    "/boards/{board_id}/comments",
    comment.list_board_comments,
    methods=["GET"],
    response_model=List[CommentResponse],
    tags=["comments"]
)
router.add_api_route(
    "/comments/{comment_id}",
    comment.update_comment,
    methods=["PUT"],
    response_model=CommentResponse,
    tags=["comments"]
)
router.add_api_route(
    "/comments/{comment_id}",
    comment.delete_comment,
    methods=["DELETE"],
    status_code=204,
    tags=["comments"]
)
