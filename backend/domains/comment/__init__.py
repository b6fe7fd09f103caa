from .models import Comment
from .exceptions import CommentNotFoundException, UnauthorizedCommentAccessException

__all__ = [
    "Comment",
    "CommentNotFoundException",
    "UnauthorizedCommentAccessException",
]
