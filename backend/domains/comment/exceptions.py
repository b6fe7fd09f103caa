from backend.domains.shared.exceptions import NotFoundException, UnauthorizedException

class CommentNotFoundException(NotFoundException):
    """Raised when a comment is not found."""
    pass

class UnauthorizedCommentAccessException(UnauthorizedException):
    """Raised when a member tries to modify a comment they did not write."""
    pass
