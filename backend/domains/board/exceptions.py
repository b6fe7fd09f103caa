from backend.domains.shared.exceptions import NotFoundException, UnauthorizedException

class BoardNotFoundException(NotFoundException):
    """Raised when a board is not found."""
    pass

class UnauthorizedBoardAccessException(UnauthorizedException):
    """Raised when a member tries to modify a board they do not own."""
    pass
