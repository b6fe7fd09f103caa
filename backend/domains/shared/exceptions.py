class CommunityException(Exception):
    """Base exception for the community domains."""
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class NotFoundException(CommunityException):
    """Raised when a requested resource does not exist."""
    pass

class UnauthorizedException(CommunityException):
    """Raised when the requesting member does not own the resource."""
    pass
