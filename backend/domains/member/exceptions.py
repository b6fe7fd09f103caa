from backend.domains.shared.exceptions import NotFoundException

class MemberNotFoundException(NotFoundException):
    """Raised when a member is not found."""
    pass
