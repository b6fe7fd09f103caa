"""Ownership policy for boards and comments."""

from typing import Optional
from enum import Enum

from backend.domains.board.models import Board
from backend.domains.comment.models import Comment


class Action(Enum):
    """Enumeration of possible actions on community resources."""
    
    EDIT = "edit"
    DELETE = "delete"


class PolicyResult:
    """Result of a policy check with reason."""
    
    def __init__(self, allowed: bool, reason: str = ""):
        self.allowed = allowed
        self.reason = reason
    
    def __bool__(self) -> bool:
        return self.allowed
    
    @classmethod
    def allow(cls, reason: str = "") -> "PolicyResult":
        """Create an allowed result."""
        return cls(True, reason)
    
    @classmethod
    def deny(cls, reason: str = "") -> "PolicyResult":
        """Create a denied result."""
        return cls(False, reason)


class OwnershipPolicy:
    """Only the member recorded as a resource's owner may edit it.

    Deletion is not checked against the owner yet; callers reach delete
    operations without a requesting member.
    """

    resource_name = "resource"

    def can_edit(self, resource, member_id: Optional[int]) -> PolicyResult:
        """Check if a member can edit the resource."""
        if member_id is None:
            return PolicyResult.deny(f"A member is required to edit this {self.resource_name}")
        
        if resource.is_owned_by(member_id):
            return PolicyResult.allow("Member is the owner")
        
        return PolicyResult.deny(
            f"Member {member_id} is not the owner of {self.resource_name} {resource.id}"
        )
    
    def can_delete(self, resource, member_id: Optional[int] = None) -> PolicyResult:
        """Check if the resource can be deleted."""
        return PolicyResult.allow("Ownership is not verified on delete")


class BoardPolicy(OwnershipPolicy):
    """Authorization policy for boards."""

    resource_name = "board"


class CommentPolicy(OwnershipPolicy):
    """Authorization policy for comments."""

    resource_name = "comment"


class CommunityPolicy:
    """Composite policy routing checks by resource type."""
    
    def __init__(self):
        self.board = BoardPolicy()
        self.comment = CommentPolicy()
    
    def can(self, action: Action, resource, member_id: Optional[int] = None) -> PolicyResult:
        if isinstance(resource, Board):
            policy = self.board
        elif isinstance(resource, Comment):
            policy = self.comment
        else:
            return PolicyResult.deny(f"No policy for {type(resource).__name__}")
        
        if action == Action.EDIT:
            return policy.can_edit(resource, member_id)
        elif action == Action.DELETE:
            return policy.can_delete(resource, member_id)
        return PolicyResult.deny(f"Unknown action: {action}")


def check_policy(action: Action, resource, member_id: Optional[int] = None) -> PolicyResult:
    """
    Convenience function to check a policy.
    
    Args:
        action: The action to check
        resource: The board or comment being acted upon
        member_id: The member performing the action
    
    Returns:
        PolicyResult indicating if action is allowed
    """
    return CommunityPolicy().can(action, resource, member_id)


def enforce_policy(action: Action, resource, member_id: Optional[int] = None) -> None:
    """Raise PermissionError when the policy denies the action."""
    result = check_policy(action, resource, member_id)
    if not result:
        raise PermissionError(result.reason)
