from typing import Optional

from fastapi import HTTPException, status

from restaurant.models.user import User


def authorize(actor: User, owner_id: Optional[int] = None, admin_only: bool = False) -> bool:
    """
    Single capability check for every route.

    Admins may act on anything. Everyone else may act only on resources they
    own (``owner_id`` equal to their own id) and never on admin-only ones.
    """
    if actor.is_admin:
        return True
    if admin_only:
        return False
    return owner_id is not None and owner_id == actor.user_id


def ensure_authorized(actor: User, owner_id: Optional[int] = None, admin_only: bool = False) -> None:
    if not authorize(actor, owner_id=owner_id, admin_only=admin_only):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required" if admin_only else "Not authorized to access this resource",
        )
