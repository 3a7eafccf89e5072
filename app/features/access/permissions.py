"""Role-based access control.

A user's ``role`` string is the only authorization key. Each role maps to a
fixed set of permissions; routes depend on permissions instead of repeating
role lists.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional

from fastapi import Depends

from app.features.auth.dependencies import get_current_user
from app.models.user import User
from app.utils.errors import Forbidden

class Role(str, Enum):
    SUPER_ADMIN = "super_admin"
    SALES_MANAGER = "sales_manager"
    BLOG_EDITOR = "blog_editor"
    ACCOUNTANT = "accountant"
    CUSTOMER = "customer"

class Permission(str, Enum):
    PRODUCTS_MANAGE = "products:manage"
    BLOG_WRITE = "blog:write"
    BLOG_VIEW_UNAPPROVED = "blog:view_unapproved"
    BLOG_EDIT_ANY = "blog:edit_any"
    BLOG_APPROVE = "blog:approve"
    BLOG_DELETE = "blog:delete"
    ORDERS_VIEW_ALL = "orders:view_all"
    ORDERS_UPDATE = "orders:update"
    ORDERS_UPDATE_PAYMENT = "orders:update_payment"
    USERS_MANAGE = "users:manage"
    SETTINGS_MANAGE = "settings:manage"
    CONTACT_MANAGE = "contact:manage"
    NEWSLETTER_VIEW = "newsletter:view"
    AUDIT_VIEW = "audit:view"

ROLE_PERMISSIONS: Dict[Role, FrozenSet[Permission]] = {
    Role.SUPER_ADMIN: frozenset(Permission),
    Role.SALES_MANAGER: frozenset({
        Permission.PRODUCTS_MANAGE,
        Permission.ORDERS_VIEW_ALL,
        Permission.ORDERS_UPDATE,
        Permission.ORDERS_UPDATE_PAYMENT,
    }),
    Role.BLOG_EDITOR: frozenset({
        Permission.BLOG_WRITE,
        Permission.BLOG_VIEW_UNAPPROVED,
        Permission.ORDERS_VIEW_ALL,
    }),
    Role.ACCOUNTANT: frozenset({
        Permission.ORDERS_VIEW_ALL,
        Permission.ORDERS_UPDATE_PAYMENT,
    }),
    Role.CUSTOMER: frozenset(),
}

def parse_role(value: Optional[str]) -> Optional[Role]:
    try:
        return Role(value)
    except ValueError:
        return None

def permissions_for(role: Optional[str]) -> FrozenSet[Permission]:
    """Permissions granted to a role string; unknown roles get none."""
    parsed = parse_role(role)
    if parsed is None:
        return frozenset()
    return ROLE_PERMISSIONS[parsed]

def has_permission(user: Optional[User], permission: Permission) -> bool:
    return user is not None and permission in permissions_for(user.role)

def require_role(*roles: Role):
    allowed = {Role(r).value for r in roles}

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise Forbidden()
        return current_user

    return dependency

def require_permission(permission: Permission):
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not has_permission(current_user, permission):
            raise Forbidden()
        return current_user

    return dependency

def require_any_permission(*permissions: Permission):
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        granted = permissions_for(current_user.role)
        if not any(p in granted for p in permissions):
            raise Forbidden()
        return current_user

    return dependency
