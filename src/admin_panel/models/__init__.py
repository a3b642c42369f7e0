from .rbac import Permission, Role
from .user import User

__all__ = [
    "User",
    "Role",
    "Permission",
]
