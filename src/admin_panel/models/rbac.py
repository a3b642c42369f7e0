"""
Roles and permissions read by menu, section and dashboard predicates.

Predicates never query these tables directly: ``PanelContext.has_role`` and
``PanelContext.can`` go through ``User.has_role`` / ``User.can``.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from admin_panel.db import Base

panel_user_roles = Table(
    "panel_user_roles",
    Base.metadata,
    Column("user_id", ForeignKey("panel_users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", ForeignKey("panel_roles.id", ondelete="CASCADE"), primary_key=True),
)

panel_role_permissions = Table(
    "panel_role_permissions",
    Base.metadata,
    Column("role_id", ForeignKey("panel_roles.id", ondelete="CASCADE"), primary_key=True),
    Column("permission_id", ForeignKey("panel_permissions.id", ondelete="CASCADE"), primary_key=True),
)


class Role(Base):
    __tablename__ = "panel_roles"
    id = Column(Integer, primary_key=True)
    name = Column(String(64), unique=True, nullable=False, index=True)  # matched case-insensitively
    label = Column(String(128), nullable=True)
    users = relationship("User", secondary=panel_user_roles, back_populates="roles", lazy="selectin")
    permissions = relationship("Permission", secondary=panel_role_permissions, back_populates="roles", lazy="selectin")

    def grants(self, permission: str) -> bool:
        return any(p.name == permission for p in self.permissions)


class Permission(Base):
    """Named ability checked by predicates, e.g. 'view-financial-reports'."""

    __tablename__ = "panel_permissions"
    id = Column(Integer, primary_key=True)
    name = Column(String(128), unique=True, nullable=False, index=True)
    roles = relationship("Role", secondary=panel_role_permissions, back_populates="permissions", lazy="selectin")
