from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from admin_panel.db import Base
from admin_panel.models.rbac import panel_user_roles


def _utc_now():
    """Helper function for SQLAlchemy default/onupdate."""
    return datetime.now(UTC)


class User(Base):
    __tablename__ = "panel_users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=True)
    is_admin = Column(Boolean, default=False)  # Full panel access, bypasses permission checks
    is_active = Column(Boolean, default=True)
    token_version = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime, default=_utc_now, nullable=False)
    updated_at = Column(DateTime, default=_utc_now, onupdate=_utc_now, nullable=False)
    roles = relationship("Role", secondary=panel_user_roles, back_populates="users", lazy="selectin")

    def has_role(self, name: str) -> bool:
        wanted = name.lower()
        return any((role.name or "").lower() == wanted for role in self.roles)

    def can(self, permission: str) -> bool:
        if self.is_admin:
            return True
        return any(role.grants(permission) for role in self.roles)
