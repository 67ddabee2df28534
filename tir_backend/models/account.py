import enum

from tir_backend.models import db
from .base import Base
from sqlalchemy.sql import func


class Role(enum.IntEnum):
    """Account roles, stored as a small integer."""

    MEMBER = 1
    SUPERVISOR = 2

    @property
    def display_name(self):
        return _ROLE_NAMES[self]

    @classmethod
    def from_name(cls, name):
        """Map a display name to a role (case-sensitive). Raises ValueError."""
        for role, role_name in _ROLE_NAMES.items():
            if role_name == name:
                return role
        raise ValueError(f"Unknown role: {name!r}")


_ROLE_NAMES = {
    Role.MEMBER: "Member",
    Role.SUPERVISOR: "SUPERVISOR",
}


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        # One live account per email; soft-deleted rows don't count
        db.Index(
            "idx_email",
            "email",
            unique=True,
            postgresql_where=db.text("deleted_at IS NULL"),
            sqlite_where=db.text("deleted_at IS NULL"),
        ),
        db.CheckConstraint("role IN (1, 2)", name="ck_accounts_role"),
    )

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False)
    bio = db.Column(db.String(100))
    full_name = db.Column(db.String(255))
    role = db.Column(db.SmallInteger, nullable=False, default=int(Role.MEMBER))
    password_hash = db.Column(db.String(100), nullable=False)
    api_key = db.Column(db.String(100), nullable=False, index=True)

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = db.Column(db.DateTime)

    @property
    def account_role(self):
        return Role(self.role)

    def to_view(self, include_api_key=False):
        """
        Public representation of the account

        Returns:
            dict: {
                'email': str,
                'bio': str (omitted when empty),
                'fullName': str (omitted when empty),
                'apiKey': str (only when include_api_key),
                'role': str
            }
        """
        row = self.to_dict()

        view = {"email": row["email"]}
        if row["bio"] is not None:
            view["bio"] = row["bio"]
        if row["full_name"] is not None:
            view["fullName"] = row["full_name"]
        if include_api_key:
            view["apiKey"] = row["api_key"]
        view["role"] = self.account_role.display_name
        return view
