from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, LargeBinary, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (sa.UniqueConstraint("username", name="uq_users_username"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    person_id: Mapped[int] = mapped_column(ForeignKey("persons.id"), nullable=False)
    username: Mapped[str] = mapped_column(String(120), nullable=False)
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(256), nullable=False)
    is_locked: Mapped[bool] = mapped_column(
        sa.Boolean, nullable=False, server_default=sa.false()
    )
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    person: Mapped["Person"] = relationship("Person")
    roles: Mapped[list["Role"]] = relationship(
        "Role", secondary="user_roles", viewonly=True, order_by="Role.id"
    )
