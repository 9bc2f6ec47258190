import hashlib
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..models import ChangeOperationEnum, Person, Role, User, UserRole
from .audit import record_change

logger = logging.getLogger(__name__)


def hash_password(raw: str) -> bytes:
    """SHA-256 digest of the UTF-8 password, as stored in ``users.password_hash``."""
    return hashlib.sha256(raw.encode("utf-8")).digest()


def users_with_person(db: Session):
    stmt = (
        select(
            User.id,
            User.username,
            Person.first_name,
            Person.last_name,
            Person.email,
            User.is_locked,
        )
        .join(Person, Person.id == User.person_id)
        .order_by(User.id)
    )
    return db.execute(stmt).all()


def lock_user(db: Session, user_id: int, actor_user_id: int | None = None) -> bool:
    """Lock the account and clear its last login. False if the user is missing."""
    user = db.get(User, user_id)
    if user is None:
        return False
    user.is_locked = True
    user.last_login_at = None
    record_change(
        db,
        User.__tablename__,
        {"id": user_id},
        ChangeOperationEnum.UPDATE,
        actor_user_id=actor_user_id,
        snapshot={"is_locked": True, "last_login_at": None},
    )
    try:
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Locking user %s failed", user_id)
        raise
    logger.info("Locked user %s", user_id)
    return True


def upsert_role(db: Session, name: str) -> tuple[Role, bool]:
    role = db.scalars(select(Role).where(Role.name == name)).one_or_none()
    if role is not None:
        return role, False
    role = Role(name=name)
    db.add(role)
    db.commit()
    db.refresh(role)
    return role, True


def assign_role(db: Session, user_id: int, role_id: int) -> UserRole:
    link = db.get(UserRole, (user_id, role_id))
    if link is not None:
        return link
    if db.get(User, user_id) is None:
        raise NotFoundError("User", user_id)
    if db.get(Role, role_id) is None:
        raise NotFoundError("Role", role_id)
    link = UserRole(user_id=user_id, role_id=role_id)
    db.add(link)
    db.commit()
    db.refresh(link)
    return link
