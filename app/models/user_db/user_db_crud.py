from sqlalchemy.orm import Session
from app.models.user_db.user_db import User
from app.core.security import hash_password, verify_password


def create_user(db: Session, username: str, password: str, is_admin: bool = False):
    db_user = User(
        username=username,
        hashed_password=hash_password(password),
        is_admin=is_admin,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


def authenticate_user(db: Session, username: str, password: str):
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
