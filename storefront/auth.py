import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.errors import InvalidCredentials, UniquenessViolation
from storefront.models import User

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10


def _encode(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_token(user_id: str) -> str:
    exp = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expire_hours)
    payload = {"sub": user_id, "id": user_id, "exp": exp}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[str]:
    """User id from a token issued by create_token, for callers that check tokens."""
    try:
        data = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    return data.get("sub")


def register_user(db: Session, email: str, password: str) -> User:
    """Create a new account. Never touches an existing user."""
    user = User(email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Registration raced for an existing email")
        raise UniquenessViolation()
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(user: User, password: str) -> User:
    if not verify_password(password, user.password_hash):
        logger.warning("Password mismatch for user %s", user.id)
        raise InvalidCredentials()
    return user


def login_or_register(db: Session, email: str, password: str) -> User:
    """
    Log in with an existing account, or create one on first contact.

    A token must only be issued for the returned user.
    """
    user = db.query(User).filter_by(email=email).first()
    if user is None:
        return register_user(db, email, password)
    return authenticate_user(user, password)
