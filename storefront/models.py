import enum
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, String, Text

from storefront.database import Base


def _new_id() -> str:
    return uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    PAID = "Paid"


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)  # bcrypt, never plaintext
    created_at = Column(DateTime(timezone=True), default=_now)


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True, default=_new_id)
    items = Column(JSON, nullable=False, default=list)  # [{name, price}]
    total = Column(String, nullable=False)              # e.g. "£9.99"
    customer_email = Column(String)
    stripe_session_id = Column(String, index=True)      # Checkout Session ID
    status = Column(String, nullable=False, default=OrderStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), default=_now)


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    service = Column(String)
    created_at = Column(DateTime(timezone=True), default=_now)
