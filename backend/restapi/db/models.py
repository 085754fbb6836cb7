"""
SQLAlchemy ORM Model Definitions

Defines all database table structures for the system, including:
- users: Users Table
- log_login_success: Successful Login Log Table
"""

import uuid
from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from restapi.common.time import utc_now_naive, utc_today


def _generate_uuid() -> str:
    return str(uuid.uuid4())


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class User(Base):
    """
    Users Table
    
    Application users, the owners of login log entries.
    """
    __tablename__ = "users"
    
    # Primary Key (UUID4 string)
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)
    # Username, unique
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Email, unique
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # Creation Time
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )
    # Update Time
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False
    )
    
    # Relationship: Successful logins of this user
    login_successes: Mapped[list["LogLoginSuccess"]] = relationship(
        "LogLoginSuccess",
        back_populates="user",
        cascade="all, delete-orphan",
    )


class LogLoginSuccess(Base):
    """
    Successful Login Log Table
    
    One row per successful login, with request and client details.
    """
    __tablename__ = "log_login_success"
    
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)
    # Logged in user
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # Request details
    ip: Mapped[str] = mapped_column(String(255), nullable=False)
    host: Mapped[str] = mapped_column(String(255), nullable=False)
    agent: Mapped[str] = mapped_column(Text, nullable=False)
    # Client details parsed from the user agent
    client_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    client_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    os_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    device_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # Login timestamp and date
    login_time: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )
    login_date: Mapped[date] = mapped_column(Date, default=utc_today, nullable=False)
    
    # Relationship: Logged in user
    user: Mapped["User"] = relationship("User", back_populates="login_successes")
    
    __table_args__ = (
        Index("idx_log_login_success_user_id", "user_id"),
        Index("idx_log_login_success_login_date", "login_date"),
    )
