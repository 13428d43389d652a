from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import SQLModel, Field
from typing import Optional


class User(SQLModel, table=True):
    """Registered account; password holds the bcrypt hash"""
    __tablename__ = "userDetails"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str
    email: str = Field(unique=True)
    password: str


class Task(SQLModel, table=True):
    """Task owned by exactly one user"""
    __tablename__ = "taskList"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    # Column keeps the original camelCase name
    user_id: int = Field(
        sa_column=Column("userId", Integer, ForeignKey("userDetails.id"), nullable=False)
    )
    task: str
    status: str
