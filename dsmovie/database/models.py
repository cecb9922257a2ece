"""
SQLAlchemy ORM models for the DSMovie database.

This module defines the Movie, Score, User and Role tables with their
relationships and constraints.
"""

from typing import List, Optional
from sqlalchemy import (
    Column, Integer, String, Float, Text, ForeignKey, Table, Index
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


user_role = Table(
    'user_role',
    Base.metadata,
    Column('user_id', Integer, ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    Column('role_id', Integer, ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True),
)


class Role(Base):
    """
    Role granted to users.

    Attributes:
        id: Primary key, auto-incremented
        authority: Role name ('ROLE_CLIENT' or 'ROLE_ADMIN')
    """
    __tablename__ = 'roles'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    authority: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, authority='{self.authority}')>"


class User(Base):
    """
    User table storing login credentials.

    Attributes:
        id: Primary key, auto-incremented
        username: Login name (an e-mail address)
        password: Password hash produced by werkzeug.security
        roles: Roles granted to the user
    """
    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    roles: Mapped[List["Role"]] = relationship("Role", secondary=user_role, lazy="selectin")

    def has_role(self, authority: str) -> bool:
        return any(role.authority == authority for role in self.roles)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"


class Movie(Base):
    """
    Movie table storing the title, poster and aggregate rating.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title (required)
        score: Mean of all score values, full precision
        count: Number of scores
        image: Poster URL (optional)
        scores: Individual user scores
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # No delete cascade: a movie with scores cannot be removed
    scores: Mapped[List["Score"]] = relationship(
        "Score",
        back_populates="movie",
        lazy="selectin"
    )

    __table_args__ = (
        Index('idx_movies_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', score={self.score}, count={self.count})>"


class Score(Base):
    """
    Score table storing one user's rating of one movie.

    The (movie_id, user_id) pair is the primary key, so each user holds at
    most one score per movie.

    Attributes:
        movie_id: Foreign key to movies table
        user_id: Foreign key to users table
        value: Rating value (0.0 to 5.0)
    """
    __tablename__ = 'scores'

    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.id'),
        primary_key=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('users.id'),
        primary_key=True
    )
    value: Mapped[float] = mapped_column(Float, nullable=False)

    movie: Mapped["Movie"] = relationship("Movie", back_populates="scores")
    user: Mapped["User"] = relationship("User")

    __table_args__ = (
        Index('idx_scores_user', 'user_id'),
    )

    def __repr__(self) -> str:
        return f"<Score(movie_id={self.movie_id}, user_id={self.user_id}, value={self.value})>"
