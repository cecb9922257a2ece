"""
FastAPI dependency injection for the database session, authentication and services.
"""

import logging
from typing import Callable, Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash

from dsmovie.api.config import get_database_path
from dsmovie.database.connection import get_db_manager
from dsmovie.database.init_db import ROLE_ADMIN, ROLE_CLIENT
from dsmovie.database.models import User
from dsmovie.database.repositories import (
    SqlAlchemyMovieRepository,
    SqlAlchemyScoreRepository,
    SqlAlchemyUserRepository,
)
from dsmovie.services import MovieService, ScoreService, UserService

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic()


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for FastAPI Depends(); one transaction per request."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    db: Session = Depends(get_db),
) -> User:
    """Check HTTP Basic credentials against the stored password hash."""
    user = SqlAlchemyUserRepository(db).find_by_username(credentials.username)
    if user is None or not check_password_hash(user.password, credentials.password):
        logger.warning("Failed login for %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


def require_roles(*authorities: str) -> Callable[..., User]:
    """Build a dependency that lets through users holding any of ``authorities``."""

    def dependency(user: User = Depends(get_current_user)) -> User:
        if not any(user.has_role(authority) for authority in authorities):
            logger.warning("User %s lacks roles %s", user.username, authorities)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
        return user

    return dependency


require_admin = require_roles(ROLE_ADMIN)
require_client = require_roles(ROLE_CLIENT, ROLE_ADMIN)


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(SqlAlchemyMovieRepository(db))


def get_score_service(
    db: Session = Depends(get_db),
    user: User = Depends(require_client),
) -> ScoreService:
    user_service = UserService(SqlAlchemyUserRepository(db), user.username)
    return ScoreService(
        user_service,
        SqlAlchemyMovieRepository(db),
        SqlAlchemyScoreRepository(db),
    )
