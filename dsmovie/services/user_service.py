"""
Resolution of the user behind the current request.
"""

import logging

from dsmovie.database.models import User
from dsmovie.database.repositories import UserRepository
from dsmovie.services.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


class UserService:
    """
    Auth collaborator for the other services.

    The HTTP layer authenticates the request and hands over the username;
    this service turns it into a stored user.
    """

    def __init__(self, repository: UserRepository, username: str | None):
        self.repository = repository
        self.username = username

    def authenticated(self) -> User:
        """
        Get the authenticated user.

        Returns:
            User for the current request

        Raises:
            UnauthorizedException: If no user matches the request's username
        """
        user = self.repository.find_by_username(self.username) if self.username else None
        if user is None:
            logger.warning("No user found for username %r", self.username)
            raise UnauthorizedException("Invalid user")
        return user
