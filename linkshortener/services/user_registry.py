"""User registry

Users are identified only by a random UUID handed out at registration.
Knowing the identifier is the only credential; there is no authentication.

Example:
    >>> from linkshortener.services import UserRegistry
    >>> registry = UserRegistry()
    >>> user = registry.register('alice')
    >>> registry.get(user.user_id).name
    'alice'
"""

import logging
import uuid

from beartype import beartype

from linkshortener.dao.base import UserBaseDAO
from linkshortener.dao.memory import UserMemoryDAO
from linkshortener.dao.exceptions import UserDoesNotExistError
from linkshortener.exceptions import InvalidInputError, UserNotFoundError
from linkshortener.models import UserModel
from linkshortener.utils.helpers import utcnow


logger = logging.getLogger(__name__)


class UserRegistry:
    def __init__(self, user_dao: UserBaseDAO | None = None):
        self._users = user_dao if user_dao is not None else UserMemoryDAO()

    @beartype
    def register(self, name: str) -> UserModel:
        """Register a new user under a fresh UUID

        Raises:
            InvalidInputError: If the name is blank.
        """
        if not name.strip():
            raise InvalidInputError('User name must not be empty.')

        user = UserModel(user_id=str(uuid.uuid4()), name=name.strip(), created_at=utcnow())
        self._users.insert(user)
        logger.info('User registered.', extra={'userId': user.user_id})
        return user

    @beartype
    def get(self, user_id: str) -> UserModel:
        try:
            return self._users.get(user_id)
        except UserDoesNotExistError as e:
            raise UserNotFoundError(f"User '{user_id}' not found.") from e

    @beartype
    def delete(self, user_id: str) -> None:
        try:
            self._users.delete(user_id)
        except UserDoesNotExistError as e:
            raise UserNotFoundError(f"User '{user_id}' not found.") from e
        logger.info('User deleted.', extra={'userId': user_id})
