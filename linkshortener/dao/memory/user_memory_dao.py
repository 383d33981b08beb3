import logging

from beartype import beartype

from linkshortener.models import UserModel
from linkshortener.dao.base import UserBaseDAO
from linkshortener.dao.exceptions import UserAlreadyExistsError, UserDoesNotExistError


logger = logging.getLogger(__name__)


class UserMemoryDAO(UserBaseDAO):
    def __init__(self):
        self._users: dict[str, UserModel] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, user: UserModel, **kwargs) -> 'UserMemoryDAO':
        if user.user_id in self._users:
            raise UserAlreadyExistsError(f"User with ID '{user.user_id}' already exists.")
        self._users[user.user_id] = user
        logger.debug('Inserted user.', extra={'userId': user.user_id})
        return self

    @beartype
    def get(self, user_id: str, **kwargs) -> UserModel:
        try:
            return self._users[user_id]
        except KeyError as e:
            raise UserDoesNotExistError(f"User with ID '{user_id}' does not exist.") from e

    @beartype
    def delete(self, user_id: str, **kwargs) -> 'UserMemoryDAO':
        if user_id not in self._users:
            raise UserDoesNotExistError(f"User with ID '{user_id}' does not exist.")
        del self._users[user_id]
        logger.debug('Deleted user.', extra={'userId': user_id})
        return self
