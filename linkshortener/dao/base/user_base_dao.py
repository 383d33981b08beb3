"""Abstract base class for user data access objects (DAOs).

This interface defines the contract for storing registered users. It is
deliberately small: users are plain identifier-to-name records.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.dao.memory import UserMemoryDAO
        >>> dao = UserMemoryDAO()

        >>> dao.insert(user)
        <UserMemoryDAO>

        >>> dao.get(user.user_id).name
        'alice'
"""

from abc import ABC, abstractmethod

from linkshortener.models import UserModel


class UserBaseDAO(ABC):
    """Interface for user data access objects (DAOs)

    Methods:
        insert(user: UserModel, **kwargs) -> UserBaseDAO:
            Store a new user.
            Raises UserAlreadyExistsError if the identifier is taken.

        get(user_id: str, **kwargs) -> UserModel:
            Retrieve a user by identifier.
            Raises UserDoesNotExistError if the user does not exist.

        delete(user_id: str, **kwargs) -> UserBaseDAO:
            Remove a user by identifier.
            Raises UserDoesNotExistError if the user does not exist.
    """

    @abstractmethod
    def insert(self, user: UserModel, **kwargs) -> 'UserBaseDAO':
        """Store a new user.

        Args:
            user (UserModel):
                The user to store.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UserBaseDAO: self (for method chaining)

        Raises:
            UserAlreadyExistsError:
                If a user with the same identifier is already stored.
        """
        pass

    @abstractmethod
    def get(self, user_id: str, **kwargs) -> UserModel:
        """Retrieve a user by identifier.

        Args:
            user_id (str):
                The user's unique identifier.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UserModel:
                The stored user.

        Raises:
            UserDoesNotExistError:
                If the user does not exist.
        """
        pass

    @abstractmethod
    def delete(self, user_id: str, **kwargs) -> 'UserBaseDAO':
        pass
