"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkAlreadyExistsError:
        Raised when attempting to insert a LinkModel whose identifier is taken.

    LinkDoesNotExistError:
        Raised when updating or deleting a LinkModel that is not stored.

    UserAlreadyExistsError:
        Raised when attempting to insert a UserModel whose identifier is taken.

    UserDoesNotExistError:
        Raised when a user is not found in the data store.

Example:
    >>> from linkshortener.dao.exceptions import LinkDoesNotExistError
    >>> raise LinkDoesNotExistError("Link with id 'aB3dE6gH' does not exist.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.LinkDoesNotExistError: Link with id 'aB3dE6gH' does not exist.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class LinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a LinkModel that already exists in the data store."""

    pass


class LinkDoesNotExistError(DAOError):
    """Exception raised when a LinkModel to update or delete is not in the data store."""

    pass


class UserAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a UserModel that already exists in the data store."""

    pass


class UserDoesNotExistError(DAOError):
    """Exception raised when a user is not found in the data store."""

    pass
