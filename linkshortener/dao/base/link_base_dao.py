"""Abstract base class for Link data access objects (DAOs).

This class establishes a consistent contract for all Link DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting, replacing, retrieving and deleting LinkModel objects.
    - Standardize error handling across data store implementations.
    - Hand out immutable LinkModel snapshots only.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.dao.memory import LinkMemoryDAO

        >>> dao = LinkMemoryDAO()
        >>> dao.insert(link)
        <LinkMemoryDAO>

        >>> dao.get('aB3dE6gH').original_url
        'https://example.com/blog/article-123'

        >>> dao.get('missing1') is None
        True
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from linkshortener.models import LinkModel


class LinkBaseDAO(ABC):
    """Interface for Link data access objects (DAOs).

    Methods:
        insert(link: LinkModel, **kwargs) -> LinkBaseDAO:
            Insert a new LinkModel into the data store.
            Raises LinkAlreadyExistsError if the identifier is already stored.

        update(link: LinkModel, **kwargs) -> LinkBaseDAO:
            Replace a stored LinkModel with a new snapshot carrying the same identifier.
            Raises LinkDoesNotExistError if the identifier is not stored.

        get(link_id: str, **kwargs) -> LinkModel | None:
            Retrieve a LinkModel by identifier. Returns None if not found.

        delete(link_id: str, **kwargs) -> LinkBaseDAO:
            Remove a LinkModel by identifier.
            Raises LinkDoesNotExistError if the identifier is not stored.

        exists(link_id: str, **kwargs) -> bool:
            Check whether an identifier is stored.

        all(owner_id: str | None = None, **kwargs) -> Iterator[LinkModel]:
            Iterate over a snapshot of stored links, optionally one owner's only.

    Subclassing:
        Datastore-specific implementations must extend this class and implement
        all abstract methods.
    """

    @abstractmethod
    def insert(self, link: LinkModel, **kwargs) -> 'LinkBaseDAO':
        """Insert a new LinkModel into the data store.

        Args:
            link (LinkModel):
                The LinkModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If a LinkModel with the same identifier already exists.
        """
        pass

    @abstractmethod
    def update(self, link: LinkModel, **kwargs) -> 'LinkBaseDAO':
        """Replace a stored LinkModel with a new snapshot.

        Args:
            link (LinkModel):
                The new snapshot. Its `link_id` selects the record to replace.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkDoesNotExistError:
                If no LinkModel with the same identifier is stored.
        """
        pass

    @abstractmethod
    def get(self, link_id: str, **kwargs) -> LinkModel | None:
        """Retrieve a LinkModel by its identifier.

        Args:
            link_id (str):
                The identifier of the LinkModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkModel | None: The LinkModel instance if found, otherwise None.
        """
        pass

    @abstractmethod
    def delete(self, link_id: str, **kwargs) -> 'LinkBaseDAO':
        """Remove a LinkModel by its identifier.

        Args:
            link_id (str):
                The identifier of the LinkModel to be removed.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkDoesNotExistError:
                If no LinkModel with the given identifier is stored.
        """
        pass

    @abstractmethod
    def exists(self, link_id: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def all(self, owner_id: str | None = None, **kwargs) -> Iterator[LinkModel]:
        """Iterate over stored links.

        The iteration runs over a snapshot taken when the method is called, so
        callers may delete links while iterating.

        Args:
            owner_id (str | None):
                If given, only links owned by this user are yielded.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            Iterator[LinkModel]: stored links in insertion order.
        """
        pass
