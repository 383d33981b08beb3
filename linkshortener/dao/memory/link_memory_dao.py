"""Data Access Object (DAO) implementation for managing links in process memory

This module provides a dict-backed implementation of LinkBaseDAO. Data lives
only as long as the DAO instance; nothing is persisted across restarts.

Responsibilities:
    - Insert, replace, retrieve and delete LinkModel snapshots by identifier;
    - Enumerate links, optionally per owner, over a stable snapshot;
    - Raise appropriate DAO exceptions for duplicate or missing identifiers.

Classes:
    LinkMemoryDAO:
        DAO for storing and retrieving LinkModel in a Python dictionary.

Example:
    >>> from linkshortener.dao.memory import LinkMemoryDAO

    >>> dao = LinkMemoryDAO()
    >>> dao.insert(link)
    <LinkMemoryDAO>

    >>> dao.get(link.link_id) == link
    True

    >>> dao.delete(link.link_id).exists(link.link_id)
    False
"""

import logging
from collections.abc import Iterator

from beartype import beartype

from linkshortener.models import LinkModel
from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.exceptions import LinkAlreadyExistsError, LinkDoesNotExistError


logger = logging.getLogger(__name__)


class LinkMemoryDAO(LinkBaseDAO):
    """In-memory Data Access Object (DAO) for link records

    Records are kept as frozen LinkModel instances keyed by `link_id`. Because
    the records are immutable, handing them out never exposes mutable store state.

    Attributes:
        _links (dict[str, LinkModel]):
            Stored links in insertion order.

    Example:
        >>> dao = LinkMemoryDAO()
        >>> dao.insert(link).get(link.link_id).original_url
        'https://example.com'
        >>> [l.link_id for l in dao.all(owner_id=link.owner_id)]
        ['aB3dE6gH']
    """

    def __init__(self):
        self._links: dict[str, LinkModel] = {}

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, link: LinkModel, **kwargs) -> 'LinkMemoryDAO':
        """Insert a link

        Args:
            link (LinkModel):
                LinkModel instance to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinkMemoryDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If a link with the same identifier already exists.
        """
        if link.link_id in self._links:
            raise LinkAlreadyExistsError(f"Link with id '{link.link_id}' already exists.")

        self._links[link.link_id] = link
        logger.debug('Inserted link.', extra={'linkId': link.link_id, 'ownerId': link.owner_id})
        return self

    @beartype
    def update(self, link: LinkModel, **kwargs) -> 'LinkMemoryDAO':
        """Replace a stored link with a new snapshot

        Args:
            link (LinkModel):
                New snapshot; its `link_id` selects the record to replace.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinkMemoryDAO: self (for method chaining)

        Raises:
            LinkDoesNotExistError:
                If no link with the same identifier is stored.
        """
        if link.link_id not in self._links:
            raise LinkDoesNotExistError(f"Link with id '{link.link_id}' does not exist.")

        self._links[link.link_id] = link
        return self

    @beartype
    def get(self, link_id: str, **kwargs) -> LinkModel | None:
        return self._links.get(link_id)

    @beartype
    def delete(self, link_id: str, **kwargs) -> 'LinkMemoryDAO':
        """Remove a link

        Args:
            link_id (str):
                Identifier of the link to remove.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinkMemoryDAO: self (for method chaining)

        Raises:
            LinkDoesNotExistError:
                If no link with the given identifier is stored.
        """
        try:
            del self._links[link_id]
        except KeyError as e:
            raise LinkDoesNotExistError(f"Link with id '{link_id}' does not exist.") from e

        logger.debug('Deleted link.', extra={'linkId': link_id})
        return self

    @beartype
    def exists(self, link_id: str, **kwargs) -> bool:
        return link_id in self._links

    @beartype
    def all(self, owner_id: str | None = None, **kwargs) -> Iterator[LinkModel]:
        # NOTE: materialize first so callers can delete while iterating
        links = [link for link in self._links.values() if owner_id is None or link.owner_id == owner_id]
        return iter(links)
