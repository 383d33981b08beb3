"""Link lifecycle engine

The LinkEngine is the only component allowed to create, mutate or delete
links. It enforces the system bounds, counts redirects, and garbage-collects
links that expired or used up their redirect limit.

Every operation that reaches a user-visible outcome appends one message to an
in-memory notification log instead of printing it. Front ends read the log
with `notifications()` and empty it with `clear_notifications()`.

Policies:
    - Requested TTLs and limits are clamped into the configured Bounds.
    - Garbage collection runs before every `create_link()` and never during
      `resolve_link()`, so an unavailable link reports why it is unavailable
      until it is collected.
    - New identifiers are re-drawn when they collide with a stored link.

Example:
    >>> from linkshortener.models import Bounds
    >>> from linkshortener.services import LinkEngine

    >>> engine = LinkEngine(Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=100))
    >>> link_id = engine.create_link('https://example.com', owner_id='user-1', ttl_hours=24, limit=2)
    >>> engine.resolve_link(link_id)
    'https://example.com'
    >>> engine.resolve_link(link_id)
    'https://example.com'
    >>> engine.resolve_link(link_id)
    Traceback (most recent call last):
        ...
    linkshortener.exceptions.LinkLimitExceededError: Link '...' exceeded its limit of 2 redirects.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import NoReturn

from beartype import beartype

from linkshortener.constants import Shortcode
from linkshortener.dao.base import LinkBaseDAO
from linkshortener.dao.memory import LinkMemoryDAO
from linkshortener.exceptions import (
    ForbiddenError,
    InvalidInputError,
    LinkExpiredError,
    LinkLimitExceededError,
    LinkNotFoundError,
    LinkShortenerError,
    ShortcodeGenerationError,
)
from linkshortener.models import Bounds, LinkModel
from linkshortener.utils.helpers import expiry_from, utcnow
from linkshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class LinkEngine:
    """Create, resolve, edit and garbage-collect short links.

    Attributes:
        bounds (Bounds):
            TTL and limit bounds every stored link is clamped into.

    Methods:
        create_link(original_url, owner_id, ttl_hours, limit) -> str
        resolve_link(link_id) -> str
        edit_limit(link_id, new_limit, requester_id) -> None
        edit_expiry(link_id, new_ttl_hours, requester_id) -> None
        delete_link(link_id, requester_id) -> None
        collect_expired(owner_id=None) -> int
        list_links_for_owner(owner_id) -> list[LinkModel]
        get_link(link_id) -> LinkModel
        notifications() -> tuple[str, ...]
        clear_notifications() -> None
    """

    def __init__(
        self,
        bounds: Bounds | None = None,
        link_dao: LinkBaseDAO | None = None,
        shortcode_generator: Callable[[], str] = generate_shortcode,
        max_shortcode_attempts: int = Shortcode.MAX_ATTEMPTS,
    ):
        """Initialize the engine with its own link store

        Args:
            bounds (Bounds | None):
                System bounds. Defaults to Bounds() (1-48 hours, 1-100 redirects).
            link_dao (LinkBaseDAO | None):
                Link store. A fresh LinkMemoryDAO is created when omitted.
            shortcode_generator (Callable[[], str]):
                Produces candidate identifiers. Defaults to generate_shortcode.
            max_shortcode_attempts (int):
                Number of candidates tried before giving up on a colliding generator.
        """
        self.bounds = bounds if bounds is not None else Bounds()
        self._links = link_dao if link_dao is not None else LinkMemoryDAO()
        self._generate_shortcode = shortcode_generator
        self._max_shortcode_attempts = max_shortcode_attempts
        self._notifications: list[str] = []

    # -------------------------------
    # Notification log
    # -------------------------------

    def notifications(self) -> tuple[str, ...]:
        return tuple(self._notifications)

    def clear_notifications(self) -> None:
        self._notifications.clear()

    def _notify(self, message: str) -> None:
        self._notifications.append(message)
        logger.debug('Notification.', extra={'notification': message})

    def _reject(self, error: type[LinkShortenerError], message: str) -> NoReturn:
        self._notify(message)
        raise error(message)

    # -------------------------------
    # Link lifecycle
    # -------------------------------

    @beartype
    def create_link(self, original_url: str | None, owner_id: str | None, ttl_hours: int, limit: int) -> str:
        """Shorten a URL on behalf of a user

        Out-of-range TTL and limit values are clamped without notice. Expired
        and exhausted links are collected before the new link is stored.

        Args:
            original_url (str | None):
                Target URL. Must be non-empty.
            owner_id (str | None):
                Identifier of the creating user. Must be non-empty.
            ttl_hours (int):
                Requested time-to-live in hours.
            limit (int):
                Requested maximum number of redirects.

        Returns:
            str: identifier of the new link.

        Raises:
            InvalidInputError:
                If the URL is empty or the owner is missing.
            ShortcodeGenerationError:
                If no unused identifier could be generated.
        """
        if original_url is None or not original_url.strip():
            raise InvalidInputError('URL must not be empty.')
        if owner_id is None or not owner_id.strip():
            raise InvalidInputError('Owner ID must not be empty.')

        final_ttl = self.bounds.clamp_ttl(ttl_hours)
        final_limit = self.bounds.clamp_limit(limit)

        self.collect_expired()

        link_id = self._new_link_id()
        created_at = utcnow()
        link = LinkModel(
            link_id=link_id,
            original_url=original_url.strip(),
            owner_id=owner_id,
            created_at=created_at,
            expires_at=expiry_from(created_at, final_ttl),
            limit=final_limit,
        )
        self._links.insert(link)

        logger.info(
            'Link created.',
            extra={'linkId': link_id, 'ownerId': owner_id, 'ttlHours': final_ttl, 'limit': final_limit},
        )
        return link_id

    @beartype
    def resolve_link(self, link_id: str) -> str:
        """Follow a short link, counting the redirect against its limit

        Checks run in this order: existence, expiration, limit. The first
        failing check decides the error.

        Args:
            link_id (str):
                Identifier of the link.

        Returns:
            str: the original URL.

        Raises:
            LinkNotFoundError:
                If no link with this identifier exists.
            LinkExpiredError:
                If the link is past its expiration time.
            LinkLimitExceededError:
                If the link's redirect count reached its limit.
        """
        link = self._links.get(link_id)
        if link is None:
            self._reject(LinkNotFoundError, f"Link '{link_id}' not found.")
        if link.is_expired(utcnow()):
            self._reject(LinkExpiredError, f"Link '{link_id}' has expired.")
        if link.is_exhausted():
            self._reject(LinkLimitExceededError, f"Link '{link_id}' exceeded its limit of {link.limit} redirects.")

        resolved = replace(link, count=link.count + 1)
        self._links.update(resolved)

        self._notify(f"Link '{link_id}' redirected to {resolved.original_url} ({resolved.count}/{resolved.limit}).")
        logger.info('Link resolved.', extra={'linkId': link_id, 'count': resolved.count, 'limit': resolved.limit})
        return resolved.original_url

    @beartype
    def edit_limit(self, link_id: str, new_limit: int, requester_id: str | None) -> None:
        """Change a link's redirect limit

        Args:
            link_id (str):
                Identifier of the link.
            new_limit (int):
                Requested limit, clamped into the configured bounds.
            requester_id (str | None):
                User asking for the change; must own the link.

        Raises:
            LinkNotFoundError:
                If no link with this identifier exists.
            ForbiddenError:
                If the requester does not own the link.
        """
        link = self._owned_link(link_id, requester_id)
        final_limit = self.bounds.clamp_limit(new_limit)
        self._advise_if_clamped('limit', new_limit, final_limit, self.bounds.limit_min, self.bounds.limit_max)

        self._links.update(replace(link, limit=final_limit))
        self._notify(f"Limit for link '{link_id}' changed to {final_limit}.")
        logger.info('Link limit edited.', extra={'linkId': link_id, 'limit': final_limit})

    @beartype
    def edit_expiry(self, link_id: str, new_ttl_hours: int, requester_id: str | None) -> None:
        """Change a link's expiration time

        The new TTL counts from the moment of the edit, not from the creation time.

        Args:
            link_id (str):
                Identifier of the link.
            new_ttl_hours (int):
                Requested TTL in hours, clamped into the configured bounds.
            requester_id (str | None):
                User asking for the change; must own the link.

        Raises:
            LinkNotFoundError:
                If no link with this identifier exists.
            ForbiddenError:
                If the requester does not own the link.
        """
        link = self._owned_link(link_id, requester_id)
        final_ttl = self.bounds.clamp_ttl(new_ttl_hours)
        self._advise_if_clamped('TTL', new_ttl_hours, final_ttl, self.bounds.ttl_min, self.bounds.ttl_max)

        expires_at = expiry_from(utcnow(), final_ttl)
        self._links.update(replace(link, expires_at=expires_at))
        self._notify(f"Expiry for link '{link_id}' changed to {final_ttl} hours.")
        logger.info('Link expiry edited.', extra={'linkId': link_id, 'expiresAt': expires_at.isoformat()})

    @beartype
    def delete_link(self, link_id: str, requester_id: str | None) -> None:
        """Delete a link

        Raises:
            InvalidInputError:
                If the requester is missing.
            LinkNotFoundError:
                If no link with this identifier exists.
            ForbiddenError:
                If the requester does not own the link.
        """
        if requester_id is None or not requester_id.strip():
            raise InvalidInputError('Requester ID must not be empty.')

        self._owned_link(link_id, requester_id)
        self._links.delete(link_id)
        self._notify(f"Link '{link_id}' deleted.")
        logger.info('Link deleted.', extra={'linkId': link_id, 'ownerId': requester_id})

    @beartype
    def collect_expired(self, owner_id: str | None = None) -> int:
        """Remove every link that expired or reached its redirect limit

        Args:
            owner_id (str | None):
                If given, only this user's links are considered.

        Returns:
            int: number of removed links.
        """
        removed = 0
        for link in self._links.all(owner_id=owner_id):
            if link.is_expired(utcnow()):
                reason = 'expired'
            elif link.is_exhausted():
                reason = 'limit reached'
            else:
                continue

            self._links.delete(link.link_id)
            self._notify(f"Link '{link.link_id}' removed: {reason}.")
            removed += 1

        if removed:
            logger.info('Collected unavailable links.', extra={'removed': removed, 'ownerId': owner_id})
        return removed

    # -------------------------------
    # Read side
    # -------------------------------

    @beartype
    def list_links_for_owner(self, owner_id: str) -> list[LinkModel]:
        return sorted(self._links.all(owner_id=owner_id), key=lambda link: link.created_at)

    @beartype
    def get_link(self, link_id: str) -> LinkModel:
        """Return a snapshot of a link without counting a redirect

        Raises:
            LinkNotFoundError:
                If no link with this identifier exists.
        """
        link = self._links.get(link_id)
        if link is None:
            raise LinkNotFoundError(f"Link '{link_id}' not found.")
        return link

    # -------------------------------
    # Internals
    # -------------------------------

    def _owned_link(self, link_id: str, requester_id: str | None) -> LinkModel:
        link = self._links.get(link_id)
        if link is None:
            self._reject(LinkNotFoundError, f"Link '{link_id}' not found.")
        if requester_id != link.owner_id:
            self._reject(ForbiddenError, f"User '{requester_id}' is not allowed to modify link '{link_id}'.")
        return link

    def _advise_if_clamped(self, field: str, requested: int, final: int, lower: int, upper: int) -> None:
        if final != requested:
            self._notify(f'Requested {field} {requested} adjusted to {final} (allowed range {lower}-{upper}).')

    def _new_link_id(self) -> str:
        for _ in range(self._max_shortcode_attempts):
            candidate = self._generate_shortcode()
            if not self._links.exists(candidate):
                return candidate
            logger.warning('Shortcode collision, retrying.', extra={'linkId': candidate})

        raise ShortcodeGenerationError(f'Could not generate an unused link ID after {self._max_shortcode_attempts} attempts.')
