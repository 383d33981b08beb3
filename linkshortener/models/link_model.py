from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LinkModel:
    """Represent a shortened URL with its expiry and redirect limit.

    Instances are immutable snapshots. The LinkEngine changes a link by storing
    a modified copy (see `dataclasses.replace`), never by mutating a record a
    caller may hold.

    Attributes:
        link_id (str):
            Short opaque identifier, unique across the link store.
        original_url (str):
            The long URL the short identifier redirects to.
        owner_id (str):
            Identifier of the user who created the link.
        created_at (datetime):
            Creation time (UTC).
        expires_at (datetime):
            Absolute expiration time (UTC), always later than `created_at`.
        limit (int):
            Maximum number of permitted redirects.
        count (int):
            Number of redirects performed so far.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> link = LinkModel(
        ...     link_id='aB3dE6gH',
        ...     original_url='https://example.com/article/123',
        ...     owner_id='5f0c8a52-0b7e-4c8e-9f0e-1d2c3b4a5f6e',
        ...     created_at=now,
        ...     expires_at=now + timedelta(hours=24),
        ...     limit=10,
        ... )
        >>> link.count
        0
        >>> link.is_available(now)
        True
    """

    link_id: str
    original_url: str
    owner_id: str
    created_at: datetime
    expires_at: datetime
    limit: int
    count: int = 0

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def is_exhausted(self) -> bool:
        return self.count >= self.limit

    def is_available(self, now: datetime) -> bool:
        return not self.is_expired(now) and not self.is_exhausted()

    @property
    def remaining(self) -> int:
        """Redirects left before the limit is reached."""
        return max(self.limit - self.count, 0)
