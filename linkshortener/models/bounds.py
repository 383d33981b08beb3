from dataclasses import dataclass

from linkshortener.constants import DefaultBounds
from linkshortener.exceptions import BadConfigurationError


@dataclass(frozen=True)
class Bounds:
    """System bounds for link TTL (hours) and redirect limits.

    Values requested by users are clamped into these ranges: anything below a
    minimum is raised to it, anything above a maximum is lowered to it.

    Raises:
        BadConfigurationError:
            If a bound is not an integer, is below 1, a minimum exceeds its maximum,
            or ttl_max exceeds DefaultBounds.TTL_CEILING.

    Example:
        >>> bounds = Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=100)
        >>> bounds.clamp_ttl(72)
        48
        >>> bounds.clamp_limit(0)
        1
    """

    ttl_min: int = DefaultBounds.TTL_MIN
    ttl_max: int = DefaultBounds.TTL_MAX
    limit_min: int = DefaultBounds.LIMIT_MIN
    limit_max: int = DefaultBounds.LIMIT_MAX

    def __post_init__(self) -> None:
        for name in ('ttl_min', 'ttl_max', 'limit_min', 'limit_max'):
            value = getattr(self, name)
            # bool is an int subclass, but True/False are never meaningful bounds
            if not isinstance(value, int) or isinstance(value, bool):
                raise BadConfigurationError(f'Bound {name} must be an integer (given value: {value!r}).')
            if value < 1:
                raise BadConfigurationError(f'Bound {name} must be at least 1 (given value: {value}).')
        if self.ttl_min > self.ttl_max:
            raise BadConfigurationError(f'ttl_min ({self.ttl_min}) must not exceed ttl_max ({self.ttl_max}).')
        if self.limit_min > self.limit_max:
            raise BadConfigurationError(f'limit_min ({self.limit_min}) must not exceed limit_max ({self.limit_max}).')
        if self.ttl_max > DefaultBounds.TTL_CEILING:
            raise BadConfigurationError(f'ttl_max ({self.ttl_max}) must not exceed {DefaultBounds.TTL_CEILING} hours.')

    def clamp_ttl(self, hours: int) -> int:
        return min(self.ttl_max, max(self.ttl_min, hours))

    def clamp_limit(self, limit: int) -> int:
        return min(self.limit_max, max(self.limit_min, limit))
