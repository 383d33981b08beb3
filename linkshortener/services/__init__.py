from linkshortener.services.link_engine import LinkEngine
from linkshortener.services.user_registry import UserRegistry


__all__ = [
    'LinkEngine',
    'UserRegistry',
]
