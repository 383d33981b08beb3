from linkshortener.models.bounds import Bounds
from linkshortener.models.link_model import LinkModel
from linkshortener.models.user_model import UserModel


__all__ = [
    'Bounds',
    'LinkModel',
    'UserModel',
]
