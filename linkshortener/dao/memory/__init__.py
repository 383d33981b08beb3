from linkshortener.dao.memory.link_memory_dao import LinkMemoryDAO
from linkshortener.dao.memory.user_memory_dao import UserMemoryDAO


__all__ = [
    'LinkMemoryDAO',
    'UserMemoryDAO',
]
