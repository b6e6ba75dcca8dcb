"""Member directory and board lookup adapters."""

from push.directory.fake_adapter import InMemoryBoardLookup, InMemoryUserDirectory
from push.directory.port import BoardLookup, BoardRecord, ReplyRecord, UserDirectory, UserRecord

__all__ = [
    "BoardLookup",
    "BoardRecord",
    "InMemoryBoardLookup",
    "InMemoryUserDirectory",
    "ReplyRecord",
    "UserDirectory",
    "UserRecord",
]
