"""Member directory and board lookup ports (abstract interfaces).

The Push domain does not own members or boards. It asks these ports for
the few attributes it needs at dispatch time: a member's delivery address
and display name, and a board's or reply's writer, category and text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """A member as seen by the Push domain."""

    user_id: str
    email: str  # delivery address for the member's live sessions
    name: str


@dataclass(frozen=True)
class BoardRecord:
    """A board as seen by the Push domain."""

    board_id: str
    writer_id: str
    category: str  # raw value from the Boards domain, validated at resolve time
    title: str = ""
    content: str = ""


@dataclass(frozen=True)
class ReplyRecord:
    """A reply as seen by the Push domain."""

    reply_id: str
    board_id: str
    writer_id: str
    content: str = ""


class UserDirectory(ABC):
    """Abstract member directory."""

    @abstractmethod
    def find_user(self, user_id: str) -> UserRecord | None:
        """Return the member, or None when the id is unknown."""
        ...


class BoardLookup(ABC):
    """Abstract board and reply lookup."""

    @abstractmethod
    def find_board(self, board_id: str) -> BoardRecord | None:
        """Return the board, or None when the id is unknown."""
        ...

    @abstractmethod
    def find_reply(self, reply_id: str) -> ReplyRecord | None:
        """Return the reply, or None when the id is unknown."""
        ...
