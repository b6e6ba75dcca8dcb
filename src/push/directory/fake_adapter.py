"""In-memory member directory and board lookup for development and testing."""

from push.directory.port import BoardLookup, BoardRecord, ReplyRecord, UserDirectory, UserRecord


class InMemoryUserDirectory(UserDirectory):
    """Member directory backed by a dict, seeded by tests or fixtures."""

    def __init__(self, users: list[UserRecord] | None = None) -> None:
        self.users: dict[str, UserRecord] = {}
        for user in users or []:
            self.add(user)

    def add(self, user: UserRecord) -> UserRecord:
        self.users[str(user.user_id)] = user
        return user

    def find_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(str(user_id))

    def reset(self) -> None:
        self.users.clear()


class InMemoryBoardLookup(BoardLookup):
    """Board lookup backed by dicts, seeded by tests or fixtures."""

    def __init__(self) -> None:
        self.boards: dict[str, BoardRecord] = {}
        self.replies: dict[str, ReplyRecord] = {}

    def add_board(self, board: BoardRecord) -> BoardRecord:
        self.boards[str(board.board_id)] = board
        return board

    def add_reply(self, reply: ReplyRecord) -> ReplyRecord:
        self.replies[str(reply.reply_id)] = reply
        return reply

    def find_board(self, board_id: str) -> BoardRecord | None:
        return self.boards.get(str(board_id))

    def find_reply(self, reply_id: str) -> ReplyRecord | None:
        return self.replies.get(str(reply_id))

    def reset(self) -> None:
        self.boards.clear()
        self.replies.clear()
