"""Error types raised outside the resolver's non-raising core."""


class UnresolvedTokenError(Exception):
    """Raised by strict resolution when no rule matches a token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"No utility rule matches {token!r}")


class GroupSyntaxError(Exception):
    """Raised when a variant group in class text cannot be parsed."""

    def __init__(self, message: str, column: int | None = None):
        self.column = column
        super().__init__(message)
