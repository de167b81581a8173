class MarkovError(Exception):
    """Base class for every error raised by the sentence generator."""


class TokenLimitError(MarkovError):
    """Raised when a new token would not fit into the token registry."""

    def __init__(self, limit: int):
        super().__init__(f"Token limit reached! ({limit} tokens)")
        self.limit = limit


class GenerationError(MarkovError):
    pass


class EmptyStartSetError(GenerationError):
    def __init__(self):
        super().__init__("no registered token starts with an uppercase letter")


class UnknownTokenError(GenerationError):
    def __init__(self, token: str):
        super().__init__(f"unknown token: {token!r}")
        self.token = token


class RetryLimitError(GenerationError):
    def __init__(self, terminator: str, attempts: int):
        super().__init__(
            f"no sentence ending with {terminator!r} after {attempts} attempts"
        )
        self.terminator = terminator
        self.attempts = attempts
