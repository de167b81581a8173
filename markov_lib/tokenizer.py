import re
from typing import Dict, Iterator, List, Optional

from .config import MAX_WORD_COUNT
from .errors import TokenLimitError

DEFAULT_DELIMITERS = " \n\r"

_NON_PRINTABLE = re.compile(r"[^\x20-\x7e]")


def replace_non_printable(text: str) -> str:
    """Replace every character outside printable ASCII with a single space."""
    return _NON_PRINTABLE.sub(" ", text)


def tokenize(text: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """Split ``text`` into the non-empty runs of characters between delimiters."""
    if not delimiters:
        raise ValueError("delimiters must not be empty")
    pattern = "[" + re.escape(delimiters) + "]+"
    return [t for t in re.split(pattern, replace_non_printable(text)) if t]


def starts_sentence(token: str) -> bool:
    return "A" <= token[0] <= "Z"


class TokenRegistry:
    """Interned tokens: surface string <-> sequential id.

    Ids are handed out in first-seen order and never reused. Once
    ``max_tokens`` entries exist, interning an unseen string raises
    :class:`TokenLimitError`.
    """

    def __init__(self, max_tokens: int = MAX_WORD_COUNT):
        self.max_tokens = max_tokens
        self.stoi: Dict[str, int] = {}
        self.itos: List[str] = []

    def intern(self, token: str) -> int:
        idx = self.stoi.get(token)
        if idx is not None:
            return idx
        if not token:
            raise ValueError("cannot intern an empty token")
        if len(self.itos) >= self.max_tokens:
            raise TokenLimitError(self.max_tokens)
        idx = len(self.itos)
        self.stoi[token] = idx
        self.itos.append(token)
        return idx

    def lookup(self, token: str) -> Optional[int]:
        return self.stoi.get(token)

    def text(self, idx: int) -> str:
        return self.itos[idx]

    def encode(self, words: List[str]) -> List[int]:
        return [self.intern(w) for w in words]

    def decode(self, ids: List[int]) -> List[str]:
        return [self.itos[i] for i in ids]

    def sentence_starts(self) -> List[int]:
        """Ids of the tokens whose first character is an uppercase letter."""
        return [i for i, w in enumerate(self.itos) if starts_sentence(w)]

    def __len__(self) -> int:
        return len(self.itos)

    def __contains__(self, token) -> bool:
        return token in self.stoi

    def __iter__(self) -> Iterator[str]:
        return iter(self.itos)
