import logging
import random
import time
from typing import List, Optional

from .config import SENTENCE_CAPACITY
from .errors import EmptyStartSetError, GenerationError, RetryLimitError, UnknownTokenError
from .successors import SuccessorTable

logger = logging.getLogger(__name__)

TERMINATORS = ".?!"


def last_char(text: str) -> str:
    return text[-1] if text else ""


def ends_sentence(token: str, terminators: str = TERMINATORS) -> bool:
    c = last_char(token)
    return c != "" and c in terminators


def make_rng(seed: Optional[int] = None) -> random.Random:
    """A fresh random source; seeded from the clock unless ``seed`` is given."""
    if seed is None:
        seed = time.time_ns()
        logger.debug("seeding rng from clock: %d", seed)
    return random.Random(seed)


class SentenceGenerator:
    """Random walk over a :class:`SuccessorTable`.

    A sentence starts at a capitalised token and grows one successor at a
    time until a token ending in a terminator is appended, the current token
    has no successors, or the next token would push the sentence to
    ``capacity - 1`` characters or more. The result is therefore always
    shorter than ``capacity``, and may end without a terminator.
    """

    def __init__(
        self,
        table: SuccessorTable,
        rng: Optional[random.Random] = None,
        capacity: int = SENTENCE_CAPACITY,
        terminators: str = TERMINATORS,
    ):
        if capacity < 3:
            raise ValueError("capacity must be at least 3")
        self.table = table
        self.rng = rng if rng is not None else make_rng()
        self.capacity = capacity
        self.terminators = terminators
        self._starts: List[int] = []
        self._starts_seen = -1

    def _fits(self, length: int) -> bool:
        return length < self.capacity - 1

    def sentence_starts(self) -> List[int]:
        registry = self.table.registry
        if self._starts_seen != len(registry):
            self._starts = [
                i for i in registry.sentence_starts() if self._fits(len(registry.text(i)))
            ]
            self._starts_seen = len(registry)
        return self._starts

    def _pick_start(self, start: Optional[str]) -> int:
        if start is None:
            starts = self.sentence_starts()
            if not starts:
                raise EmptyStartSetError()
            return self.rng.choice(starts)

        idx = self.table.registry.lookup(start)
        if idx is None:
            raise UnknownTokenError(start)
        if not self._fits(len(start)):
            raise GenerationError(
                f"start token of {len(start)} chars does not fit capacity {self.capacity}"
            )
        return idx

    def generate(self, start: Optional[str] = None) -> str:
        registry = self.table.registry
        current = self._pick_start(start)
        token = registry.text(current)
        words = [token]
        length = len(token)

        while not ends_sentence(token, self.terminators):
            succs = self.table.successors(current)
            if not succs:
                break
            nxt = self.rng.choice(succs)
            token = registry.text(nxt)
            if not self._fits(length + 1 + len(token)):
                break
            words.append(token)
            length += 1 + len(token)
            current = nxt

        return " ".join(words)

    def generate_until(self, terminator: str, max_attempts: int = 10000) -> str:
        """Regenerate until a sentence ends with ``terminator``."""
        for attempt in range(1, max_attempts + 1):
            sentence = self.generate()
            if sentence.endswith(terminator):
                logger.debug("accepted %r sentence after %d attempts", terminator, attempt)
                return sentence
        raise RetryLimitError(terminator, max_attempts)
