import logging
from typing import Dict, Iterable, List, Optional

from .config import MAX_SUCCESSOR_COUNT
from .tokenizer import TokenRegistry

logger = logging.getLogger(__name__)


class SuccessorTable:
    """For every token id, the ids observed right after it, in source order.

    A successor appears once per occurrence, so repeated pairs weigh more
    when sampling. Lists stop growing at ``max_successors``.
    """

    def __init__(
        self,
        registry: Optional[TokenRegistry] = None,
        max_successors: int = MAX_SUCCESSOR_COUNT,
    ):
        self.registry = registry if registry is not None else TokenRegistry()
        self.max_successors = max_successors
        self.succs: Dict[int, List[int]] = {}
        self.dropped_pairs = 0

    @classmethod
    def build(
        cls,
        tokens: Iterable[str],
        registry: Optional[TokenRegistry] = None,
        max_successors: int = MAX_SUCCESSOR_COUNT,
    ) -> "SuccessorTable":
        table = cls(registry, max_successors=max_successors)
        prev = None
        pairs = 0
        for token in tokens:
            table.registry.intern(token)
            if prev is not None:
                table.add_pair(prev, token)
                pairs += 1
            prev = token

        logger.info(
            "built successor table: %d tokens, %d pairs, %d dropped",
            len(table.registry),
            pairs,
            table.dropped_pairs,
        )
        return table

    def add_pair(self, before: str, after: str) -> bool:
        """Record ``after`` as a successor of ``before``; False if the list is full."""
        idx = self.registry.intern(before)
        succ_idx = self.registry.intern(after)
        succs = self.succs.setdefault(idx, [])
        if len(succs) >= self.max_successors:
            self.dropped_pairs += 1
            logger.debug("successor list of %r is full, dropping %r", before, after)
            return False
        succs.append(succ_idx)
        return True

    def successors(self, idx: int) -> List[int]:
        return self.succs.get(idx, [])

    def successor_texts(self, token: str) -> List[str]:
        idx = self.registry.lookup(token)
        if idx is None:
            return []
        return self.registry.decode(self.successors(idx))

    def has_word(self, word: str) -> bool:
        return word in self.registry
