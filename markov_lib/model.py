import random
from typing import List, Optional

from .config import ChainConfig
from .data_loader import load_corpus
from .generator import SentenceGenerator, make_rng
from .successors import SuccessorTable
from .tokenizer import TokenRegistry, tokenize


class BigramModel:
    """A first-order Markov sentence generator built from a raw text."""

    def __init__(self, text: str, config: Optional[ChainConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or ChainConfig()
        tokens = tokenize(text, self.config.delimiters)
        self.registry = TokenRegistry(self.config.max_tokens)
        self.table = SuccessorTable.build(
            tokens, self.registry, max_successors=self.config.max_successors
        )
        self.generator = SentenceGenerator(
            self.table,
            rng=rng if rng is not None else make_rng(self.config.seed),
            capacity=self.config.sentence_capacity,
            terminators=self.config.terminators,
        )

    def has_word(self, word: str) -> bool:
        """Check whether the given word exists in the vocabulary."""
        return self.table.has_word(word)

    def vocab_sample(self, k: int = 10) -> List[str]:
        """Return up to k tokens from the vocabulary, in first-seen order."""
        return self.registry.itos[:k]

    def successors(self, word: str) -> List[str]:
        return self.table.successor_texts(word)

    def generate_text(self, start_word: Optional[str] = None) -> str:
        """Generate one sentence, optionally from a given start token."""
        return self.generator.generate(start_word)

    def generate_sentence(self, terminator: str) -> str:
        """Generate a sentence that ends with ``terminator``."""
        return self.generator.generate_until(terminator, self.config.max_attempts)


def get_model(corpus_path=None, config: Optional[ChainConfig] = None, rng: Optional[random.Random] = None) -> BigramModel:
    """Build a model from the bundled corpus, or from ``corpus_path`` when given."""
    return BigramModel(load_corpus(corpus_path), config=config, rng=rng)
