from .config import ChainConfig
from .data_loader import load_corpus
from .errors import (
    EmptyStartSetError,
    GenerationError,
    MarkovError,
    RetryLimitError,
    TokenLimitError,
    UnknownTokenError,
)
from .generator import SentenceGenerator, ends_sentence, last_char, make_rng
from .model import BigramModel, get_model
from .successors import SuccessorTable
from .tokenizer import TokenRegistry, replace_non_printable, tokenize

__version__ = "0.1.0"

__all__ = [
    "ChainConfig",
    "load_corpus",
    "MarkovError", "TokenLimitError", "GenerationError",
    "EmptyStartSetError", "RetryLimitError", "UnknownTokenError",
    "SentenceGenerator", "ends_sentence", "last_char", "make_rng",
    "BigramModel", "get_model",
    "SuccessorTable",
    "TokenRegistry", "replace_non_printable", "tokenize",
]
