from pathlib import Path
from typing import Optional, Union

DATA_DIR = Path(__file__).resolve().parent / "data"
BOOK = DATA_DIR / "pg84.txt"
EXCERPT = DATA_DIR / "frankenstein.txt"


def default_corpus() -> Path:
    """The Project Gutenberg #84 text when bundled, otherwise the excerpt."""
    return BOOK if BOOK.exists() else EXCERPT


def load_corpus(path: Optional[Union[str, Path]] = None) -> str:
    """
    Read the source text. Defaults to :func:`default_corpus`.
    Undecodable bytes are kept as replacement characters so the tokenizer
    turns them into spaces like any other non-printable character.
    """
    path = Path(path) if path is not None else default_corpus()
    return path.read_text(encoding="utf-8", errors="replace")
