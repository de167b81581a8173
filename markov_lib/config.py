from typing import Optional

from pydantic import BaseModel, Field, model_validator

MAX_WORD_COUNT = 50000
MAX_SUCCESSOR_COUNT = MAX_WORD_COUNT // 10
SENTENCE_CAPACITY = 1000


class ChainConfig(BaseModel):
    """Capacities and character sets shared by the tokenizer, table and generator.

    ``max_successors`` defaults to a tenth of ``max_tokens``.
    """

    max_tokens: int = Field(MAX_WORD_COUNT, ge=1)
    max_successors: Optional[int] = Field(None, ge=0)
    sentence_capacity: int = Field(SENTENCE_CAPACITY, ge=3)
    max_attempts: int = Field(10000, ge=1)
    delimiters: str = Field(" \n\r", min_length=1)
    terminators: str = Field(".?!", min_length=1)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_successor_bound(self):
        if self.max_successors is None:
            self.max_successors = self.max_tokens // 10
        elif self.max_successors > self.max_tokens:
            raise ValueError("max_successors cannot exceed max_tokens")
        return self
