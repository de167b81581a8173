import logging
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from markov_lib import (
    ChainConfig,
    GenerationError,
    SentenceGenerator,
    get_model,
    make_rng,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="frankenstein-markov", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

config = ChainConfig()
bigram_model = get_model(config=config)


class TextGenerationRequest(BaseModel):
    terminator: Optional[Literal[".", "?", "!"]] = None
    start_word: Optional[str] = Field(None, min_length=1)
    seed: Optional[int] = None


class GenerationResponse(BaseModel):
    generated_text: str


class VocabResponse(BaseModel):
    size: int
    tokens: List[str]


class SuccessorsResponse(BaseModel):
    token: str
    successors: List[str]


def _generator_for(request: TextGenerationRequest) -> SentenceGenerator:
    # sync endpoints run in a threadpool; each request walks with its own rng
    return SentenceGenerator(
        bigram_model.table,
        rng=make_rng(request.seed),
        capacity=config.sentence_capacity,
        terminators=config.terminators,
    )


@app.get("/health")
def health():
    return {"status": "ok", "vocab_size": len(bigram_model.registry)}


@app.get("/", include_in_schema=False)
def root_redirect():
    return RedirectResponse("/docs")


@app.post("/generate", response_model=GenerationResponse)
def generate_text(request: TextGenerationRequest):
    if request.terminator is not None and request.start_word is not None:
        raise HTTPException(status_code=422, detail="use either terminator or start_word, not both")

    generator = _generator_for(request)
    try:
        if request.terminator is not None:
            text = generator.generate_until(request.terminator, config.max_attempts)
        else:
            text = generator.generate(request.start_word)
    except GenerationError as e:
        logger.warning("generation failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"generated_text": text}


@app.get("/vocab_sample", response_model=VocabResponse)
def vocab_sample(k: int = Query(10, ge=1, le=1000)):
    return {"size": len(bigram_model.registry), "tokens": bigram_model.vocab_sample(k)}


@app.get("/successors", response_model=SuccessorsResponse)
def successors(token: str = Query(..., min_length=1)):
    if not bigram_model.has_word(token):
        raise HTTPException(status_code=404, detail=f"unknown token: {token}")
    return {"token": token, "successors": bigram_model.successors(token)}
