import random

import pytest

from markov_lib import SentenceGenerator, SuccessorTable, TokenRegistry, load_corpus, tokenize

EXAMPLE_TEXT = "Victor said hello. Did she answer?"


@pytest.fixture
def rng():
    """Fixed-seed random source so walks are reproducible."""
    return random.Random(1234)


@pytest.fixture
def example_table():
    return SuccessorTable.build(tokenize(EXAMPLE_TEXT))


@pytest.fixture(scope="session")
def corpus_tokens():
    return tokenize(load_corpus())


@pytest.fixture
def corpus_table(corpus_tokens):
    return SuccessorTable.build(corpus_tokens, TokenRegistry())


@pytest.fixture
def corpus_generator(corpus_table, rng):
    return SentenceGenerator(corpus_table, rng=rng)
