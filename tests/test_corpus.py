import pytest

from markov_lib import ChainConfig, load_corpus, tokenize
from markov_lib.data_loader import BOOK, EXCERPT, default_corpus
from markov_lib.model import BigramModel, get_model


class TestBundledCorpus:
    def test_default_prefers_full_book(self):
        expected = BOOK if BOOK.exists() else EXCERPT
        assert default_corpus() == expected
        assert load_corpus() == expected.read_text(encoding="utf-8", errors="replace")

    def test_builds_under_default_capacities(self):
        config = ChainConfig()
        model = get_model(config=config)
        tokens = tokenize(load_corpus())
        assert len(model.registry) == len(set(tokens))
        assert len(model.registry) <= config.max_tokens

    def test_default_model_answers_and_exclaims(self):
        model = get_model(config=ChainConfig(seed=2024))
        assert model.generate_sentence("?").endswith("?")
        assert model.generate_sentence("!").endswith("!")

    @pytest.mark.skipif(not BOOK.exists(), reason="pg84.txt not bundled")
    def test_full_book_vocabulary(self):
        model = BigramModel(BOOK.read_text(encoding="utf-8", errors="replace"))
        assert 7000 < len(model.registry) < ChainConfig().max_tokens
        assert model.has_word("Frankenstein")
