import pytest

from markov_lib import SuccessorTable, TokenLimitError, TokenRegistry, tokenize


class TestSuccessorTable:
    def test_example_scenario(self, example_table):
        assert example_table.successor_texts("Victor") == ["said"]
        assert example_table.successor_texts("said") == ["hello."]
        assert example_table.successor_texts("hello.") == ["Did"]
        assert example_table.successor_texts("Did") == ["she"]
        assert example_table.successor_texts("she") == ["answer?"]
        assert example_table.successor_texts("answer?") == []

    def test_repeated_pairs_keep_every_occurrence(self):
        table = SuccessorTable.build(tokenize("a b a b a c"))
        assert table.successor_texts("a") == ["b", "b", "c"]
        assert table.successor_texts("b") == ["a", "a"]

    def test_single_token_is_registered(self):
        table = SuccessorTable.build(["Alone"])
        assert table.has_word("Alone")
        assert table.successor_texts("Alone") == []

    def test_unknown_token_has_no_successors(self, example_table):
        assert example_table.successor_texts("nobody") == []
        assert example_table.successors(999) == []

    def test_full_successor_list_drops_pairs(self):
        table = SuccessorTable.build(tokenize("a b a c a d a e"), max_successors=2)
        assert table.successor_texts("a") == ["b", "c"]
        assert table.dropped_pairs == 2
        # dropped successors are still registered
        assert table.has_word("e")

    def test_add_pair_reports_overflow(self):
        table = SuccessorTable(max_successors=1)
        assert table.add_pair("x", "y") is True
        assert table.add_pair("x", "z") is False
        assert table.successor_texts("x") == ["y"]

    def test_registry_overflow_propagates(self):
        with pytest.raises(TokenLimitError):
            SuccessorTable.build(tokenize("one two three"), TokenRegistry(max_tokens=2))

    def test_successor_fidelity_over_corpus(self, corpus_tokens, corpus_table):
        for before, after in zip(corpus_tokens, corpus_tokens[1:]):
            assert after in corpus_table.successor_texts(before)

    def test_building_twice_is_identical(self, corpus_tokens):
        first = SuccessorTable.build(corpus_tokens)
        second = SuccessorTable.build(corpus_tokens)
        assert list(first.registry) == list(second.registry)
        assert first.succs == second.succs
