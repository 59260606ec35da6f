import pytest
from smartedit.trie import WordIndex

VOCAB = ["apple", "application", "appetite", "banana", "band", "banner"]


@pytest.fixture
def idx() -> WordIndex:
    return WordIndex(VOCAB)


def test_suggest_app_is_lexicographic(idx):
    assert idx.suggest("app", 3) == ["appetite", "apple", "application"]


def test_suggest_respects_limit_and_case(idx):
    assert idx.suggest("APP", 1) == ["appetite"]
    assert idx.suggest("ban", 10) == ["banana", "band", "banner"]


def test_unknown_prefix_returns_empty(idx):
    assert idx.suggest("xyz", 3) == []
    assert idx.suggest("bandz", 3) == []


def test_empty_prefix_starts_at_root(idx):
    assert idx.suggest("", 2) == ["appetite", "apple"]


def test_word_before_its_extensions():
    idx = WordIndex(["bandana", "band"])
    assert idx.suggest("band", 5) == ["band", "bandana"]


def test_every_inserted_word_suggests_itself(idx):
    for w in VOCAB:
        assert w in idx.suggest(w, 1)


def test_insert_is_idempotent(idx):
    words, nodes = len(idx), idx.node_count
    idx.insert("apple")
    idx.insert("APPLE")
    assert len(idx) == words
    assert idx.node_count == nodes
    assert idx.suggest("apple", 5) == ["apple"]


def test_insert_lowercases():
    idx = WordIndex()
    idx.insert("Receive")
    assert "receive" in idx
    assert "RECEIVE" in idx
    assert idx.suggest("rec", 3) == ["receive"]


def test_empty_word_is_ignored():
    idx = WordIndex()
    idx.insert("")
    assert len(idx) == 0
    assert idx.suggest("", 5) == []


def test_insert_many_counts_new_words():
    idx = WordIndex()
    assert idx.insert_many(["cat", "cater", "cat"]) == 2
    assert idx.insert_many(["cat"]) == 0


def test_limit_zero_and_invalid_limits(idx):
    assert idx.suggest("app", 0) == []
    with pytest.raises(ValueError):
        idx.suggest("app", -1)
    with pytest.raises(TypeError):
        idx.suggest("app", "3")


def test_non_string_word_rejected():
    with pytest.raises(TypeError):
        WordIndex().insert(42)


def test_vocabulary_is_live_read_only_view(idx):
    view = idx.vocabulary
    assert "banana" in view and len(view) == len(VOCAB)
    idx.insert("cat")
    assert "cat" in view
    assert not hasattr(view, "add")
    assert set(view) == set(VOCAB) | {"cat"}


def test_iter_suggestions_is_single_pass(idx):
    gen = idx.iter_suggestions("ban")
    assert list(gen) == ["banana", "band", "banner"]
    assert list(gen) == []


def test_repeated_queries_are_stable(idx):
    first = idx.suggest("", 6)
    for _ in range(3):
        assert idx.suggest("", 6) == first


def test_bad_prefix_type_fails_even_with_zero_limit(idx):
    with pytest.raises(TypeError):
        idx.suggest(None, 0)
    with pytest.raises(TypeError):
        idx.suggest(None, 1)
