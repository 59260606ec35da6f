import pytest
from smartedit.engine import Engine

@pytest.mark.e2e
def test_seed_vocabulary_end_to_end():
    eng = Engine()
    try:
        eng.build()
        assert eng.suggest("app", 3) == ["appetite", "apple", "application"]
        assert eng.suggest("cat", 3) == ["cat", "catalog", "cater"]
        assert eng.correct("recieve") == "receive"
        assert eng.correct("xyzxyz") == "xyzxyz"
        assert eng.find_all("banana bandana band", "ban") == [0, 7, 15]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_explicit_words_without_seed():
    eng = Engine()
    try:
        eng.build(words=["Gamma", "gamut"], seed=False)
        assert eng.suggest("gam", 5) == ["gamma", "gamut"]
        assert eng.suggest("app", 3) == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_engines_do_not_share_vocabulary():
    a, b = Engine(), Engine()
    try:
        a.build(words=["zephyr"], seed=False)
        b.build(seed=False)
        assert a.suggest("zep", 3) == ["zephyr"]
        assert b.suggest("zep", 3) == []
    finally:
        a.shutdown(); b.shutdown()

@pytest.mark.e2e
def test_session_from_engine_shares_its_index():
    eng = Engine()
    try:
        eng.build(seed=False, words=["receive"])
        s = eng.open_session()
        assert s.on_text_change("please recieve").text == "please receive"
        eng.index.insert("banana")
        assert s.on_text_change("bananna").text == "banana"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_queries_before_build_fail_fast():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.suggest("app")
    with pytest.raises(RuntimeError):
        eng.open_session()
