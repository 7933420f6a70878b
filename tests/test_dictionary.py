import pytest
from boggle.dictionary import PrefixDictionary, load_dictionary


def _make_dictionary(words: list[str]) -> PrefixDictionary:
    dictionary = PrefixDictionary()
    for w in words:
        dictionary.insert(w.upper())
    return dictionary


def test_contains_exact_words_only():
    d = _make_dictionary(["CAT", "CATS", "ACT"])
    assert d.contains("CAT")
    assert d.contains("CATS")
    assert d.contains("ACT")
    assert not d.contains("CA")
    assert not d.contains("CATSS")
    assert not d.contains("DOG")


def test_contains_prefix():
    d = _make_dictionary(["CAT", "CATS", "ACT"])
    assert d.contains_prefix("C")
    assert d.contains_prefix("CA")
    assert d.contains_prefix("CAT")
    assert d.contains_prefix("CATS")
    assert not d.contains_prefix("CATSS")
    assert not d.contains_prefix("T")


def test_every_word_is_its_own_prefix():
    words = ["A", "AB", "ABC", "BOGGLE", "BOG", "ZEBRA"]
    d = _make_dictionary(words)
    for w in words:
        assert d.contains(w)
        assert d.contains_prefix(w)


def test_empty_prefix():
    assert _make_dictionary(["CAT"]).contains_prefix("")
    assert not PrefixDictionary().contains_prefix("")


def test_empty_dictionary_rejects_everything():
    d = PrefixDictionary()
    assert len(d) == 0
    for s in ["A", "CAT", "Z", "QUEUE"]:
        assert not d.contains(s)
        assert not d.contains_prefix(s)


def test_insert_is_idempotent():
    d = _make_dictionary(["CAT", "CAT", "CATS"])
    assert len(d) == 2
    d.insert("CAT")
    assert len(d) == 2
    assert d.contains("CAT")


def test_prefix_of_stored_word_is_not_counted():
    d = _make_dictionary(["CATS"])
    d.insert("CAT")
    assert len(d) == 2


def test_insert_empty_word_raises():
    with pytest.raises(ValueError):
        PrefixDictionary().insert("")


def test_no_case_folding():
    d = _make_dictionary(["CAT"])
    assert not d.contains("cat")
    assert not d.contains_prefix("ca")


def test_characters_outside_alphabet():
    d = _make_dictionary(["CAT"])
    assert not d.contains("C4T")
    assert not d.contains_prefix("C-")
    assert not d.contains("CAT ")


def test_dunder_contains_and_from_words():
    d = PrefixDictionary.from_words(["BONE", "BONES"])
    assert "BONE" in d
    assert "BON" not in d
    assert len(d) == 2


def test_load_dictionary(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("cat\nCats\n  act  \n\ndon't\nx-ray\ncafé\ncat\n", encoding="utf-8")
    d = load_dictionary(str(dict_file))
    assert len(d) == 3
    assert d.contains("CAT")
    assert d.contains("CATS")
    assert d.contains("ACT")
    assert not d.contains_prefix("DON'")
    assert not d.contains_prefix("X-")
    assert not d.contains_prefix("CAF")


def test_load_dictionary_min_length(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("a\nat\ncat\ncats\n")
    d = load_dictionary(str(dict_file), min_length=3)
    assert len(d) == 2
    assert not d.contains("AT")
    assert d.contains_prefix("AT") is False
    assert d.contains("CATS")


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(str(tmp_path / "missing.txt"))


def test_find_node_from_start():
    d = _make_dictionary(["CAT", "CATS"])
    ca = d.find_node("CA")
    assert ca is not None and not ca.is_word
    cat = d.find_node("T", ca)
    assert cat is d.find_node("CAT")
    assert cat.is_word
    assert d.find_node("X", ca) is None
    assert d.find_node("") is d.root
