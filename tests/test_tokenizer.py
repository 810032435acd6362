import pytest

from word_bag.application.services.tokenizer import (
    PUNCTUATION,
    Tokenizer,
    has_uppercase,
    is_word,
    normalize,
    split_fragments,
    strip_punctuation,
    tokenize,
)


def test_split_fragments_collapses_whitespace_runs():
    assert split_fragments("  one\t two\n\nthree　four  ") == ["one", "two", "three", "four"]


def test_split_fragments_keeps_non_whitespace_separators():
    # information separators are not White_Space
    assert split_fragments("a\x1fb c\x1cd") == ["a\x1fb", "c\x1cd"]
    assert split_fragments("\x85one two three") == ["one", "two", "three"]


def test_split_fragments_of_blank_text_is_empty():
    assert split_fragments("") == []
    assert split_fragments(" \t\n ") == []


@pytest.mark.parametrize(
    "fragment, expected",
    [
        ("stop!", "stop"),
        ("'quoted'", "quoted"),
        ("?!.,/;:'word'.:;/,.!?", "word"),
        ("can't", "can't"),
        ("b-banana", "b-banana"),
        ("...", ""),
        ("'.hello", "hello"),
    ],
)
def test_strip_punctuation_only_touches_the_ends(fragment, expected):
    assert strip_punctuation(fragment) == expected


def test_strip_punctuation_leaves_other_symbols():
    assert strip_punctuation("(word)") == "(word)"
    assert strip_punctuation("-word-") == "-word-"


def test_punctuation_set():
    assert set(PUNCTUATION) == set("!.,?/;:'")


@pytest.mark.parametrize("fragment", ["word", "Word", "untïl", "straße", "слово", "ÉCOLE", "हिंदी", "ไทย"])
def test_is_word_accepts_letters(fragment):
    assert is_word(fragment)


@pytest.mark.parametrize("fragment", ["", "can't", "b-banana", "abc123", "42", "e\u0301", "a_b"])
def test_is_word_rejects_anything_else(fragment):
    assert not is_word(fragment)


def test_has_uppercase():
    assert has_uppercase("Test")
    assert has_uppercase("tEST")
    assert not has_uppercase("test")
    assert not has_uppercase("untïl")


def test_normalize_lowercases_only_when_needed():
    word = "already"
    assert normalize(word) is word
    assert normalize("TeSt") == "test"
    assert normalize("ÜBER") == "über"


def test_tokenize_example_text():
    text = "It ain't over untïl it ain't, over."
    assert list(tokenize(text)) == ["it", "over", "untïl", "it", "over"]


def test_tokenize_drops_fragments_with_interior_punctuation():
    assert list(tokenize("Can't stop this! Stop!")) == ["stop", "this", "stop"]
    assert list(tokenize("b b b-banana b")) == ["b", "b", "b"]


def test_tokenize_punctuation_only_text_yields_nothing():
    assert list(tokenize("!!! ... ,,, ' ; : / ?")) == []


def test_tokenizer_words_returns_list():
    assert Tokenizer().words("Next. two? words,") == ["next", "two", "words"]


def test_tokenizer_rejects_non_text():
    with pytest.raises(TypeError, match="bytes"):
        Tokenizer().words(b"bytes are not text")
