"""Tests for the word tokenizer."""

from scratch_ml.nlp.tokenizer import simple_tokenizer


def test_lowercases_and_strips_punctuation():
    assert simple_tokenizer("Great MOVIE, superb acting!") == ["great", "movie", "superb", "acting"]


def test_short_words_are_dropped():
    assert simple_tokenizer("the cat sat on a mat") == []
    assert simple_tokenizer("film was good") == ["film", "good"]


def test_repeated_words_kept_once_in_first_order():
    assert simple_tokenizer("boring, boring plot. Plot twist: boring") == ["boring", "plot", "twist"]


def test_empty_text():
    assert simple_tokenizer("") == []


def test_apostrophes_split_words():
    assert simple_tokenizer("wouldn't recommend") == ["wouldn", "recommend"]
