import pytest

from skim_cli.segmenter import Sentence, is_valid_sentence, segment, split_sentences


def test_split_keeps_trailing_fragment():
    parts = split_sentences("One sentence here. Another one! And a trailing fragment")
    assert parts == ["One sentence here.", "Another one!", "And a trailing fragment"]


def test_split_groups_repeated_terminators_and_quote():
    assert split_sentences('Really?! Yes indeed."') == ["Really?!", 'Yes indeed."']


def test_split_empty():
    assert split_sentences("") == []


@pytest.mark.parametrize("sentence", [
    "Too short.",
    "Three lengthy wordsssss",          # 3 words
    "a b c d e",                        # under 20 characters
    "import numpy as np and friends here",
    "def compute the value of something here",
    "the result x = compute for all values",
    "a dict literal {key value} appears here",
    "^ footnote style sentence that is long enough",
    "http links make for very poor sentences anyway",
    "12. numbered list items are references mostly",
    "Please Click Here to continue reading this story",
    "Continue to the next page for the rest of it",
])
def test_rejects_low_value_sentences(sentence):
    assert not is_valid_sentence(sentence)


def test_accepts_regular_prose():
    assert is_valid_sentence("Urban cats adapt quickly to busy city streets.")


def test_segment_numbers_survivors_only():
    text = "Short one. The first real sentence is right here. Click here now please okay. The second real sentence follows after it."
    sents = segment(text)
    assert sents == [
        Sentence(0, "The first real sentence is right here."),
        Sentence(1, "The second real sentence follows after it."),
    ]


def test_sentence_properties():
    s = Sentence(0, "Cats and dogs live together happily.")
    assert s.tokens == ["cats", "and", "dogs", "live", "together", "happily"]
    assert s.token_count == 6
    assert s.length == len("Cats and dogs live together happily.")
