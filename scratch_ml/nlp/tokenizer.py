"""
Word tokenizer used by the Bayes classifier.
"""

import regex
from typing import List

MIN_TOKEN_LENGTH = 4

_NON_WORD_RE = regex.compile(r"\W+")


def simple_tokenizer(text: str) -> List[str]:
    """
    Split text into distinct lowercase words.
    
    Non-word characters act as separators, words shorter than
    ``MIN_TOKEN_LENGTH`` are dropped and repeated words are kept once,
    in order of first appearance.
    
    Args:
        text: Raw input text
    
    Returns:
        Ordered list of distinct tokens
    """
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    return list(dict.fromkeys(word for word in words if len(word) >= MIN_TOKEN_LENGTH))
