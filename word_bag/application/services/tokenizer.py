from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List

import regex

# characters stripped from both ends of every whitespace-separated fragment
PUNCTUATION = "!.,?/;:'"

# White_Space only; str.split() would also break on the \x1c-\x1f separators
WHITESPACE_RE = regex.compile(r"\p{White_Space}+")
# Alphabetic = letters plus letter numbers and the vowel signs of Indic scripts
WORD_RE = regex.compile(r"\p{Alphabetic}+")


def split_fragments(text: str) -> List[str]:
    # any run of Unicode whitespace is one separator; no empty fragments
    return [part for part in WHITESPACE_RE.split(text) if part]


def strip_punctuation(fragment: str, punctuation: str = PUNCTUATION) -> str:
    # leading run first, then trailing run; interior characters are kept
    return fragment.lstrip(punctuation).rstrip(punctuation)


def is_word(fragment: str) -> bool:
    """A word is non-empty and made only of Unicode alphabetic characters."""
    return WORD_RE.fullmatch(fragment) is not None


def has_uppercase(word: str) -> bool:
    return any(ch.isupper() for ch in word)


def normalize(word: str) -> str:
    """Lowercase `word` if needed; an all-lowercase word is returned as is."""
    if has_uppercase(word):
        return word.lower()
    return word


@dataclass
class Tokenizer:
    """
    Whitespace tokenizer for the bag of words:
    - Splits on whitespace runs
    - Strips leading/trailing punctuation (PUNCTUATION)
    - Drops fragments with anything but letters left in them
      (so "can't" and "b-banana" are dropped entirely)
    - Lowercases words that contain an uppercase letter

    For example "It ain't over untïl it ain't, over." yields
    "it", "over", "untïl", "it", "over".
    """

    punctuation: str = PUNCTUATION

    def tokenize(self, text: str) -> Iterator[str]:
        """Yield the canonical form of every word in `text`, in order."""
        if not isinstance(text, str):
            raise TypeError(f"Expected text as str, got {type(text).__name__}")

        for fragment in split_fragments(text):
            part = strip_punctuation(fragment, self.punctuation)
            if is_word(part):
                yield normalize(part)

    def words(self, text: str) -> List[str]:
        return list(self.tokenize(text))


def tokenize(text: str) -> Iterator[str]:
    return Tokenizer().tokenize(text)
