"""
Big Bag Of Words.

Reduces a text to a collection of words, each with a count of its
occurrences. Words are separated by whitespace and consist of one or more
Unicode letters with no interior punctuation; leading and trailing
punctuation is removed. Words containing uppercase letters are stored as
their lowercase equivalent.

    >>> bag = BagOfWords().extend_from_text("It ain't over untïl it ain't, over.")
    >>> list(bag.words())
    ['it', 'over', 'untïl']
    >>> bag.match_count("over")
    2
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping

from word_bag.application.services.tokenizer import Tokenizer


class BagOfWords:
    """In-memory multiset of words. Not thread-safe; callers share it at their own risk."""

    def __init__(self, tokenizer: Tokenizer | None = None):
        self.tokenizer = tokenizer or Tokenizer()
        # word -> occurrences (always >= 1)
        self._counts: Dict[str, int] = {}

    @classmethod
    def from_texts(cls, *texts: str) -> "BagOfWords":
        return cls().extend_from_texts(texts)

    # ---------------- ingestion ----------------

    def extend_from_text(self, text: str) -> "BagOfWords":
        """
        Parse `text` and add the words found in it to this bag.

        Returns the bag itself, so calls can be chained to build up
        a bag covering multiple texts:

            bag = BagOfWords().extend_from_text(a).extend_from_text(b)
        """
        counts = self._counts
        for word in self.tokenizer.tokenize(text):
            counts[word] = counts.get(word, 0) + 1
        return self

    def extend_from_texts(self, texts: Iterable[str]) -> "BagOfWords":
        for text in texts:
            self.extend_from_text(text)
        return self

    # ---------------- queries ----------------

    @property
    def counts(self) -> Mapping[str, int]:
        # read-only view; only extend_from_text mutates the bag
        return MappingProxyType(self._counts)

    def match_count(self, keyword: str) -> int:
        """
        Report the number of occurrences of `keyword` in this bag.

        The keyword should be lowercase and free of punctuation, as stored
        words are; otherwise it will not match and 0 is returned.
        """
        return self._counts.get(keyword, 0)

    def words(self) -> Iterator[str]:
        """Distinct words in ascending order. Each call starts a fresh pass."""
        return iter(sorted(self._counts))

    def count(self) -> int:
        """Total number of words; repeated occurrences count separately."""
        return sum(self._counts.values())

    def is_empty(self) -> bool:
        return not self._counts

    def copy(self) -> "BagOfWords":
        other = type(self)(tokenizer=self.tokenizer)
        other._counts = dict(self._counts)
        return other

    # ---------------- python protocol ----------------

    def __len__(self) -> int:
        # distinct words, not occurrences
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BagOfWords):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        items = ", ".join(f"{w!r}: {self._counts[w]}" for w in self.words())
        return f"BagOfWords({{{items}}})"
