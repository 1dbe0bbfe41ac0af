"""Word list used to reject invalid words."""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger("lettergrid")


def normalize(word: str) -> str:
    return word.strip().lower()


class Dictionary(BaseModel):
    """
    Set of valid words.

    Words are stored lowercase; lookups are case-insensitive exact matches.
    """

    model_config = ConfigDict(frozen=True)

    words: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        """Build a dictionary, skipping blank entries and anything non-alphabetic."""
        cleaned = {normalize(w) for w in words}
        return cls(words=frozenset(w for w in cleaned if w and w.isalpha()))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dictionary":
        """
        Load a word list with one word per line.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {path}")

        with open(path, encoding="utf-8") as f:
            dictionary = cls.from_words(f)

        if dictionary.words:
            log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        else:
            log.warning("No words found in dictionary file %s", path)
        return dictionary

    def check(self, word: str) -> bool:
        """Returns True if `word` is in the dictionary."""
        return normalize(word) in self.words

    def invalid_words(self, words: Iterable[str]) -> List[str]:
        """Every word not in the dictionary, in the order given."""
        return [w for w in words if not self.check(w)]

    def __contains__(self, word: str) -> bool:
        return self.check(word)

    def __len__(self) -> int:
        return len(self.words)
