from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple


SessionStatus = Literal["not_started", "in_round"]


@dataclass(frozen=True)
class RoundState:
    """
    One round: the root word and the words accepted against it so far.

    Notes
    -----
    - `used_words` is a tuple, newest first. Accepting a word builds a new
      state with the word in front, so a reference handed to the page never
      changes under it.
    - Nothing here re-checks `used_words` against the root word or the
      dictionary. Only `GameSession` adds words, and only after `validate`
      has accepted them.
    """

    root_word: str
    used_words: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        - `root_word` is stripped, lowercased and must be non-empty letters.
        - `used_words` is coerced to a tuple of lowercase strings.
        """
        rw = (self.root_word or "").strip().lower()
        if not rw.isalpha():
            raise ValueError("`root_word` must be non-empty and contain letters only (a–z).")
        object.__setattr__(self, "root_word", rw)
        object.__setattr__(self, "used_words", tuple(w.lower() for w in self.used_words))

    def with_word(self, word: str) -> "RoundState":
        """Return a new state with `word` inserted at the front."""
        return RoundState(root_word=self.root_word, used_words=(word,) + self.used_words)
