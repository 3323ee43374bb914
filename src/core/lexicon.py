from __future__ import annotations

from typing import Iterable, Protocol, Set

from spellchecker import SpellChecker
from wordfreq import zipf_frequency


# English only; the lexicon is not localized.
LANGUAGE = "en"


class Lexicon(Protocol):
    """Spell-check capability consumed by the validation pipeline."""

    @property
    def ready(self) -> bool: ...

    def is_word(self, word: str) -> bool: ...


class SpellCheckerLexicon:
    """
    English spelling lexicon backed by `pyspellchecker`'s word list.

    Only the word list is consulted; no corrections are computed. The list
    is loaded once when the lexicon is built.
    """

    def __init__(self, language: str = LANGUAGE) -> None:
        self.language = language
        self._checker = SpellChecker(language=language)

    @property
    def ready(self) -> bool:
        return True

    def is_word(self, word: str) -> bool:
        w = (word or "").strip().lower()
        if not w.isalpha():
            return False
        return bool(self._checker.known([w]))


class WordfreqLexicon:
    """
    Permissive lexicon backed by the `wordfreq` frequency tables.

    A string counts as a word when it is purely alphabetic and its Zipf
    frequency is at least `min_zipf`. The tables also hold acronyms and common
    typos ("mlk", "wrk"), so this is a loose filter rather than a spell check.
    """

    def __init__(self, min_zipf: float = 1.0, language: str = LANGUAGE) -> None:
        self.min_zipf = min_zipf
        self.language = language

    @property
    def ready(self) -> bool:
        return True

    def is_word(self, word: str) -> bool:
        w = (word or "").strip().lower()
        if not w.isalpha():
            return False
        return zipf_frequency(w, self.language) >= self.min_zipf


class WordSetLexicon:
    """Static in-memory word set, e.g. loaded from a dictionary file."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @property
    def ready(self) -> bool:
        return True

    def is_word(self, word: str) -> bool:
        return (word or "").strip().lower() in self._words

    def __len__(self) -> int:
        return len(self._words)
