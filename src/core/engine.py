from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .lexicon import Lexicon
from .state import RoundState, SessionStatus
from .validation import Outcome, validate
from .wordlist import FALLBACK_ROOT_WORD, pick_root_word

logger = logging.getLogger(__name__)


class RoundNotStartedError(RuntimeError):
    """Raised when a word is submitted before `start_round()`."""


def new_round(picker_fn: Callable[[], str]) -> RoundState:
    """
    Start a new round using the provided picker function to choose the root word.

    Parameters
    ----------
    picker_fn : Callable[[], str]
        Function that returns a single word. Usually `pick_root_word` over the
        start list; the engine does not care where the word comes from.

    Returns
    -------
    RoundState
        A fresh state with no used words.
    """
    word = (picker_fn() or "").strip().lower()
    # A picker returning junk must not leave the round without a root word.
    if not word.isalpha():
        logger.warning("Picker returned %r; using fallback %r", word, FALLBACK_ROOT_WORD)
        word = FALLBACK_ROOT_WORD
    return RoundState(root_word=word)


def submit_word(state: RoundState, raw: str, lexicon: Lexicon) -> Tuple[RoundState, Outcome]:
    """
    Apply one submission and return `(new_state, outcome)`.

    Behavior
    --------
    - Accepted words are prepended to `used_words` (newest first).
    - Rejected and empty submissions return `state` unchanged.
    """
    outcome = validate(raw, state.used_words, state.root_word, lexicon)
    if not outcome.accepted:
        return state, outcome
    logger.info("Accepted %r for root %r", outcome.word, state.root_word)
    return state.with_word(outcome.word), outcome


class GameSession:
    """
    Owns the round lifecycle and is the only writer of `RoundState`.

    The presentation layer calls `start_round()` and `submit_word(raw)` and
    reads `root_word` / `used_words` back; everything else is internal.
    """

    def __init__(self, lexicon: Lexicon, picker_fn: Callable[[], str] = pick_root_word) -> None:
        self.lexicon = lexicon
        self.picker_fn = picker_fn
        self._state: Optional[RoundState] = None

    @property
    def status(self) -> SessionStatus:
        return "not_started" if self._state is None else "in_round"

    @property
    def ready(self) -> bool:
        """False while the lexicon is still loading; submissions are refused then."""
        return bool(self.lexicon.ready)

    @property
    def state(self) -> RoundState:
        if self._state is None:
            raise RoundNotStartedError("No round in progress; call start_round() first.")
        return self._state

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return self.state.used_words

    def start_round(self) -> RoundState:
        """Draw a new root word and clear the used words. Safe to call mid-round."""
        self._state = new_round(self.picker_fn)
        logger.info("Round started with root word %r", self._state.root_word)
        return self._state

    def submit_word(self, raw: str) -> Outcome:
        state = self.state
        if not self.ready:
            return Outcome(status="unready", root=state.root_word)
        self._state, outcome = submit_word(state, raw, self.lexicon)
        return outcome
