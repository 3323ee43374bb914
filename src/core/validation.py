from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Sequence

from .letters import can_spell
from .lexicon import Lexicon

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3

OutcomeStatus = Literal["accepted", "rejected", "empty", "unready"]


class RejectionReason(Enum):
    """Why a submission was refused, with the title/message shown to the player."""

    ALREADY_USED = ("Word already used", "Be more original!")
    NOT_SPELLABLE_FROM_ROOT = ("Word not possible", "You can't spell this word from '{root}'")
    NOT_A_DICTIONARY_WORD = ("Word not recognized!", "You can't just make them up, you know!")
    TOO_SHORT_OR_EQUALS_ROOT = ("Word too short", "Words must be at least three letters long.")

    @property
    def title(self) -> str:
        return self.value[0]

    def message_for(self, root: str) -> str:
        return self.value[1].format(root=root)


@dataclass(frozen=True)
class Outcome:
    """
    Result of one submission.

    Notes
    -----
    - "accepted": `word` holds the normalized candidate.
    - "rejected": `reason` says which rule failed first.
    - "empty"   : nothing was submitted; callers ignore it.
    - "unready" : the lexicon is still loading; try again later.
    """

    status: OutcomeStatus
    word: str = ""
    reason: Optional[RejectionReason] = None
    root: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"

    @property
    def title(self) -> str:
        return self.reason.title if self.reason else ""

    @property
    def message(self) -> str:
        return self.reason.message_for(self.root) if self.reason else ""


def normalize(raw: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return (raw or "").strip().lower()


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_long_enough(word: str, root: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH and word != root


def validate(raw: str, used_words: Sequence[str], root: str, lexicon: Lexicon) -> Outcome:
    """
    Run a raw submission through the rule pipeline.

    Order
    -----
    1) originality, 2) spellable from `root`, 3) dictionary word,
    4) at least three letters and not the root itself.

    The first failing rule wins; later rules are not evaluated, so the
    dictionary is only consulted for words that passed the local checks.
    """
    word = normalize(raw)
    if not word:
        return Outcome(status="empty")

    reason: Optional[RejectionReason] = None
    if not is_original(word, used_words):
        reason = RejectionReason.ALREADY_USED
    elif not can_spell(word, root):
        reason = RejectionReason.NOT_SPELLABLE_FROM_ROOT
    elif not lexicon.is_word(word):
        reason = RejectionReason.NOT_A_DICTIONARY_WORD
    elif not is_long_enough(word, root):
        reason = RejectionReason.TOO_SHORT_OR_EQUALS_ROOT

    if reason is not None:
        logger.debug("Rejected %r against %r: %s", word, root, reason.name)
        return Outcome(status="rejected", word=word, reason=reason, root=root)
    return Outcome(status="accepted", word=word, root=root)
