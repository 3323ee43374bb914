import itertools

import pytest
from src.core.engine import GameSession, RoundNotStartedError, new_round, submit_word
from src.core.lexicon import WordSetLexicon
from src.core.state import RoundState
from src.core.validation import RejectionReason
from src.core.wordlist import FALLBACK_ROOT_WORD

WORDS = WordSetLexicon(["silk", "worm", "milk", "work", "slow", "owl", "ow", "silkworm", "silkworms"])


class LoadingLexicon(WordSetLexicon):
    """Lexicon that reports not-ready until `loaded` is flipped."""

    loaded = False

    @property
    def ready(self):
        return self.loaded


def _session(root="silkworm", lexicon=WORDS):
    s = GameSession(lexicon, picker_fn=lambda: root)
    s.start_round()
    return s


def test_silkworm_scenario():
    s = _session()
    assert s.root_word == "silkworm" and s.used_words == ()

    assert s.submit_word("silk").accepted
    assert s.used_words == ("silk",)

    assert s.submit_word("silk").reason is RejectionReason.ALREADY_USED
    assert s.submit_word("ow").reason is RejectionReason.TOO_SHORT_OR_EQUALS_ROOT
    assert s.submit_word("silkworm").reason is RejectionReason.TOO_SHORT_OR_EQUALS_ROOT
    assert s.submit_word("wkxz").reason is RejectionReason.NOT_SPELLABLE_FROM_ROOT
    assert s.submit_word("silkworms").reason is RejectionReason.NOT_SPELLABLE_FROM_ROOT
    assert s.used_words == ("silk",)


def test_newest_first_ordering():
    s = _session()
    for w in ["silk", "worm", "Milk "]:
        assert s.submit_word(w).accepted
    assert s.used_words == ("milk", "worm", "silk")


def test_used_words_satisfy_all_rules():
    s = _session()
    for w in ["silk", "worm", "ow", "silk", "nope", "owl"]:
        s.submit_word(w)
    assert len(set(s.used_words)) == len(s.used_words)
    for w in s.used_words:
        assert len(w) >= 3 and w != s.root_word and WORDS.is_word(w)


def test_rejection_leaves_state_object_untouched():
    s = _session()
    s.submit_word("silk")
    before = s.state
    s.submit_word("silk")
    s.submit_word("xyz")
    assert s.state is before


def test_empty_submission_is_noop():
    s = _session()
    before = s.state
    out = s.submit_word("   ")
    assert out.status == "empty" and out.reason is None
    assert s.state is before


def test_submit_before_start_raises():
    s = GameSession(WORDS, picker_fn=lambda: "silkworm")
    assert s.status == "not_started"
    with pytest.raises(RoundNotStartedError):
        s.submit_word("silk")
    with pytest.raises(RoundNotStartedError):
        _ = s.root_word


def test_start_round_resets_each_time():
    roots = itertools.cycle(["silkworm", "workshop"])
    s = GameSession(WORDS, picker_fn=lambda: next(roots))

    s.start_round()
    assert s.status == "in_round"
    s.submit_word("silk")
    assert s.used_words == ("silk",)

    s.start_round()
    assert s.used_words == ()
    assert s.root_word == "workshop"

    s.start_round()
    assert s.used_words == ()


def test_unready_lexicon_refuses_submissions():
    lex = LoadingLexicon(["silk"])
    s = _session(lexicon=lex)
    out = s.submit_word("silk")
    assert out.status == "unready"
    assert s.used_words == ()

    lex.loaded = True
    assert s.submit_word("silk").accepted


@pytest.mark.parametrize("picked", ["", "   ", "two words", "abc123"])
def test_new_round_falls_back_on_bad_picker(picked):
    state = new_round(lambda: picked)
    assert state.root_word == FALLBACK_ROOT_WORD


def test_pure_submit_word_returns_new_state():
    state = RoundState("silkworm")
    new_state, out = submit_word(state, "worm", WORDS)
    assert out.accepted
    assert new_state.used_words == ("worm",)
    assert state.used_words == ()


def test_round_state_validation():
    assert RoundState("  SilkWorm ").root_word == "silkworm"
    with pytest.raises(ValueError):
        RoundState("")
    with pytest.raises(ValueError):
        RoundState("silk worm")
