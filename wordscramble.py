from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from src.config import Settings, configure_logging
from src.core.engine import GameSession
from src.core.wordlist import load_start_words, pick_root_word

# --- Lexicon backends (spell checker, wordfreq, optionally LLM-backed) ---
from src.services.llm_lexicon import build_lexicon

# Session-state key of the word input.
INPUT_KEY = "new_word"


# =======================================
# Session-state helpers & game management
# =======================================

def _new_session(settings: Settings) -> GameSession:
    """Build a session whose picker re-reads the start list on every round."""
    lexicon = build_lexicon(settings)
    session = GameSession(
        lexicon,
        picker_fn=lambda: pick_root_word(load_start_words(settings.start_words_path)),
    )
    session.start_round()
    return session


def _ensure_session(settings: Settings) -> GameSession:
    """Ensure there is a started GameSession in session state; create one if missing."""
    if "session" not in st.session_state or not isinstance(st.session_state["session"], GameSession):
        st.session_state["session"] = _new_session(settings)
    st.session_state.setdefault("last_error", None)
    st.session_state.setdefault(INPUT_KEY, "")
    return st.session_state["session"]


def apply_submission(state: MutableMapping[str, Any]) -> None:
    """
    Submit the current input and update the page state.

    The input is cleared only when the word is accepted; a rejected word
    stays in the field so the player can fix it.
    """
    outcome = state["session"].submit_word(state.get(INPUT_KEY, ""))
    if outcome.accepted:
        state[INPUT_KEY] = ""
        state["last_error"] = None
    elif outcome.status == "rejected":
        state["last_error"] = (outcome.title, outcome.message)
    elif outcome.status == "unready":
        state["last_error"] = ("Dictionary loading", "Try again in a moment.")
    else:
        state["last_error"] = None


def _submit() -> None:
    apply_submission(st.session_state)


def _restart_round() -> None:
    st.session_state["session"].start_round()
    st.session_state["last_error"] = None
    st.session_state[INPUT_KEY] = ""


# =========
# The App
# =========

def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    st.set_page_config(page_title="Word Scramble", page_icon="🔤", layout="centered")
    session = _ensure_session(settings)

    with st.sidebar:
        st.header("Round")
        st.button("🔁 New word", on_click=_restart_round, use_container_width=True)
        st.caption(f"Lexicon: {settings.lexicon_backend}")

    st.title(session.root_word)

    # Enter submits (on_change), like the original text field's onSubmit.
    st.text_input("Enter your word", key=INPUT_KEY, max_chars=32, autocomplete="off", on_change=_submit)
    st.button("Submit", on_click=_submit)

    if st.session_state["last_error"]:
        title, message = st.session_state["last_error"]
        st.error(f"**{title}**  \n{message}")

    for word in session.used_words:
        st.markdown(f"`{len(word)}`  {word}")


if __name__ == "__main__":
    main()
