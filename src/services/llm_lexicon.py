from __future__ import annotations

import logging
import re
from typing import Dict, Optional

from openai import OpenAI

from src.config import Settings
from src.core.lexicon import Lexicon, SpellCheckerLexicon, WordfreqLexicon

logger = logging.getLogger(__name__)

# The model must answer with a bare yes/no; anything else is treated as "no answer".
_YES_NO = re.compile(r"^\W*(yes|no)\b", re.IGNORECASE)


def llm_is_word(word: str, client: OpenAI, model: str = "gpt-4o-mini") -> Optional[bool]:
    """
    Ask the LLM whether `word` is a valid English word. Returns None on failure
    (caller should fall back to a local lexicon).

    Safety
    ------
    - Only lowercase a–z strings are sent; anything else is rejected locally.
    - Temperature 0 and a one-token budget keep the verdict stable.
    - Any API error or an unparseable reply yields None.
    """
    if not word.isalpha():
        return False

    prompt = (
        f"Is '{word}' a valid English dictionary word (inflected forms count)? "
        "Answer with exactly one word: yes or no."
    )
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0,
            max_tokens=3,
        )
        text = (resp.choices[0].message.content or "").strip()
    except Exception as exc:  # network, auth, rate limits
        logger.warning("LLM lexicon lookup failed for %r: %s", word, exc)
        return None

    m = _YES_NO.match(text)
    if not m:
        logger.warning("Unparseable LLM lexicon reply for %r: %r", word, text)
        return None
    return m.group(1).lower() == "yes"


class LLMLexicon:
    """
    Remote spell-check oracle with a local fallback.

    Model verdicts are cached per word so repeated lookups within a session
    agree and do not cost extra API calls. Fallback answers are not cached,
    so a word that hit a transient API error is asked about again next time.
    """

    def __init__(self, fallback: Lexicon, client: Optional[OpenAI] = None, model: str = "gpt-4o-mini") -> None:
        self.fallback = fallback
        self.client = client
        self.model = model
        self._cache: Dict[str, bool] = {}

    @property
    def ready(self) -> bool:
        return bool(self.fallback.ready)

    def is_word(self, word: str) -> bool:
        w = (word or "").strip().lower()
        if w in self._cache:
            return self._cache[w]

        verdict = llm_is_word(w, self.client, self.model) if self.client is not None else None
        if verdict is None:
            return self.fallback.is_word(w)
        self._cache[w] = verdict
        return verdict


def build_lexicon(settings: Settings) -> Lexicon:
    """
    Choose the lexicon backend from settings.

    - "wordfreq" -> WordfreqLexicon (loose frequency filter).
    - "llm" with a key and OFFLINE_MODE=false -> LLMLexicon over the spell checker.
    - Otherwise (including "llm" while offline) -> SpellCheckerLexicon.
    """
    if settings.lexicon_backend == "wordfreq":
        return WordfreqLexicon(min_zipf=settings.min_zipf)
    local = SpellCheckerLexicon()
    if settings.lexicon_backend != "llm":
        return local
    if not settings.llm_enabled:
        logger.info("LLM lexicon requested but offline or no API key; using spell checker")
        return local
    client = OpenAI(api_key=settings.openai_api_key)
    return LLMLexicon(fallback=local, client=client, model=settings.model_name)
