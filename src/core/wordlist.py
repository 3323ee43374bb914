from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Project-local start words live here:
_DEFAULT_PATH = Path("data/start.txt")

# Used whenever the start list cannot be loaded; always a valid English word.
FALLBACK_ROOT_WORD = "silkworm"


def _read_lines(path: Path) -> List[str]:
    """
    Read an ASCII text file and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing or cannot be decoded.
    - Lines that are not purely alphabetic are skipped.
    """
    if not path.exists() or not path.is_file():
        return []
    try:
        raw = path.read_text(encoding="ascii").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read start words from %s: %s", path, exc)
        return []
    words = [ln.strip().lower() for ln in raw]
    return [w for w in words if w.isalpha()]


def load_start_words(path: Optional[Path | str] = None) -> List[str]:
    """
    Load the list of candidate root words.

    Parameters
    ----------
    path : Path | str | None
        Newline-delimited word file. Defaults to ``data/start.txt``.

    Returns
    -------
    List[str]
        Lowercase alphabetic words; empty if the file is missing or unreadable.
    """
    return _read_lines(Path(path) if path else _DEFAULT_PATH)


def pick_root_word(words: Optional[Sequence[str]] = None, seed: int | None = None) -> str:
    """
    Pick one root word uniformly at random.

    Parameters
    ----------
    words : Sequence[str] | None
        Pre-loaded start words. When omitted, the default file is read.
    seed : int | None
        Optional seed for reproducible picks during tests or demos.

    Returns
    -------
    str
        A lowercase word, never empty: falls back to ``FALLBACK_ROOT_WORD``
        when the list is unavailable or empty.
    """
    if words is None:
        words = load_start_words()
    if not words:
        logger.warning("Start word list unavailable; using fallback %r", FALLBACK_ROOT_WORD)
        return FALLBACK_ROOT_WORD
    rng = random.Random(seed)
    return rng.choice(list(words))
