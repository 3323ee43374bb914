from __future__ import annotations

from typing import List


def can_spell(candidate: str, pool: str) -> bool:
    """
    Return True if `candidate` can be spelled from the letters of `pool`.

    Each letter of `pool` may be used at most once per occurrence, so
    "silkworms" cannot be made from "silkworm" (only one 's').

    Both strings are expected to be lowercased by the caller. An empty
    candidate is trivially spellable.
    """
    remaining: List[str] = list(pool)
    for ch in candidate:
        try:
            remaining.remove(ch)  # drops the first occurrence only
        except ValueError:
            return False
    return True
