"""Polish alphabetical ordering for names.

Letters with Polish diacritics sort right after their base letter
(a < ą < b ... l < ł < m ... z < ź < ż), case-insensitively.
"""

from __future__ import annotations

import unicodedata

POLISH_ALPHABET = "aąbcćdeęfghijklłmnńoópqrsśtuvwxyzźż"

_RANK = {ch: i for i, ch in enumerate(POLISH_ALPHABET)}


def _char_key(ch: str) -> tuple[int, int, str]:
    if ch in _RANK:
        return (1, _RANK[ch], "")
    # Other accented letters (é, ü) rank with their base letter.
    base = unicodedata.normalize("NFD", ch)[0]
    if base in _RANK:
        return (1, _RANK[base], ch)
    # Digits, spaces and punctuation come before letters.
    return (0, ord(ch), "")


def polish_sort_key(text: str) -> tuple[tuple[int, int, str], ...]:
    folded = unicodedata.normalize("NFC", str(text or "")).casefold()
    return tuple(_char_key(ch) for ch in folded)
