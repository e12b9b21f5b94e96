# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable
from string import ascii_uppercase

from debug import Debug
from errors import ConfigurationError

debug = Debug()

ALPHABET = ascii_uppercase
MAX_PAIRS = len(ALPHABET) // 2
LETTERS = frozenset(ALPHABET)

Pair = str | tuple[str, str]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Case folding and the letter / pass-through decision."""

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.keys: frozenset[str] = frozenset(alphabet)

    def fold(self, text: str) -> str:
        """Upper-case *text* one character at a time, so "ß" stays one symbol."""
        return "".join(self._fold_char(ch) for ch in text)

    @staticmethod
    def _fold_char(ch: str) -> str:
        up = ch.upper()
        return up if len(up) == 1 else ch

    def is_key(self, ch: str) -> bool:
        """True only for characters that close a circuit (A–Z)."""
        hit = ch in self.keys
        debug.log("keyboard", "%r key=%s", ch, hit)
        return hit


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Iterable[Pair] = ()) -> None:
        self.mapping: dict[str, str] = {}
        self.configure(pairs)

    def configure(self, pairs: Iterable[Pair]) -> None:
        """Replace the current cabling with *pairs*.

        Pairs may be two-letter strings ("AB") or 2-tuples; lower case is
        folded. Nothing is committed unless every pair validates.
        """
        mapping: dict[str, str] = {}
        try:
            numbered = enumerate(pairs, start=1)
        except TypeError:
            raise ConfigurationError(f"Plugboard pairs must be a sequence, got {pairs!r}") from None

        for count, raw in numbered:
            if count > MAX_PAIRS:
                raise ConfigurationError(f"At most {MAX_PAIRS} plugboard pairs allowed")
            a, b = self._normalise(raw)

            if a not in LETTERS or b not in LETTERS:
                bad = a if a not in LETTERS else b
                raise ConfigurationError(f"Plugboard symbol {bad!r} is not a letter")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a in mapping or b in mapping:
                dup = a if a in mapping else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            mapping[a], mapping[b] = b, a

        self.mapping = mapping

    @staticmethod
    def _normalise(raw: Pair) -> tuple[str, str]:
        if isinstance(raw, str):
            if len(raw) != 2:
                raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw
        else:
            try:
                a, b = raw
            except (TypeError, ValueError):
                raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters") from None
        if not (isinstance(a, str) and isinstance(b, str)):
            raise ConfigurationError(f"Pair {raw!r} must hold letters")
        return a.upper(), b.upper()

    def swap(self, letter: str) -> str:
        out = self.mapping.get(letter, letter)
        debug.log("plugboard", "%s->%s", letter, out)
        return out

    @property
    def pairs(self) -> list[str]:
        return sorted(a + b for a, b in self.mapping.items() if a < b)

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
