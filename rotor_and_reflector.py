# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET

debug = Debug()

SIZE = len(ALPHABET)
INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def _check_setting(label: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{label} must be an int, got {value!r}")
    if not 0 <= value < SIZE:
        raise ConfigurationError(f"{label} {value} out of range 0–{SIZE - 1}")
    return value


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        *,
        ring_setting: int = 0,
        position: int = 0,
        name: str = "",
    ) -> None:
        if len(wiring) != SIZE or set(wiring) != set(ALPHABET):
            raise ConfigurationError("wiring must be a permutation of A–Z")
        if notch not in INDEX:
            raise ConfigurationError(f"Notch {notch!r} must be a single letter A–Z")

        self.name = name
        self.wiring = wiring

        # integer lookup tables, inverse built once so backward() is O(1)
        self._fwd = [INDEX[c] for c in wiring]
        self._rev = [0] * SIZE
        for i, j in enumerate(self._fwd):
            self._rev[j] = i

        self.notch_position = INDEX[notch]
        self.ring_setting = _check_setting("ring setting", ring_setting)
        self.position = _check_setting("position", position)

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        return self.position == self.notch_position

    def step(self) -> None:
        self.position = (self.position + 1) % SIZE
        debug.log("rotor", "%s pos %d", self.name or "?", self.position)

    @property
    def window(self) -> str:
        """Letter currently showing in the machine's window."""
        return ALPHABET[self.position]

    # ── signal paths ---------------------------------------------
    def _through(self, table: list[int], letter: str) -> str:
        shift = (INDEX[letter] + self.position - self.ring_setting) % SIZE
        mapped = table[shift]
        return ALPHABET[(mapped - self.position + self.ring_setting) % SIZE]

    def forward(self, letter: str) -> str:
        return self._through(self._fwd, letter)

    def backward(self, letter: str) -> str:
        return self._through(self._rev, letter)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str, *, name: str = "") -> None:
        if len(wiring) != SIZE or set(wiring) != set(ALPHABET):
            raise ConfigurationError("Reflector wiring must be a permutation of A–Z")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = INDEX[c]
            if i == j or wiring[j] != ALPHABET[i]:
                raise ConfigurationError(
                    "Reflector wiring must be an involution with no fixed points"
                )

        self.name = name
        self.mapping: dict[str, str] = dict(zip(ALPHABET, wiring))

    def reflect(self, letter: str) -> str:
        out = self.mapping[letter]
        debug.log("reflector", "%s->%s", letter, out)
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
