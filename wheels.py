# wheels.py
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from errors import ConfigurationError


class WheelSpec(NamedTuple):
    name: str
    wiring: str
    notch: str = ""         # reflectors have none


# ────────────────────────────────────────────────────────────────────────
#  Wehrmacht Enigma I wheel set
# ────────────────────────────────────────────────────────────────────────

# Rotor index in a machine's rotor_types is the position in this tuple.
ROTORS: Tuple[WheelSpec, ...] = (
    WheelSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    WheelSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    WheelSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    WheelSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    WheelSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
)

REFLECTORS: Dict[str, WheelSpec] = {
    "A": WheelSpec("A", "EJMZALYXVBWFCRQUONTSPIKHGD"),
    "B": WheelSpec("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C": WheelSpec("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
}

DEFAULT_REFLECTOR = "B"


def rotor_spec(index: int) -> WheelSpec:
    if isinstance(index, bool) or not isinstance(index, int):
        raise ConfigurationError(f"Rotor index must be an int, got {index!r}")
    if not 0 <= index < len(ROTORS):
        raise ConfigurationError(
            f"Unknown rotor index {index}; expected 0–{len(ROTORS) - 1}"
        )
    return ROTORS[index]


def reflector_spec(name: str) -> WheelSpec:
    try:
        return REFLECTORS[str(name).upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown reflector {name!r}. Expected one of {list(REFLECTORS)}"
        ) from None
