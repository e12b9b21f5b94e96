# enigma_machine.py  ───────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Pair, Plugboard
from rotor_and_reflector import Reflector, Rotor
from wheels import DEFAULT_REFLECTOR, reflector_spec, rotor_spec

if TYPE_CHECKING:
    from settings import MachineSettings

debug = Debug()

ROTOR_COUNT = 3


def _triple(label: str, values: Sequence[int]) -> list[int]:
    try:
        items = list(values)
    except TypeError:
        raise ConfigurationError(f"{label} must be a sequence of {ROTOR_COUNT} ints") from None
    if len(items) != ROTOR_COUNT:
        raise ConfigurationError(
            f"{label} needs exactly {ROTOR_COUNT} values, got {len(items)}"
        )
    return items


class EnigmaMachine:
    """Three-rotor Enigma I: left, middle, right rotor plus plugboard and reflector.

    Rotor positions advance once per enciphered letter for the life of the
    instance. There is no rewind; decrypt with a second machine built from
    the same initial settings.
    """

    def __init__(
        self,
        rotor_types: Sequence[int],
        positions: Sequence[int] = (0, 0, 0),
        ring_settings: Sequence[int] = (0, 0, 0),
        plugboard_pairs: Iterable[Pair] = (),
        reflector: str = DEFAULT_REFLECTOR,
    ) -> None:
        types = _triple("rotor_types", rotor_types)
        starts = _triple("positions", positions)
        rings = _triple("ring_settings", ring_settings)

        rotors = []
        for index, start, ring in zip(types, starts, rings):
            spec = rotor_spec(index)
            rotors.append(
                Rotor(spec.wiring, spec.notch,
                      ring_setting=ring, position=start, name=spec.name)
            )

        refl = reflector_spec(reflector)

        self.kb        = Keyboard()
        self.pb        = Plugboard(plugboard_pairs)
        self.rotors    = rotors
        self.reflector = Reflector(refl.wiring, name=refl.name)

    @classmethod
    def from_settings(cls, settings: "MachineSettings") -> "EnigmaMachine":
        return cls(
            settings.rotors,
            settings.positions,
            settings.ring_settings,
            settings.plugs,
            settings.reflector,
        )

    @property
    def positions(self) -> list[int]:
        return [r.position for r in self.rotors]

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors for one key-press, double step included."""
        left, middle, right = self.rotors

        # both notches are read before anything moves
        middle_at_notch = middle.at_notch()
        right_at_notch = right.at_notch()

        if right_at_notch or middle_at_notch:
            middle.step()
        if middle_at_notch:
            left.step()
        right.step()

        debug.log("stepping", "Rotor pos %s", self.positions)

    # ── encipher one letter  ────────────────────────────────────

    def encipher(self, letter: str) -> str:
        """Step, then run one upper-case letter through the full circuit."""
        self._step_rotors()
        left, middle, right = self.rotors

        signal = self.pb.swap(letter)

        signal = right.forward(signal)
        signal = middle.forward(signal)
        signal = left.forward(signal)

        signal = self.reflector.reflect(signal)

        signal = left.backward(signal)
        signal = middle.backward(signal)
        signal = right.backward(signal)

        out_ch = self.pb.swap(signal)
        debug.log("encipher", "%s->%s", letter, out_ch)
        return out_ch

    def process(self, text: str) -> str:
        """Encipher (or decipher) *text*; non-letters pass through untouched."""
        return "".join(
            self.encipher(ch) if self.kb.is_key(ch) else ch
            for ch in self.kb.fold(text)
        )

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self.rotors)
        window = "".join(r.window for r in self.rotors)
        return f"<EnigmaMachine {names} UKW-{self.reflector.name} window={window} {self.pb!r}>"
