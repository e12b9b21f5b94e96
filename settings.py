# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List

from enigma_machine import ROTOR_COUNT, EnigmaMachine
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET, MAX_PAIRS, Pair
from wheels import DEFAULT_REFLECTOR, REFLECTORS, ROTORS

REQUIRED_KEYS = {"rotors", "positions", "ring_settings"}


def _as_list(data: dict, key: str, default: list | None = None) -> list:
    value = data.get(key, default)
    if not isinstance(value, list):
        raise ConfigurationError(f"Settings key {key!r} must be a list, got {value!r}")
    return list(value)


@dataclass(slots=True)
class MachineSettings:
    """One key-sheet line: everything needed to build a machine."""

    rotors: List[int]
    positions: List[int] = field(default_factory=lambda: [0] * ROTOR_COUNT)
    ring_settings: List[int] = field(default_factory=lambda: [0] * ROTOR_COUNT)
    plugs: List[Pair] = field(default_factory=list)
    reflector: str = DEFAULT_REFLECTOR

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ConfigurationError("Settings must be a JSON object")
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in settings: {', '.join(sorted(missing))}")
        return cls(
            rotors=_as_list(data, "rotors"),
            positions=_as_list(data, "positions"),
            ring_settings=_as_list(data, "ring_settings"),
            plugs=_as_list(data, "plugs", default=[]),
            reflector=data.get("reflector", DEFAULT_REFLECTOR),
        )

    def to_dict(self) -> Dict:
        return asdict(self)

    def build(self) -> EnigmaMachine:
        """Return a fresh machine; call twice for an encrypt/decrypt pair."""
        return EnigmaMachine.from_settings(self)


# ── JSON files ────────────────────────────────────────────────────


def load_settings(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Settings file {path} is not valid UTF-8 JSON: {exc}") from exc
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> Path:
    out = Path(path)
    out.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return out


# ── key-sheet generation ──────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def random_settings(seed: int | None = None, pairs: int = 10) -> MachineSettings:
    rng = build_rng(seed)
    size = len(ALPHABET)
    return MachineSettings(
        rotors=rng.sample(range(len(ROTORS)), ROTOR_COUNT),
        positions=[rng.randrange(size) for _ in range(ROTOR_COUNT)],
        ring_settings=[rng.randrange(size) for _ in range(ROTOR_COUNT)],
        plugs=choose_pairs(pairs, rng),
        reflector=rng.choice(sorted(REFLECTORS)),
    )
