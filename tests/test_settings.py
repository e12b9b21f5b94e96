import json

import pytest

from errors import ConfigurationError
from settings import (
    MachineSettings,
    choose_pairs,
    load_settings,
    random_settings,
    save_settings,
)

SHEET = {
    "rotors": [0, 1, 2],
    "positions": [1, 2, 3],
    "ring_settings": [4, 5, 6],
    "plugs": ["AQ", ["W", "S"]],
    "reflector": "B",
}


# ── from_dict ─────────────────────────────────────────────────────────────────
def test_from_dict_defaults():
    s = MachineSettings.from_dict({"rotors": [0, 1, 2], "positions": [0, 0, 0],
                                   "ring_settings": [0, 0, 0]})
    assert s.plugs == []
    assert s.reflector == "B"
    assert s.build().process("AAAAA") == "BDZGO"

def test_from_dict_missing_keys():
    with pytest.raises(ConfigurationError, match="positions, ring_settings"):
        MachineSettings.from_dict({"rotors": [0, 1, 2]})

@pytest.mark.parametrize("data", [
    [0, 1, 2],
    {**SHEET, "rotors": 3},
    {**SHEET, "plugs": "AQWS"},
])
def test_from_dict_rejects_wrong_shapes(data):
    with pytest.raises(ConfigurationError):
        MachineSettings.from_dict(data)

def test_build_validates():
    with pytest.raises(ConfigurationError):
        MachineSettings(rotors=[0, 1, 9]).build()


# ── build ─────────────────────────────────────────────────────────────────────
def test_build_gives_independent_machines():
    s = MachineSettings.from_dict(SHEET)
    sender, receiver = s.build(), s.build()
    cipher = sender.process("ATTACK AT DAWN")
    assert receiver.process(cipher) == "ATTACK AT DAWN"
    assert sender.positions == receiver.positions

def test_default_settings_positions():
    s = MachineSettings(rotors=[2, 1, 0])
    assert s.positions == [0, 0, 0]
    assert s.ring_settings == [0, 0, 0]
    assert s.build().positions == [0, 0, 0]


# ── JSON files ────────────────────────────────────────────────────────────────
def test_save_then_load(tmp_path):
    s = MachineSettings.from_dict(SHEET)
    path = save_settings(s, tmp_path / "key.json")
    assert json.loads(path.read_text(encoding="utf-8"))["ring_settings"] == [4, 5, 6]
    assert load_settings(path) == s

def test_load_rejects_malformed_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{rotors: [0, 1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid UTF-8 JSON"):
        load_settings(path)

def test_load_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes('{"reflector": "Ä"}'.encode("latin-1"))
    with pytest.raises(ConfigurationError, match="not valid UTF-8 JSON"):
        load_settings(path)


# ── key-sheet generation ──────────────────────────────────────────────────────
def test_random_settings_seeded_is_reproducible():
    assert random_settings(seed=42) == random_settings(seed=42)

def test_random_settings_shape():
    s = random_settings(seed=7)
    assert len(set(s.rotors)) == 3
    assert all(0 <= p < 26 for p in s.positions + s.ring_settings)
    assert len(s.plugs) == 10
    letters = "".join(s.plugs)
    assert len(set(letters)) == len(letters) == 20
    assert s.reflector in {"A", "B", "C"}

def test_random_settings_roundtrip():
    s = random_settings(seed=1234, pairs=13)
    cipher = s.build().process("WETTERVORHERSAGE BISKAYA")
    assert s.build().process(cipher) == "WETTERVORHERSAGE BISKAYA"

def test_random_settings_unseeded_builds():
    assert len(random_settings().build().process("ABC")) == 3

@pytest.mark.parametrize("k,expected", [(0, 0), (5, 5), (13, 13), (40, 13), (-2, 0)])
def test_choose_pairs_caps(k, expected):
    from random import Random
    assert len(choose_pairs(k, Random(0))) == expected
