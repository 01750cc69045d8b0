"""Tests for the JSON high-score file."""

import json

from binbreak.highscores import HighScoreStore, MemoryScoreStore
from binbreak.models import BitMode, Bits

EASY = BitMode(Bits.FOUR)
NORMAL_SIGNED = BitMode(Bits.EIGHT, signed=True)


def test_missing_file_reads_zero(tmp_path):
    store = HighScoreStore(str(tmp_path / "scores.json"))
    assert store.load(EASY) == 0
    assert store.load(NORMAL_SIGNED) == 0


def test_corrupt_file_reads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    store = HighScoreStore(str(path))
    assert store.load(EASY) == 0
    assert store.warning is None


def test_non_object_file_reads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert HighScoreStore(str(path)).load(EASY) == 0


def test_bad_entries_are_skipped(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"4u": "lots", "8s": 40}), encoding="utf-8")
    store = HighScoreStore(str(path))
    assert store.load(EASY) == 0
    assert store.load(NORMAL_SIGNED) == 40


def test_non_finite_entries_are_skipped(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text('{"4u": Infinity, "8u": 1e999, "8s": NaN, "4s": 12}', encoding="utf-8")
    store = HighScoreStore(str(path))
    assert store.load(EASY) == 0
    assert store.load(BitMode(Bits.EIGHT)) == 0
    assert store.load(NORMAL_SIGNED) == 0
    assert store.load(BitMode(Bits.FOUR, signed=True)) == 12


def test_save_persists_as_json(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = HighScoreStore(str(path))
    assert store.save(NORMAL_SIGNED, 120) is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"8s": 120}
    assert HighScoreStore(str(path)).load(NORMAL_SIGNED) == 120
    assert not (tmp_path / "nested" / "scores.json.tmp").exists()


def test_lower_or_equal_score_is_a_no_op(tmp_path):
    path = tmp_path / "scores.json"
    store = HighScoreStore(str(path))
    store.save(EASY, 30)
    before = path.read_text(encoding="utf-8")
    assert store.save(EASY, 30) is False
    assert store.save(EASY, 10) is False
    assert path.read_text(encoding="utf-8") == before
    assert store.load(EASY) == 30


def test_modes_are_kept_apart(tmp_path):
    store = HighScoreStore(str(tmp_path / "scores.json"))
    store.save(EASY, 10)
    store.save(BitMode(Bits.FOUR, signed=True), 20)
    assert store.load(EASY) == 10
    assert store.load(BitMode(Bits.FOUR, signed=True)) == 20
    assert json.loads((tmp_path / "scores.json").read_text(encoding="utf-8")) == {"4u": 10, "4s": 20}


def test_write_failure_keeps_score_in_memory(tmp_path):
    # a directory where the file should be makes every write fail
    path = tmp_path / "scores.json"
    path.mkdir()
    store = HighScoreStore(str(path))
    assert store.load(EASY) == 0
    assert store.save(EASY, 70) is False
    assert store.warning
    assert store.load(EASY) == 70


def test_memory_store():
    store = MemoryScoreStore({"4u": 5})
    assert store.load(EASY) == 5
    assert store.save(EASY, 4) is False
    assert store.save(EASY, 9) is True
    assert store.load(EASY) == 9
