import json

import pytest

from wordwheel.model.history import HistoryLog
from wordwheel.model.io import IOManager, JsonLinesHistorySink
from wordwheel.model.modes import OutcomeType
from wordwheel.model.words import FALLBACK_WORDS


def test_load_languages_and_index(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({
        "languages": {"FR": ["agree", " solid ", ""], "EN": ["EGG"]},
        "rank_index": {"FR": {"2": {"G": ["AGREE"]}}},
    }), encoding="utf-8")

    source = IOManager.load_word_source(str(path))
    assert source.words() == ["AGREE", "SOLID"]
    assert source.words("EN") == ["EGG"]
    assert source.lookup(2, "G") == ["AGREE"]


def test_missing_file_falls_back(tmp_path):
    source = IOManager.load_word_source(str(tmp_path / "nope.json"))
    assert source.words() == FALLBACK_WORDS


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("{not json", encoding="utf-8")
    assert IOManager.load_word_source(str(path)).words() == FALLBACK_WORDS


def test_jsonl_sink_appends(tmp_path):
    path = tmp_path / "history.jsonl"
    sink = JsonLinesHistorySink(str(path))
    log = HistoryLog()
    sink(log.append("PARIS", OutcomeType.FORCE))
    sink(log.append("ROME"))

    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [(d["word"], d["type"]) for d in lines] == [("PARIS", "FORCE"), ("ROME", "NORMAL")]


@pytest.mark.parametrize("payload", [
    {"languages": ["AGREE", "SOLID"]},
    {"languages": "AGREE"},
    {"languages": {"FR": "AGREE"}},
    [1, 2, 3],
])
def test_wrong_shape_falls_back(tmp_path, payload):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    assert IOManager.load_word_source(str(path)).words() == FALLBACK_WORDS


@pytest.mark.parametrize("rank_index", [
    {"FR": {"two": {"G": ["AGREE"]}}},
    {"FR": {"2": ["AGREE"]}},
    {"FR": {"2": {"G": "AGREE"}}},
    {"FR": ["AGREE"]},
    ["AGREE"],
])
def test_malformed_rank_index_falls_back_to_scan(tmp_path, rank_index):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({
        "languages": {"FR": ["AGREE", "SOLID", "EGG"]},
        "rank_index": rank_index,
    }), encoding="utf-8")

    source = IOManager.load_word_source(str(path))
    assert source.words() == ["AGREE", "SOLID", "EGG"]
    assert source.lookup(2, "G") == ["AGREE", "EGG"]


def test_bad_language_kept_apart_from_good_one(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"languages": {"FR": ["AGREE"], "EN": 42}}), encoding="utf-8")
    source = IOManager.load_word_source(str(path))
    assert source.words() == ["AGREE"]
    assert source.words("EN") == ["THE AGREE"]
