import json

from flappy_poles.config import BEST_SCORE_KEY
from flappy_poles.storage import JsonScoreStore, MemoryScoreStore


def test_missing_file_loads_zero(tmp_path) -> None:
    assert JsonScoreStore(tmp_path / "best.json").load_best_score() == 0


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "best.json"
    JsonScoreStore(path).save_best_score(7)
    assert json.loads(path.read_text()) == {BEST_SCORE_KEY: 7}
    assert JsonScoreStore(path).load_best_score() == 7


def test_garbage_loads_zero(tmp_path) -> None:
    path = tmp_path / "best.json"
    for content in ("not json", "[1, 2]", '{"flappy_best": "abc"}', '{"flappy_best": -4}', "null"):
        path.write_text(content)
        assert JsonScoreStore(path).load_best_score() == 0


def test_save_failure_is_swallowed(tmp_path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    store = JsonScoreStore(blocker / "best.json")
    store.save_best_score(3)  # parent is a file; must not raise
    assert store.load_best_score() == 0


def test_memory_store_records_saves() -> None:
    store = MemoryScoreStore(4)
    assert store.load_best_score() == 4
    store.save_best_score(9)
    assert store.load_best_score() == 9
    assert store.saves == [9]


def test_save_replaces_file_without_leftovers(tmp_path) -> None:
    """Saving swaps in a complete file and leaves no temporary behind."""
    path = tmp_path / "best.json"
    path.write_text(json.dumps({BEST_SCORE_KEY: 3}))
    store = JsonScoreStore(path)
    store.save_best_score(11)
    assert store.load_best_score() == 11
    assert sorted(p.name for p in tmp_path.iterdir()) == ["best.json"]


def test_failed_save_keeps_previous_best(tmp_path) -> None:
    """A write that cannot complete leaves the old best score readable."""
    path = tmp_path / "best.json"
    store = JsonScoreStore(path)
    store.save_best_score(5)
    (tmp_path / "best.json.tmp").mkdir()  # the temporary file cannot be opened
    store.save_best_score(9)
    assert store.load_best_score() == 5
