import json

from snake_game.storage import HighScoreStore


def test_missing_file_is_zero(tmp_path):
    assert HighScoreStore(tmp_path / "nope.json").load() == 0


def test_save_then_load_creates_dirs(tmp_path):
    store = HighScoreStore(tmp_path / "deep" / "dir" / "hs.json")
    store.save(17)
    assert store.load() == 17
    assert json.loads(store.path.read_text()) == {"high_score": 17}


def test_bad_data_is_zero(tmp_path):
    path = tmp_path / "hs.json"
    bad = [
        "not json", '{"high_score": "abc"}', '{"high_score": -3}', '{"high_score": 2.5}', "[]", "true",
        '{"high_score": "²"}',
        '{"high_score": "' + "9" * 5000 + '"}',
    ]
    for text in bad:
        path.write_text(text, encoding="utf-8")
        assert HighScoreStore(path).load() == 0, text


def test_numeric_string_accepted(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text('{"high_score": "12"}')
    assert HighScoreStore(path).load() == 12
    path.write_text("9")
    assert HighScoreStore(path).load() == 9


def test_failed_save_leaves_no_temp_file(tmp_path):
    # target is a directory, so the final rename fails
    path = tmp_path / "hs.json"
    path.mkdir()
    HighScoreStore(path).save(3)
    assert not (tmp_path / "hs.json.tmp").exists()
    assert path.is_dir()
