# tests/app/test_cli.py
import io
import json

import pytest

from pathfinder.cli import main


def _run(argv):
    out = io.StringIO()
    code = main(["--quiet", *argv], out=out)
    return code, out.getvalue().splitlines()


def test_shortest(small_map_file):
    code, lines = _run(["--map", str(small_map_file), "shortest", "WashingtonDC", "Minneapolis"])
    assert code == 0
    assert lines == [
        "WashingtonDC -> Chicago (700)",
        "Chicago -> Minneapolis (400)",
        "total: 1100",
    ]


def test_no_route(tmp_path):
    m = tmp_path / "Split.txt"
    m.write_text("s.png\nNODES\nX 0 0\nY 9 9\nARCS\n", encoding="utf-8")
    code, lines = _run(["--map", str(m), "shortest", "X", "Y"])
    assert code == 0
    assert lines == ["No route from X to Y"]


def test_forest(small_map_file):
    code, lines = _run(["--map", str(small_map_file), "forest"])
    assert code == 0
    assert lines[-1] == "total: 2020"
    assert len(lines) == 4


def test_nodes_from_config(tmp_path, small_map_file):
    cfg = tmp_path / "session.json"
    cfg.write_text(json.dumps({"map": {"file": str(small_map_file)}}), encoding="utf-8")
    code, lines = _run(["--config", str(cfg), "nodes"])
    assert code == 0
    assert lines[0] == "WashingtonDC 100 200"


def test_unknown_city_is_an_error(small_map_file, capsys):
    code, _ = _run(["--map", str(small_map_file), "shortest", "WashingtonDC", "Gotham"])
    assert code == 1
    assert "Gotham" in capsys.readouterr().err


def test_missing_map(capsys):
    code, _ = _run(["forest"])
    assert code == 2
    assert "select a map" in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    cfg = tmp_path / "session.json"
    cfg.write_text(json.dumps({"spanning_forest": {"kind": "prim"}}), encoding="utf-8")
    code, _ = _run(["--config", str(cfg), "--map", "x.txt", "forest"])
    assert code == 1


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])


def test_swapped_columns_in_config(tmp_path, capsys):
    cfg = tmp_path / "session.json"
    raw = {"map": {"file": "MiddleEarth.txt", "second_city_col": 30, "cost_col": 15}}
    cfg.write_text(json.dumps(raw), encoding="utf-8")
    code, _ = _run(["--config", str(cfg), "forest"])
    assert code == 1
    assert "cost_col" in capsys.readouterr().err


def test_non_utf8_map(tmp_path, capsys):
    m = tmp_path / "Latin1.txt"
    m.write_bytes(b"s.png\nNODES\nZ\xfcrich 0 0\nARCS\n")
    code, lines = _run(["--map", str(m), "nodes"])
    assert code == 1 and lines == []
    err = capsys.readouterr().err
    assert "line 3" in err and "UTF-8" in err


def test_logs_go_to_stderr(small_map_file, capsys):
    out = io.StringIO()
    code = main(["--map", str(small_map_file), "nodes"], out=out)
    assert code == 0
    assert all(not line.startswith("{") for line in out.getvalue().splitlines())
    captured = capsys.readouterr()
    assert captured.out == ""
    events = [json.loads(line)["msg"] for line in captured.err.splitlines()]
    assert "reload_end" in events
