import json

import cli


def test_analyze_json(sample_tree, capsys):
	assert cli.main(["analyze", str(sample_tree), "--json"]) == 0
	out = json.loads(capsys.readouterr().out)
	assert out["inbound"][0]["module"] == "a"
	assert out["hierarchy"] == []


def test_analyze_tables(sample_tree, capsys):
	assert cli.main(["analyze", str(sample_tree), "--no-color"]) == 0
	out = capsys.readouterr().out
	assert "Imported Items" in out
	assert "\x1b[" not in out


def test_analyze_missing_root_exits_nonzero(tmp_path, capsys):
	assert cli.main(["analyze", str(tmp_path / "missing")]) == 1
	assert capsys.readouterr().out == ""


def test_analyze_rejects_invalid_wrap_width(sample_tree, capsys):
	assert cli.main(["analyze", str(sample_tree), "--wrap-width", "0"]) == 1
	assert capsys.readouterr().out == ""
