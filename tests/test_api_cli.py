import json

import yaml

from dofkit.api import load_dof, save_dof
from dofkit.cli import main


def _write_json(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_load_and_save_json_and_yaml(tmp_path, ortho_doc):
    src = _write_json(tmp_path / "ortho.dof", ortho_doc)
    dof = load_dof(src)

    out_yaml = save_dof(dof, tmp_path / "out" / "ortho.yaml")
    assert yaml.safe_load(out_yaml.read_text(encoding="utf-8"))["board"] == "ortho"
    assert load_dof(out_yaml) == dof

    out_json = save_dof(dof, tmp_path / "ortho.json")
    assert load_dof(out_json) == dof


def test_cli_validate(tmp_path, capsys, qwerty_doc):
    good = _write_json(tmp_path / "good.dof", qwerty_doc)
    bad_doc = dict(qwerty_doc, layers={"base": qwerty_doc["layers"]["main"]})
    bad = _write_json(tmp_path / "bad.dof", bad_doc)

    assert main(["validate", str(good)]) == 0
    assert main(["validate", str(good), str(bad), str(tmp_path / "missing.dof")]) == 1
    out = capsys.readouterr().out
    assert f"OK   {good}: Qwerty" in out
    assert f"FAIL {bad}: layers must contain a layer called 'main'" in out
    assert "missing.dof" in out


def test_cli_info_json(tmp_path, capsys, ortho_doc):
    src = _write_json(tmp_path / "ortho.dof", ortho_doc)
    assert main(["info", str(src), "--json"]) == 0
    info = json.loads(capsys.readouterr().out)
    assert info["board"] == "ortho"
    assert info["shape"] == [10, 10, 10, 6]
    assert info["layers"] == ["main", "nav", "shift"]
    assert info["generated_shift"] is True
    assert info["fingering"] == "traditional"


def test_cli_normalize(tmp_path, capsys, relative_doc):
    relative_doc["layers"]["main"] = ["a   b  c", "d e"]
    src = _write_json(tmp_path / "rel.json", relative_doc)

    assert main(["normalize", str(src)]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["layers"]["main"] == ["a b c", "d e"]

    out = tmp_path / "rel.yaml"
    assert main(["--log-level", "debug", "normalize", str(src), "--out", str(out)]) == 0
    assert yaml.safe_load(out.read_text(encoding="utf-8"))["board"] == ["k k k", "0.5 k 2k"]
