import logging

import pytest
from pydantic import ValidationError

from dofkit.api import parse_dof
from dofkit.config.loader import load_config
from dofkit.definitions import Char, DEFAULT_SHIFT_TABLE
from dofkit.grid import Pos
from dofkit.logging import init_logging, level_from_cfg
from dofkit.utils.dict_merge import deep_update
from dofkit.utils.logging import configure_logging, logger


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv("DOFKIT_CONFIG", raising=False)
    cfg = load_config()
    assert cfg.logging.level == "none"
    assert cfg.shift_table() == dict(DEFAULT_SHIFT_TABLE)
    assert load_config(tmp_path / "missing.yaml") == cfg


def test_yaml_and_overrides(tmp_path):
    path = tmp_path / "dofkit.yaml"
    path.write_text("logging: {level: info}\nshift: {overrides: {';': ':'}}\n")
    cfg = load_config(path, overrides={"shift": {"overrides": {"'": "@"}}})
    assert cfg.logging.level == "info"
    assert cfg.shift.overrides == {";": ":", "'": "@"}
    assert cfg.shift_table()["'"] == "@"


def test_env_names_config_file(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("logging: {level: debug}\n")
    monkeypatch.setenv("DOFKIT_CONFIG", str(path))
    assert load_config().logging.level == "debug"


def test_config_is_strict(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("logging: {level: loud}\n")
    with pytest.raises(ValidationError):
        load_config(path)
    with pytest.raises(ValidationError, match="one character"):
        load_config(overrides={"shift": {"overrides": {"ab": "c"}}})
    with pytest.raises(ValidationError):
        load_config(overrides={"colour": "blue"})

    path.write_text("- a\n- b\n")
    with pytest.raises(TypeError, match="mapping"):
        load_config(path)


def test_shift_overrides_reach_the_pipeline(qwerty_doc):
    cfg = load_config(overrides={"shift": {"overrides": {";": "ö"}}})
    dof = parse_dof(qwerty_doc, config=cfg)
    assert dof.shift_layer.cell(Pos(1, 9)) == Char("ö")


def test_deep_update_does_not_mutate():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = deep_update(base, {"a": {"b": 5}, "e": [1]})
    assert merged == {"a": {"b": 5, "c": 2}, "d": 3, "e": [1]}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}


def test_log_levels(monkeypatch):
    monkeypatch.delenv("DOFKIT_LOG_LEVEL", raising=False)
    assert level_from_cfg(None) == logging.WARNING
    assert level_from_cfg(load_config(overrides={"logging": {"level": "debug"}})) == logging.DEBUG
    monkeypatch.setenv("DOFKIT_LOG_LEVEL", "info")
    assert level_from_cfg(load_config(overrides={"logging": {"level": "debug"}})) == logging.INFO


def test_init_logging_sets_package_level():
    init_logging("debug")
    assert logging.getLogger("dofkit").level == logging.DEBUG
    init_logging("none")
    assert logging.getLogger("dofkit").level == logging.WARNING


def test_configure_logging_is_idempotent():
    configure_logging(True, logging.DEBUG)
    configure_logging(True, logging.DEBUG)
    assert len(logger.handlers) == 1
    configure_logging(False)
    assert logger.level > logging.CRITICAL
    # leave the package logger as importers find it
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
