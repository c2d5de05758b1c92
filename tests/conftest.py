import logging

import pytest


@pytest.fixture
def qwerty_doc():
    return {
        "name": "Qwerty",
        "board": "ansi",
        "layers": {
            "main": [
                "q w e r t  y u i o p",
                "a s d f g  h j k l ;",
                "z x c v b  n m , . /",
            ],
        },
        "fingering": "traditional",
    }


@pytest.fixture
def ortho_doc():
    return {
        "name": "Ortho test",
        "board": "ortho",
        "layers": {
            "main": [
                "q w e r t  y u i o p",
                "a s d f g  h j k l ;",
                "z x c v b  n m , . /",
                "~ @nav spc  ret bsp ~",
            ],
            "nav": [
                "* * * * *  * * * * *",
                "* * * * *  * * * * *",
                "* * * * *  * * * * *",
                "* * * * * *",
            ],
        },
        "fingering": "traditional",
    }


@pytest.fixture
def relative_doc():
    return {
        "name": "Relative board",
        "board": ["k k k", "0.5 k 2k"],
        "layers": {"main": ["a b c", "d e"]},
        "fingering": ["LP LR LM", "LI RI"],
    }


@pytest.fixture
def full_doc():
    return {
        "name": "Full board",
        "authors": ["someone"],
        "year": 2023,
        "description": "custom geometry",
        "link": "https://example.com/layout",
        "languages": [{"language": "Dutch", "weight": 60}, {"language": "English", "weight": 40}],
        "board": [["0 0", "1 0.5"], ["0 1 1.5 2"]],
        "anchor": [0, 0],
        "layers": {"main": ["a b", "c"], "shift": ["A B", "C"]},
        "fingering": ["LI RI", "LT"],
        "combos": {"main": {"a b": "x"}},
    }


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """Remove console handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("dofkit").setLevel(logging.NOTSET)
