import pytest
from pydantic import ValidationError

from dofkit.api import dump_dof, parse_dof
from dofkit.contracts import DofIntermediate, Language
from dofkit.definitions import KeyboardType, NamedFingering
from dofkit.errors import FingerParseError
from dofkit.fingering import Fingering
from dofkit.grid import Anchor
from dofkit.keyboard import FullBoard, NamedBoard, RelativeBoard
from dofkit.layer import Layer
from dofkit.pipeline import resolve_layout


def test_intermediate_parses_fields(full_doc):
    inter = DofIntermediate.model_validate(full_doc)
    assert isinstance(inter.board, FullBoard)
    assert isinstance(inter.layers["main"], Layer)
    assert isinstance(inter.fingering, Fingering)
    assert inter.anchor == Anchor(0, 0)
    assert inter.languages[0] == Language(language="Dutch", weight=60)


def test_intermediate_defaults(qwerty_doc):
    inter = DofIntermediate.model_validate(qwerty_doc)
    assert inter.board == NamedBoard(KeyboardType.ANSI)
    assert inter.fingering == NamedFingering.TRADITIONAL
    assert inter.anchor is None and inter.combos is None and inter.languages is None


def test_intermediate_requires_fingering(qwerty_doc, relative_doc):
    del qwerty_doc["fingering"]
    with pytest.raises(ValidationError, match="fingering"):
        DofIntermediate.model_validate(qwerty_doc)

    del relative_doc["fingering"]
    with pytest.raises(ValidationError, match="fingering"):
        parse_dof(relative_doc)


def test_intermediate_rejects_unknown_fields(qwerty_doc):
    qwerty_doc["colour"] = "blue"
    with pytest.raises(ValidationError):
        DofIntermediate.model_validate(qwerty_doc)


def test_intermediate_wraps_parse_errors(qwerty_doc):
    qwerty_doc["fingering"] = ["LP XX"]
    with pytest.raises(ValidationError, match="not a finger"):
        DofIntermediate.model_validate(qwerty_doc)

    qwerty_doc["fingering"] = "traditional"
    qwerty_doc["board"] = [["0 0", "1 one"]]
    with pytest.raises(ValidationError, match="physical key rows"):
        DofIntermediate.model_validate(qwerty_doc)


def test_intermediate_rejects_bad_layers_and_anchor(qwerty_doc):
    with pytest.raises(ValidationError, match="list of row strings"):
        DofIntermediate.model_validate({**qwerty_doc, "layers": {"main": "q w e"}})
    with pytest.raises(ValidationError, match="non-negative"):
        DofIntermediate.model_validate({**qwerty_doc, "anchor": [-1, 0]})


def test_finger_errors_keep_their_type(qwerty_doc):
    qwerty_doc["fingering"] = ["LP XX"]
    with pytest.raises(ValidationError) as info:
        DofIntermediate.model_validate(qwerty_doc)
    assert isinstance(info.value.errors()[0]["ctx"]["error"], FingerParseError)


def test_minimal_document_dumps_minimal(qwerty_doc):
    doc = dump_dof(parse_dof(qwerty_doc))
    assert doc == {
        "name": "Qwerty",
        "board": "ansi",
        "layers": {"main": [" ".join(r.split()) for r in qwerty_doc["layers"]["main"]]},
        "fingering": "traditional",
    }


@pytest.mark.parametrize("fixture", ["qwerty_doc", "ortho_doc", "relative_doc", "full_doc"])
def test_resolved_layout_round_trip(fixture, request):
    dof = parse_dof(request.getfixturevalue(fixture))
    again = resolve_layout(dof.to_intermediate())
    assert again == dof
    assert parse_dof(dump_dof(dof)) == dof


def test_relative_board_dumps_as_relative(relative_doc):
    dof = parse_dof(relative_doc)
    inter = dof.to_intermediate()
    assert isinstance(inter.board, RelativeBoard)
    assert dump_dof(dof)["board"] == ["k k k", "0.5 k 2k"]


def test_full_document_keeps_metadata(full_doc):
    doc = dump_dof(parse_dof(full_doc))
    assert doc["languages"] == full_doc["languages"]
    assert doc["board"] == full_doc["board"]
    assert doc["combos"] == full_doc["combos"]
    assert doc["layers"]["shift"] == ["A B", "C"]
    assert "anchor" not in doc


def test_non_default_anchor_is_kept(qwerty_doc):
    qwerty_doc["anchor"] = [0, 1]
    doc = dump_dof(parse_dof(qwerty_doc))
    assert doc["anchor"] == [0, 1]


def test_language_defaults():
    assert Language() == Language(language="English", weight=100)
    assert Language.only("French").weight == 100
