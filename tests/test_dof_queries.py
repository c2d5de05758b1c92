import pytest

from dofkit.api import parse_dof
from dofkit.definitions import Char, Finger, LayerKey, Special, SpecialKey, Transparent
from dofkit.errors import InvalidPosition, LayerDoesntExist
from dofkit.grid import Pos
from dofkit.interaction import KeyPos
from dofkit.keyboard import PhysicalKey


def test_keys_describe_every_cell(ortho_doc):
    dof = parse_dof(ortho_doc)
    keys = dof.keys()
    # main, nav and the generated shift layer
    assert len(keys) == 3 * 36
    q = keys[0]
    assert q.output == Char("q") and q.layer == "main" and q.pos == Pos(0, 0)
    assert q.finger is Finger.LP
    assert q.physical == PhysicalKey(0.0, 0.0)
    assert q.is_char_key() and q.char_output() == "q"
    assert q.is_on_left_hand() and not q.is_on_right_hand()
    nav_key = next(k for k in keys if k.is_layer_key())
    assert nav_key.layer_output() == "nav"
    assert nav_key.keypos == KeyPos("main", Pos(3, 1))
    assert nav_key.physical == PhysicalKey(4.0, 3.0)


def test_get_and_tower(ortho_doc):
    dof = parse_dof(ortho_doc)
    assert dof.get("q") == [KeyPos("main", Pos(0, 0))]
    assert dof.get(Char("Q")) == [KeyPos("shift", Pos(0, 0))]
    assert dof.get("ret") == [KeyPos("main", Pos(3, 3))]
    assert dof.get("zz") == []
    assert dof.tower((3, 1)) == [LayerKey("nav"), Transparent(), LayerKey("nav")]


def test_finger_and_physical_lookup(ortho_doc):
    dof = parse_dof(ortho_doc)
    assert dof.finger((3, 5)) is Finger.RT
    assert dof.finger((3, 6)) is None
    assert dof.physical_key(Pos(3, 5)) == PhysicalKey(8.0, 3.0)
    assert dof.physical_key(Pos(9, 0)) is None
    assert dof.layer("nav") is not None and dof.layer("sym") is None


def test_swap_within_layer(ortho_doc):
    dof = parse_dof(ortho_doc)
    dof.swap(KeyPos.of("main", 0, 0), KeyPos.of("main", 1, 0))
    assert dof.main_layer.cell(Pos(0, 0)) == Char("a")
    assert dof.main_layer.cell(Pos(1, 0)) == Char("q")
    # the generated shift layer follows the main layer
    assert dof.shift_layer.cell(Pos(0, 0)) == Char("A")
    assert dof.shift_layer.cell(Pos(1, 0)) == Char("Q")


def test_swap_across_layers(ortho_doc):
    dof = parse_dof(ortho_doc)
    dof.swap(("main", (3, 2)), ("nav", (0, 0)))
    assert dof.main_layer.cell(Pos(3, 2)) == Transparent()
    assert dof.layer("nav").cell(Pos(0, 0)) == Special(SpecialKey.SPACE)


def test_swap_same_cell_is_noop(ortho_doc):
    dof = parse_dof(ortho_doc)
    before = dof.main_layer.copy()
    dof.swap(KeyPos.of("main", 1, 1), KeyPos.of("main", 1, 1))
    assert dof.main_layer == before


def test_swap_errors(ortho_doc):
    dof = parse_dof(ortho_doc)
    with pytest.raises(LayerDoesntExist) as info:
        dof.swap(KeyPos.of("main", 0, 0), KeyPos.of("sym", 0, 0))
    assert info.value.name == "sym"
    with pytest.raises(InvalidPosition) as info:
        dof.swap(KeyPos.of("main", 0, 0), KeyPos.of("main", 3, 6))
    assert (info.value.row, info.value.col) == (3, 6)
    # nothing changed after a failed swap
    assert dof.main_layer.cell(Pos(0, 0)) == Char("q")


def test_swap_on_generated_shift_makes_it_explicit(ortho_doc):
    dof = parse_dof(ortho_doc)
    dof.swap(KeyPos.of("shift", 0, 0), KeyPos.of("shift", 0, 1))
    assert not dof.has_generated_shift
    assert "shift" in dof.to_intermediate().layers
