from dofkit.definitions import Char, Empty, LayerKey, Special, SpecialKey, Transparent, Word
from dofkit.grid import Shape
from dofkit.layer import Layer, generate_shift_layer


def test_layer_rows():
    layer = Layer.from_rows(["q  w \\~ ~", "@nav spc #esc"])
    assert list(layer.rows()) == [
        [Char("q"), Char("w"), Char("~"), Empty()],
        [LayerKey("nav"), Special(SpecialKey.SPACE), Word("esc")],
    ]
    assert layer.to_rows() == ["q w \\~ ~", "@nav spc #esc"]
    assert Layer.from_rows(layer.to_rows()) == layer


def test_layer_references_in_scan_order():
    layer = Layer.from_rows(["@b a @a", "@b x"])
    assert list(layer.layer_references()) == ["b", "a", "b"]


def test_generated_shift_keeps_shape():
    main = Layer.from_rows(["a 1 ; ~", "ctl @nav hello *", "ß"])
    shift = generate_shift_layer(main)
    assert shift.shape() == main.shape() == Shape([4, 4, 1])
    assert list(shift.rows()) == [
        [Char("A"), Char("!"), Char(":"), Empty()],
        [Transparent(), LayerKey("nav"), Word("hello"), Transparent()],
        [Word("SS")],
    ]
    assert generate_shift_layer(main) == shift


def test_generated_shift_angle_brackets():
    shift = generate_shift_layer(Layer.from_rows([", . <"]))
    assert list(shift.rows()) == [[Char("<"), Char(">"), Char(">")]]
