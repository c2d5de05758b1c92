"""Validation and resolution of layout documents.

:func:`resolve_layout` is the only way to build a :class:`~dofkit.dof.Dof`.
It runs a fixed sequence of checks over a parsed document; the first one
that fails raises its typed error and nothing after it runs.
"""
from __future__ import annotations

from typing import Mapping

from .combos import Combos, resolve_combos
from .contracts.intermediate import DEFAULT_LANGUAGES, DofIntermediate
from .dof import Dof
from .errors import IncompatibleLayerShapes, LayersNotFound, NoMainLayer
from .fingering import resolve_fingering
from .grid import Anchor, Shape
from .keyboard import FullBoard, NamedBoard, ParseKeyboard, PhysicalKeyboard
from .layer import Layer, generate_shift_layer
from .utils.logging import logger


def _main_layer(layers: Mapping[str, Layer]) -> Layer:
    main = layers.get("main")
    if main is None:
        raise NoMainLayer()
    return main


def _check_layer_references(main: Layer, layers: Mapping[str, Layer]) -> None:
    missing: list[str] = []
    for name in main.layer_references():
        if name not in layers and name not in missing:
            missing.append(name)
    if missing:
        raise LayersNotFound(missing)


def _check_layer_shapes(main: Layer, layers: Mapping[str, Layer]) -> Shape:
    shape = main.shape()
    bad = sorted(name for name, layer in layers.items() if layer.shape() != shape)
    if bad:
        raise IncompatibleLayerShapes(bad)
    return shape


def _resolve_physical(
    board: ParseKeyboard, anchor: Anchor, shape: Shape
) -> tuple[ParseKeyboard, PhysicalKeyboard]:
    full = board.physical()
    resized = full.resized(anchor, shape)
    if not isinstance(board, NamedBoard):
        board = FullBoard(full)
    return board, resized


def resolve_layout(
    inter: DofIntermediate, shift_table: Mapping[str, str] | None = None
) -> Dof:
    """Validate ``inter`` and resolve it into a :class:`Dof`.

    Parameters
    ----------
    inter:
        Parsed layout document.
    shift_table:
        Symbol substitutions used when the document has no ``shift`` layer.
        Defaults to :data:`dofkit.definitions.DEFAULT_SHIFT_TABLE`.
    """
    layers = {name: layer.copy() for name, layer in inter.layers.items()}

    main = _main_layer(layers)
    _check_layer_references(main, layers)
    shape = _check_layer_shapes(main, layers)
    logger.debug("layout %r: %d layers of shape %s", inter.name, len(layers), list(shape))

    anchor = inter.anchor if inter.anchor is not None else inter.board.anchor()

    fingering, fingering_name = resolve_fingering(inter.fingering, inter.board, anchor, shape)

    has_generated_shift = "shift" not in layers
    if has_generated_shift:
        layers["shift"] = generate_shift_layer(main, shift_table)
        logger.debug("layout %r: generated shift layer", inter.name)

    board, physical = _resolve_physical(inter.board, anchor, shape)
    logger.debug("layout %r: physical board resized at anchor %s", inter.name, tuple(anchor))

    combos = Combos()
    if inter.combos is not None:
        combos = resolve_combos(inter.combos, layers)

    return Dof(
        name=inter.name,
        authors=inter.authors,
        board=board,
        year=inter.year,
        description=inter.description,
        languages=list(inter.languages) if inter.languages is not None else list(DEFAULT_LANGUAGES),
        link=inter.link,
        layers=layers,
        anchor=anchor,
        fingering=fingering,
        fingering_name=fingering_name,
        has_generated_shift=has_generated_shift,
        physical=physical,
        combos=combos,
        shift_table=shift_table,
    )


__all__ = ["resolve_layout"]
