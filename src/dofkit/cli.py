# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys

import yaml

from .api import dump_dof, load_dof, save_dof
from .config.loader import load_config
from .keyboard import NamedBoard
from .logging import init_logging, init_logging_from_cfg

# Everything a broken or unreadable layout file can raise.
_LOAD_ERRORS = (OSError, ValueError, TypeError, yaml.YAMLError)


def _setup(args):
    cfg = load_config(args.config)
    if args.log_level:
        init_logging(args.log_level)
    else:
        init_logging_from_cfg(cfg)
    return cfg


def _board_label(dof) -> str:
    if isinstance(dof.board, NamedBoard):
        return dof.board.board_type.name
    return f"custom ({dof.board.keyboard.row_count()} rows)"


def cmd_validate(args):
    cfg = _setup(args)
    failed = 0
    for path in args.files:
        try:
            dof = load_dof(path, config=cfg)
        except _LOAD_ERRORS as exc:
            failed += 1
            print(f"FAIL {path}: {exc}")
        else:
            print(f"OK   {path}: {dof.name}")
    return 1 if failed else 0


def cmd_info(args):
    cfg = _setup(args)
    try:
        dof = load_dof(args.file, config=cfg)
    except _LOAD_ERRORS as exc:
        print(f"FAIL {args.file}: {exc}", file=sys.stderr)
        return 1

    info = {
        "name": dof.name,
        "board": _board_label(dof),
        "shape": list(dof.shape()),
        "anchor": [dof.anchor.x, dof.anchor.y],
        "layers": list(dof.layers),
        "generated_shift": dof.has_generated_shift,
        "fingering": str(dof.fingering_name) if dof.fingering_name is not None else "explicit",
        "combos": sum(len(c) for c in dof.combos.by_layer.values()),
    }
    if args.json:
        print(json.dumps(info, ensure_ascii=False))
    else:
        for key, value in info.items():
            print(f"{key:>16}: {value}")
    return 0


def cmd_normalize(args):
    cfg = _setup(args)
    try:
        dof = load_dof(args.file, config=cfg)
    except _LOAD_ERRORS as exc:
        print(f"FAIL {args.file}: {exc}", file=sys.stderr)
        return 1

    if args.out:
        save_dof(dof, args.out)
    else:
        print(json.dumps(dump_dof(dof), ensure_ascii=False, indent=2))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="dofkit")
    p.add_argument("--config", default=None, help="YAML config file (default: $DOFKIT_CONFIG)")
    p.add_argument("--log-level", dest="log_level", choices=["none", "info", "debug"], default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    pv = sub.add_parser("validate", help="Check that layout files resolve")
    pv.add_argument("files", nargs="+", help="layout files (.dof/.json/.yaml)")
    pv.set_defaults(func=cmd_validate)

    pi = sub.add_parser("info", help="Summarise a layout file")
    pi.add_argument("file", help="layout file")
    pi.add_argument("--json", action="store_true", help="print the summary as JSON")
    pi.set_defaults(func=cmd_info)

    pn = sub.add_parser("normalize", help="Rewrite a layout file in its minimal form")
    pn.add_argument("file", help="layout file")
    pn.add_argument("--out", default=None, help="write here instead of printing JSON")
    pn.set_defaults(func=cmd_normalize)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
