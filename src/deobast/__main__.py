#!/usr/bin/env python3
"""deobast CLI - run tree passes over Java source.

Usage:
    deobast <file.java>                 # Print normalized source
    deobast <file.java> --tree          # Show node tree after the passes
    deobast <file.java> --lark          # Show Lark parse tree
    deobast "x = -(+5);" --text         # Parse inline source
"""

import argparse
import logging
import pathlib
import sys

import lark
from lark import Token, Tree

import deobast
from deobast import _parse


def prettylark(node, indent=0, show_positions=False):
    """Pretty-print a Lark parse tree.

    Shows tree structure with clear indentation and token values.
    """
    prefix = "  " * indent

    if isinstance(node, Token):
        pos = f" @{node.line}:{node.column}" if show_positions else ""
        print(f"{prefix}{node.type}: {node.value!r}{pos}")

    elif isinstance(node, Tree):
        pos = ""
        if show_positions and node.meta and not node.meta.empty:
            pos = f" @{node.meta.line}:{node.meta.column}"

        if len(node.children) == 1 and isinstance(node.children[0], Token):
            # Compact single-token nodes
            print(f"{prefix}{node.data}: {node.children[0].value!r}{pos}")
        else:
            print(f"{prefix}{node.data}:{pos}")
            for child in node.children:
                if child is not None:
                    prettylark(child, indent + 1, show_positions)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="deobast",
        description="Normalize Java source with deobast tree passes")
    parser.add_argument("source",
        help="Java source file to process")
    parser.add_argument("--text", action="store_true",
        help="Treat source as inline source text")
    parser.add_argument("--lark", action="store_true",
        help="Show Lark parse tree")
    parser.add_argument("--tree", action="store_true",
        help="Show node tree instead of source")
    parser.add_argument("--no-fold", action="store_true",
        help="Skip the literal folding passes")
    parser.add_argument("--pos", action="store_true",
        help="Show line:column positions for nodes")
    parser.add_argument("-v", "--verbose", action="count", default=0,
        help="Log pass activity, repeat for rewrite details")

    args = parser.parse_args(argv)

    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("deobast").setLevel(level)

    if args.text:
        source = args.source
        filename = None
    else:
        filepath = pathlib.Path(args.source)
        try:
            source = filepath.read_text()
        except OSError as err:
            print(f"{args.source}: {err.strerror}", file=sys.stderr)
            return 1
        filename = args.source

    if args.lark:
        if args.tree:
            parser.error("--lark cannot be combined with --tree")
        try:
            tree = _parse._lark_parser("java").parse(source)
        except lark.exceptions.UnexpectedInput as err:
            print(deobast.parse_error(err, filename).diagnostic(), file=sys.stderr)
            return 1
        prettylark(tree, show_positions=args.pos)
        return 0

    try:
        unit = deobast.parse(source, filename)
        if not args.no_fold:
            unit = deobast.run_transforms(unit)
    except deobast.DeobError as err:
        print(err.diagnostic(), file=sys.stderr)
        return 1

    if args.tree:
        unit.tree(show_pos=args.pos)
    else:
        print(unit.unparse())
    return 0


if __name__ == "__main__":
    sys.exit(main())
