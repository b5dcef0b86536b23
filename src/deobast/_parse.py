"""Parse Java source text into deobast trees.

Only the statement and expression subset described by `lark/java.lark` is
understood. That is enough to feed the tree passes and to print their
results back out; it is not a general Java front end.

Literal tokens are never interpreted here. Their text is stored as written
and the literal kind is decided from the shape of the token alone.
"""

__all__ = [
    "parse",
    "parse_expr",
    "parse_error",
    "position_from_lark",
]

import lark

from . import ast
from ._error import ParseError


_parsers = {}


def parse(source, filename=None):
    """Parse source text into a compilation unit.

    Args:
        source: (str) Java statements
        filename: (str | None) Name used in positions and diagnostics

    Returns:
        (ast.Unit) Root of the parsed tree

    Raises:
        ParseError: If the source is not in the supported grammar
    """
    parser = _lark_parser("java")
    try:
        tree = parser.parse(source)
    except lark.exceptions.UnexpectedInput as err:
        raise parse_error(err, filename) from err

    unit = ast.Unit([_convert_tree(kid, filename) for kid in tree.children])
    unit.position = ast.SourcePosition(filename, 1, 1)
    return unit


def parse_expr(source, filename=None):
    """Parse a single expression.

    Args:
        source: (str) Expression text, without a trailing semicolon

    Returns:
        (ast.Node) Expression node
    """
    unit = parse(f"{source};", filename)
    if len(unit.kids) != 1 or unit.kids[0].kind is not ast.Kind.EXPR_STMT:
        raise ParseError(f"Expected a single expression: {source}", unit.position)
    return unit.kids[0].expr


def position_from_lark(treetoken, filename=None):
    """Create a SourcePosition from a lark Tree or Token."""
    if isinstance(treetoken, lark.Token):
        token = treetoken
        return ast.SourcePosition(
            filename,
            token.line,
            token.column,
            token.end_line or token.line,
            token.end_column or token.column,
        )
    meta = treetoken.meta
    if meta.empty:
        return ast.SourcePosition(filename)
    return ast.SourcePosition(
        filename,
        meta.line,
        meta.column,
        meta.end_line or meta.line,
        meta.end_column or meta.column,
    )


def _parsed(treetoken, filename, node):
    """Attach the position of a lark tree or token to a node."""
    node.position = position_from_lark(treetoken, filename)
    return node


def _convert_tree(tree, filename):
    """Convert a single lark tree to a node, recursing into children.

    Args:
        tree: (lark.Tree) Lark Tree to convert
        filename: (str | None) Name stored in positions

    Returns:
        (ast.Node) Converted node
    """
    def convert(kid):
        return _convert_tree(kid, filename)

    kids = tree.children
    match tree.data:
        # Statements
        case "expr_stmt":
            return _parsed(tree, filename, ast.ExprStmt(convert(kids[0])))
        case "local_var":
            type_name = kids[0].children[0].value
            init = None
            if kids[2] is not None:
                if kids[2].value != "=":
                    raise ParseError(
                        f"Unexpected '{kids[2].value}' in declaration",
                        position_from_lark(kids[2], filename),
                    )
                init = convert(kids[3])
            return _parsed(tree, filename, ast.LocalVar(type_name, kids[1].value, init))
        case "assign_stmt":
            target = _parsed(kids[0], filename, ast.Name(kids[0].value))
            assign = _parsed(tree, filename, ast.Assign(kids[1].value, target, convert(kids[2])))
            return _parsed(tree, filename, ast.ExprStmt(assign))
        case "return_stmt":
            expr = convert(kids[0]) if kids[0] is not None else None
            return _parsed(tree, filename, ast.Return(expr))

        # Literals and names
        case "literal":
            token = kids[0]
            return _parsed(tree, filename, ast.Literal(_literal_kind(token), token.value))
        case "name":
            return _parsed(tree, filename, ast.Name(kids[0].value))

        # Operators
        case "prefix_op":
            op = ast.UnaryOperator.prefix(kids[0].value)
            return _parsed(tree, filename, ast.Unary(op, convert(kids[1])))
        case "postfix_op":
            op = ast.UnaryOperator.suffix(kids[1].value)
            return _parsed(tree, filename, ast.Unary(op, convert(kids[0])))
        case "binary":
            left = convert(kids[0])
            right = convert(kids[2])
            return _parsed(tree, filename, ast.Binary(kids[1].value, left, right))
        case "conditional":
            cond, then, otherwise = (convert(kid) for kid in kids)
            return _parsed(tree, filename, ast.Conditional(cond, then, otherwise))
        case "cast":
            return _parsed(tree, filename, ast.Cast(kids[0].value, convert(kids[1])))
        case "enclosed":
            return _parsed(tree, filename, ast.Enclosed(convert(kids[0])))

        # Calls and member access
        case "call":
            args = _convert_arguments(kids[1], filename)
            return _parsed(tree, filename, ast.Call(kids[0].value, args))
        case "method_call":
            target = convert(kids[0])
            args = _convert_arguments(kids[2], filename)
            return _parsed(tree, filename, ast.Call(kids[1].value, args, target=target))
        case "field_access":
            return _parsed(tree, filename, ast.FieldAccess(convert(kids[0]), kids[1].value))

    raise ValueError(f"Unhandled grammar rule: {tree.data}")


def _convert_arguments(tree, filename):
    if tree is None:
        return []
    return [_convert_tree(kid, filename) for kid in tree.children]


def _literal_kind(token):
    """Decide the literal kind from the shape of its token."""
    match token.type:
        case "STRING":
            return ast.LiteralKind.STRING
        case "CHAR":
            return ast.LiteralKind.CHAR
        case "TRUE" | "FALSE":
            return ast.LiteralKind.BOOLEAN
        case "NULL":
            return ast.LiteralKind.NULL

    text = token.value
    if text[:2] in ("0x", "0X", "0b", "0B"):
        return ast.LiteralKind.LONG if text[-1] in "lL" else ast.LiteralKind.INTEGER
    if any(char in text for char in ".eE") or text[-1] in "fFdD":
        return ast.LiteralKind.FLOATING
    if text[-1] in "lL":
        return ast.LiteralKind.LONG
    return ast.LiteralKind.INTEGER


def parse_error(err, filename=None):
    """Convert a lark parse failure into a ParseError with its position."""
    position = ast.SourcePosition(
        filename, getattr(err, "line", None), getattr(err, "column", None)
    )
    return ParseError(_describe(err), position)


def _describe(err):
    """Short message for a lark parse failure."""
    if isinstance(err, lark.exceptions.UnexpectedToken):
        token = err.token
        if token.type == "$END":
            return "Unexpected end of input"
        return f"Unexpected token {token.value!r}"
    if isinstance(err, lark.exceptions.UnexpectedCharacters):
        return f"Unexpected character {err.char!r}"
    return "Invalid syntax"


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(
        path, rel_to=__file__, parser="lalr", propagate_positions=True
    )
    _parsers[name] = parser
    return parser
