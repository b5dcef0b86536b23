"""Integer literal classification, interpretation and negation.

Integer and long literals are kept in the tree as raw source text. This
module splits that text into its formatting parts, interprets it with the
two's complement semantics of the literal's declared width, and produces
negated literals written in the same radix and suffix as the original.

Decimal literals may spell a magnitude of up to 2**(width-1), which is only
meaningful as the operand of a unary minus (`-2147483648`). Hexadecimal,
octal and binary literals spell a bit pattern of up to `width` bits, so
`0xFFFFFFFF` is the int -1. Arithmetic happens on Python integers and is
reduced into the declared width afterwards, so no intermediate value ever
overflows.
"""

__all__ = [
    "WIDTHS",
    "LiteralFormat",
    "is_integer_or_long_literal",
    "literal_format",
    "literal_value",
    "format_literal",
    "negate",
]

from typing import NamedTuple

from . import ast
from ._error import MalformedLiteralError


WIDTHS = {
    ast.LiteralKind.INTEGER: 32,
    ast.LiteralKind.LONG: 64,
}

_DIGITS = {
    2: "01",
    8: "01234567",
    10: "0123456789",
    16: "0123456789abcdefABCDEF",
}


class LiteralFormat(NamedTuple):
    """Structural parts of an integer literal's text.

    Attributes:
        negative: Text starts with a minus sign (synthesized literals only)
        prefix: Radix prefix as written: "", "0", "0x", "0X", "0b" or "0B"
        digits: Digits as written, underscores included
        suffix: Type suffix as written: "", "l" or "L"
        radix: Numeric base, one of 2, 8, 10, 16
    """
    negative: bool
    prefix: str
    digits: str
    suffix: str
    radix: int


def is_integer_or_long_literal(node) -> bool:
    """Check if node is a single int or long literal token.

    Purely structural: the literal text is not examined, and parenthesized
    or sign-prefixed literals are not literals.
    """
    return node.kind is ast.Kind.LITERAL and node.literal_kind in WIDTHS


def literal_format(node) -> LiteralFormat:
    """Split an integer or long literal's text into formatting parts."""
    text = node.text
    negative = text.startswith("-")
    body = text[1:] if negative else text

    suffix = ""
    if body.endswith(("l", "L")):
        suffix = body[-1]
        body = body[:-1]

    if body[:2] in ("0x", "0X"):
        prefix, radix = body[:2], 16
    elif body[:2] in ("0b", "0B"):
        prefix, radix = body[:2], 2
    elif len(body) > 1 and body[0] == "0":
        prefix, radix = "0", 8
    else:
        prefix, radix = "", 10

    return LiteralFormat(negative, prefix, body[len(prefix):], suffix, radix)


def literal_value(node) -> int:
    """Interpret an integer or long literal as a signed value of its width.

    Args:
        node: (Literal) Node accepted by `is_integer_or_long_literal`

    Returns:
        (int) Value in the two's complement range of the literal's width

    Raises:
        MalformedLiteralError: If the text is not a valid literal of its kind
    """
    fmt = literal_format(node)
    width = WIDTHS[node.literal_kind]
    digits = fmt.digits
    plain = digits.replace("_", "")

    malformed = (
        not plain
        or digits.endswith("_")
        or (digits.startswith("_") and fmt.radix != 8)
        or any(char not in _DIGITS[fmt.radix] for char in plain)
    )
    if malformed:
        raise MalformedLiteralError(
            f"Invalid {node.literal_kind.value} literal: {node.text}", node.position
        )

    magnitude = int(plain, fmt.radix)
    if fmt.radix == 10:
        limit = 1 << (width - 1)
    else:
        limit = (1 << width) - 1
    if magnitude > limit:
        raise MalformedLiteralError(
            f"{node.literal_kind.value} literal out of range: {node.text}", node.position
        )

    return _wrap(-magnitude if fmt.negative else magnitude, width)


def format_literal(value: int, template: LiteralFormat) -> str:
    """Write value using the radix, prefix and suffix of a template literal.

    Negative values are written as a minus sign followed by the magnitude.
    Hex digits follow the letter case of the template, or of its prefix when
    the template has no letter digits.
    """
    magnitude = abs(value)
    match template.radix:
        case 16:
            digits = format(magnitude, "X" if _upper_hex(template) else "x")
        case 8:
            digits = format(magnitude, "o")
        case 2:
            digits = format(magnitude, "b")
        case _:
            digits = str(magnitude)
    sign = "-" if value < 0 else ""
    return f"{sign}{template.prefix}{digits}{template.suffix}"


def negate(node):
    """Produce the arithmetic negation of an expression.

    For int and long literals this is a new literal of the same kind, radix
    and suffix holding the negated value, wrapped into the literal's width.
    A unary minus expression gives back its operand. Anything else is
    wrapped in a new unary minus.

    Args:
        node: (Node) Expression to negate

    Returns:
        (Node) Negated expression

    Raises:
        MalformedLiteralError: If a literal's text cannot be interpreted
    """
    if is_integer_or_long_literal(node):
        width = WIDTHS[node.literal_kind]
        value = _wrap(-literal_value(node), width)
        negated = ast.Literal(node.literal_kind, format_literal(value, literal_format(node)))
        negated.position = node.position
        return negated

    if node.kind is ast.Kind.UNARY and node.op is ast.UnaryOperator.MINUS:
        return node.operand

    if node.kind in (ast.Kind.BINARY, ast.Kind.CONDITIONAL, ast.Kind.ASSIGN):
        node = ast.Enclosed(node)
    return ast.Unary(ast.UnaryOperator.MINUS, node)


def _wrap(value, width):
    """Reduce value into the signed range of width bits."""
    half = 1 << (width - 1)
    return ((value + half) % (1 << width)) - half


def _upper_hex(template):
    letters = [char for char in template.digits if char.isalpha()]
    if letters:
        return all(char.isupper() for char in letters)
    return template.prefix == "0X"
