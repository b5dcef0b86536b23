"""Nodes for expressions."""

__all__ = [
    "LiteralKind",
    "UnaryOperator",
    "Literal",
    "Name",
    "Unary",
    "Binary",
    "Enclosed",
    "Call",
    "FieldAccess",
    "Conditional",
    "Cast",
    "Assign",
]

import enum

from ._node import Kind, Node


class LiteralKind(enum.Enum):
    """Literal token categories."""

    INTEGER = "int"
    LONG = "long"
    FLOATING = "floating"
    CHAR = "char"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


class UnaryOperator(enum.Enum):
    """Prefix and postfix operators, with source symbol and placement."""

    PLUS = ("+", False)
    MINUS = ("-", False)
    BITWISE_COMPLEMENT = ("~", False)
    LOGICAL_COMPLEMENT = ("!", False)
    PREFIX_INCREMENT = ("++", False)
    PREFIX_DECREMENT = ("--", False)
    POSTFIX_INCREMENT = ("++", True)
    POSTFIX_DECREMENT = ("--", True)

    def __init__(self, symbol, postfix):
        self.symbol = symbol
        self.postfix = postfix

    @classmethod
    def prefix(cls, symbol):
        """Look up the prefix operator written as `symbol`."""
        for op in cls:
            if op.symbol == symbol and not op.postfix:
                return op
        raise ValueError(f"Unknown prefix operator: {symbol}")

    @classmethod
    def suffix(cls, symbol):
        """Look up the postfix operator written as `symbol`."""
        for op in cls:
            if op.symbol == symbol and op.postfix:
                return op
        raise ValueError(f"Unknown postfix operator: {symbol}")


class Literal(Node):
    """A single literal token, kept in its raw source form.

    The text is never interpreted here; see `deobast.literal_value` for
    the numeric meaning of integer and long literals.
    """

    kind = Kind.LITERAL

    def __init__(self, literal_kind: LiteralKind, text: str):
        if not isinstance(literal_kind, LiteralKind):
            raise TypeError(f"Literal kind must be LiteralKind, got {type(literal_kind)}")
        self.literal_kind = literal_kind
        self.text = text
        super().__init__()

    def unparse(self) -> str:
        return self.text


class Name(Node):
    """Simple identifier."""

    kind = Kind.NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__()

    def unparse(self) -> str:
        return self.name


class Unary(Node):
    """Unary operation: -x, ~x, x++, etc."""

    kind = Kind.UNARY

    def __init__(self, op: UnaryOperator, operand: Node):
        if not isinstance(op, UnaryOperator):
            raise TypeError(f"Unary op must be UnaryOperator, got {type(op)}")
        if not isinstance(operand, Node):
            raise TypeError(f"Unary operand must be Node, got {type(operand)}")
        self.op = op
        super().__init__([operand])

    @property
    def operand(self) -> Node:
        return self.kids[0]

    def unparse(self) -> str:
        operand = self.operand.unparse()
        if self.op.postfix:
            return f"{operand}{self.op.symbol}"
        # "- -5" must not collapse into the decrement token
        if operand.startswith(self.op.symbol[-1]) and operand.startswith(("+", "-")):
            return f"{self.op.symbol} {operand}"
        return f"{self.op.symbol}{operand}"


class Binary(Node):
    """Infix operation: arithmetic, bitwise, comparison, logical."""

    kind = Kind.BINARY

    def __init__(self, op: str, left: Node, right: Node):
        self.op = op
        super().__init__([left, right])

    @property
    def left(self) -> Node:
        return self.kids[0]

    @property
    def right(self) -> Node:
        return self.kids[1]

    def unparse(self) -> str:
        return f"{self.left.unparse()} {self.op} {self.right.unparse()}"


class Enclosed(Node):
    """Parenthesized expression."""

    kind = Kind.ENCLOSED

    def __init__(self, inner: Node):
        super().__init__([inner])

    @property
    def inner(self) -> Node:
        return self.kids[0]

    def unparse(self) -> str:
        return f"({self.inner.unparse()})"


class Call(Node):
    """Function or method call: `name(args)` or `target.name(args)`.

    When a target is present it is the first kid, followed by the arguments.
    """

    kind = Kind.CALL

    def __init__(self, name: str, args: list[Node] | None = None, target: Node | None = None):
        self.name = name
        self.qualified = target is not None
        kids = [target] if target is not None else []
        kids.extend(args or [])
        super().__init__(kids)

    @property
    def target(self) -> Node | None:
        return self.kids[0] if self.qualified else None

    @property
    def args(self) -> list[Node]:
        return self.kids[1:] if self.qualified else self.kids

    def unparse(self) -> str:
        args = ", ".join(arg.unparse() for arg in self.args)
        if self.qualified:
            return f"{self.target.unparse()}.{self.name}({args})"
        return f"{self.name}({args})"


class FieldAccess(Node):
    """Member access: `target.name`."""

    kind = Kind.FIELD_ACCESS

    def __init__(self, target: Node, name: str):
        self.name = name
        super().__init__([target])

    @property
    def target(self) -> Node:
        return self.kids[0]

    def unparse(self) -> str:
        return f"{self.target.unparse()}.{self.name}"


class Conditional(Node):
    """Ternary: `cond ? then : otherwise`."""

    kind = Kind.CONDITIONAL

    def __init__(self, cond: Node, then: Node, otherwise: Node):
        super().__init__([cond, then, otherwise])

    @property
    def cond(self) -> Node:
        return self.kids[0]

    @property
    def then(self) -> Node:
        return self.kids[1]

    @property
    def otherwise(self) -> Node:
        return self.kids[2]

    def unparse(self) -> str:
        return f"{self.cond.unparse()} ? {self.then.unparse()} : {self.otherwise.unparse()}"


class Cast(Node):
    """Primitive cast: `(type) expr`."""

    kind = Kind.CAST

    def __init__(self, type: str, expr: Node):
        self.type = type
        super().__init__([expr])

    @property
    def expr(self) -> Node:
        return self.kids[0]

    def unparse(self) -> str:
        return f"({self.type}) {self.expr.unparse()}"


class Assign(Node):
    """Assignment, plain or compound: `target op value`."""

    kind = Kind.ASSIGN

    def __init__(self, op: str, target: Node, value: Node):
        self.op = op
        super().__init__([target, value])

    @property
    def target(self) -> Node:
        return self.kids[0]

    @property
    def value(self) -> Node:
        return self.kids[1]

    def unparse(self) -> str:
        return f"{self.target.unparse()} {self.op} {self.value.unparse()}"
