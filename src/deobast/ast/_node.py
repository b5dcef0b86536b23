"""Ast base nodes, positions and statements"""

__all__ = [
    "Kind",
    "SourcePosition",
    "Node",
    "Unit",
    "ExprStmt",
    "LocalVar",
    "Return",
]

import enum
from dataclasses import dataclass


class Kind(enum.Enum):
    """Tag identifying the variant of every node."""

    UNIT = "unit"
    EXPR_STMT = "expr_stmt"
    LOCAL_VAR = "local_var"
    RETURN = "return"
    LITERAL = "literal"
    NAME = "name"
    UNARY = "unary"
    BINARY = "binary"
    ENCLOSED = "enclosed"
    CALL = "call"
    FIELD_ACCESS = "field_access"
    CONDITIONAL = "conditional"
    CAST = "cast"
    ASSIGN = "assign"


@dataclass
class SourcePosition:
    """Source code position information for AST nodes.

    Attributes:
        filename: Source file path, None for inline text
        start_line: Starting line number (1-indexed)
        start_column: Starting column number (1-indexed)
        end_line: Ending line number (1-indexed)
        end_column: Ending column number (1-indexed)
    """
    filename: str | None = None
    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        """Format position for diagnostics as file:line:col."""
        if not self.start_line:
            return self.filename or ""
        where = f"{self.start_line}:{self.start_column or 1}"
        if self.filename:
            return f"{self.filename}:{where}"
        return where


class Node:
    """Base class for all AST nodes.

    Every subclass sets the `kind` class attribute. Children live only in
    the `kids` list of their parent, named accessors on subclasses are views
    into that list. Nodes hold no reference to their parent; use
    `deobast.ast.walk` and `deobast.ast.replace` to rewrite a tree.
    """

    kind: Kind

    def __init__(self, kids: list["Node"] | None = None):
        self.kids = list(kids) if kids else []
        self.position = None

    def __repr__(self):
        """Compact representation showing type and key attributes."""
        attrs = []
        if self.kids:
            attrs.append(f'*{len(self.kids)}')
        for key, value in self.__dict__.items():
            if key not in ('kids', 'position'):
                attrs.append(f'{key}={value!r}')
        return f"{self.__class__.__name__}({' '.join(attrs)})"

    def tree(self, indent=0, show_pos=False):
        """Print tree structure, optionally with source positions."""
        pos = f"  [{self.position}]" if show_pos and self.position else ""
        print(f"{'  '*indent}{self!r}{pos}")
        for kid in self.kids:
            kid.tree(indent + 1, show_pos)

    def find_all(self, kind):
        """Find all descendants of given kind, including self."""
        results = [self] if self.kind is kind else []
        for kid in self.kids:
            results.extend(kid.find_all(kind))
        return results

    def matches(self, other) -> bool:
        """Hierarchical comparison of AST structure.

        Compares node kinds, attributes (excluding position), and recursively
        compares all children.

        Args:
            other: Another Node to compare against

        Returns:
            True if nodes have same kind, attributes, and children structure
        """
        if not isinstance(other, Node) or other.kind is not self.kind:
            return False

        if len(self.kids) != len(other.kids):
            return False

        mine = {k: v for k, v in self.__dict__.items() if k not in ('kids', 'position')}
        theirs = {k: v for k, v in other.__dict__.items() if k not in ('kids', 'position')}
        if mine != theirs:
            return False

        for self_kid, other_kid in zip(self.kids, other.kids, strict=True):
            if not self_kid.matches(other_kid):
                return False

        return True

    def unparse(self) -> str:
        """Convert back to source representation."""
        raise NotImplementedError(f"{self.__class__.__name__}.unparse() not implemented")


class Unit(Node):
    """Root of a parsed source file."""

    kind = Kind.UNIT

    @property
    def statements(self) -> list[Node]:
        """Access statements (alias for kids)."""
        return self.kids

    def unparse(self) -> str:
        return "\n".join(kid.unparse() for kid in self.kids)


class ExprStmt(Node):
    """Expression evaluated for its effect: `expr;`"""

    kind = Kind.EXPR_STMT

    def __init__(self, expr: Node):
        super().__init__([expr])

    @property
    def expr(self) -> Node:
        return self.kids[0]

    def unparse(self) -> str:
        return f"{self.expr.unparse()};"


class LocalVar(Node):
    """Local variable declaration: `type name = init;`"""

    kind = Kind.LOCAL_VAR

    def __init__(self, type: str, name: str, init: Node | None = None):
        self.type = type
        self.name = name
        super().__init__([init] if init is not None else None)

    @property
    def init(self) -> Node | None:
        return self.kids[0] if self.kids else None

    def unparse(self) -> str:
        if self.init is None:
            return f"{self.type} {self.name};"
        return f"{self.type} {self.name} = {self.init.unparse()};"


class Return(Node):
    """Return statement with optional value."""

    kind = Kind.RETURN

    def __init__(self, expr: Node | None = None):
        super().__init__([expr] if expr is not None else None)

    @property
    def expr(self) -> Node | None:
        return self.kids[0] if self.kids else None

    def unparse(self) -> str:
        if self.expr is None:
            return "return;"
        return f"return {self.expr.unparse()};"
