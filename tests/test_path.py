"""Test cases for path based tree walking and replacement."""

import deobast
import deobtest
from deobast import ast


def test_walk_post_order():
    unit = deobast.parse("x = -a + b;")
    visited = [(path, node.unparse()) for path, node in ast.walk(unit)]
    assert visited == [
        ((0, 0, 0), "x"),
        ((0, 0, 1, 0, 0), "a"),
        ((0, 0, 1, 0), "-a"),
        ((0, 0, 1, 1), "b"),
        ((0, 0, 1), "-a + b"),
        ((0, 0), "x = -a + b"),
        ((0,), "x = -a + b;"),
        ((), "x = -a + b;"),
    ]


def test_walk_kind():
    unit = deobast.parse("f(-1, ~x); return +y;")
    paths = [path for path, _ in ast.walk(unit, ast.Kind.UNARY)]
    assert paths == [(0, 0, 0), (0, 0, 1), (1, 0)]
    assert [node.unparse() for node in unit.find_all(ast.Kind.UNARY)] == ["-1", "~x", "+y"]


def test_node_at():
    unit = deobast.parse("a; b = c;")
    assert ast.node_at(unit, ()) is unit
    assert ast.node_at(unit, (1, 0, 1)).matches(ast.Name("c"))


def test_replace():
    unit = deobast.parse("x = y + 1;")
    result = ast.replace(unit, (0, 0, 1, 0), deobtest.literal("2"))
    assert result is unit
    assert unit.unparse() == "x = 2 + 1;"


def test_replace_root():
    root = deobast.parse_expr("a")
    new = ast.Name("b")
    assert ast.replace(root, (), new) is new


def test_replace_while_walking():
    """A node replaced during the walk is what its parent holds afterwards."""
    unit = deobast.parse("g(h(a), b);")
    seen = []
    for path, node in ast.walk(unit):
        if node.kind is ast.Kind.NAME:
            ast.replace(unit, path, ast.Name(node.name.upper()))
        if node.kind is ast.Kind.CALL:
            seen.append(node.unparse())
    assert seen == ["h(A)", "g(h(A), B)"]


def test_matches():
    left = deobast.parse("x = -5;")
    right = deobast.parse("\n\nx   =   -5 ;")
    assert left.matches(right)
    assert not left.matches(deobast.parse("x = -6;"))
    assert not left.matches(deobast.parse("x = +5;"))
    assert not left.matches("x = -5;")


def test_tree_print(capsys):
    unit = deobast.parse("x = -5;", filename="T.java")
    unit.tree(show_pos=True)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0] == "Unit(*1)  [T.java:1:1]"
    assert lines[3] == "      Name(name='x')  [T.java:1:1]"
    assert lines[5] == "        Literal(literal_kind=<LiteralKind.INTEGER: 'int'> text='5')  [T.java:1:6]"

    unit.tree()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Unit(*1)"
    assert not any("[" in line for line in lines)
