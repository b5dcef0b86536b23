"""Unit testing quality of life and readability helpers for deobast tests."""

import pytest

import deobast


def params(names, **cases):
    """Simplified parametrize decorator for test cases.

    Args:
        names: Space or comma-separated string of parameter names
        **cases: Named test cases where key is the test ID and value is
                either a single argument or tuple of arguments

    Returns:
        pytest.mark.parametrize decorator with 'key' as first parameter

    Example:
        @params("code expected", plus=("+5;", "5;"))
        def test_fold(key, code, expected):
            assert deobtest.fold(code) == expected
    """
    keys = list(cases)
    params = []
    for k, v in cases.items():
        # If value is a tuple, unpack it; otherwise keep as single value
        if isinstance(v, tuple):
            params.append((k, *v))
        else:
            params.append((k, v))

    columns = names.replace(",", " ").split()
    columns.insert(0, "key")
    return pytest.mark.parametrize(columns, params, ids=keys)


def literal(text, kind=None):
    """Build a literal node, deciding int or long from the suffix."""
    if kind is None:
        long = text[-1] in "lL"
        kind = deobast.ast.LiteralKind.LONG if long else deobast.ast.LiteralKind.INTEGER
    return deobast.ast.Literal(kind, text)


def fold(source):
    """Parse statements, fold them, and give back the printed source."""
    unit = deobast.parse(source)
    unit = deobast.NegativeLiteralTransformer().transform(unit)
    return unit.unparse()

