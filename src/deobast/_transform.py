"""Tree passes that normalize parsed source before decompiler cleanup.

A pass is a `Transformer` whose `transform` rewrites a tree in place and
returns its root. Passes are sequenced by `run_transforms`.
"""

__all__ = [
    "Transformer",
    "NegativeLiteralTransformer",
    "run_transforms",
]

import logging

from . import ast
from ._literal import is_integer_or_long_literal, negate


logger = logging.getLogger(__name__)


class Transformer:
    """Base for tree passes.

    Attributes:
        changes: (int) Rewrites made by the most recent `transform` call
    """

    def __init__(self):
        self.changes = 0

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def transform(self, root: ast.Node) -> ast.Node:
        """Rewrite the tree in place.

        Returns:
            (ast.Node) Root of the tree, which differs from `root` only when
            the root node itself was replaced
        """
        raise NotImplementedError(f"{self.name}.transform() not implemented")


class NegativeLiteralTransformer(Transformer):
    """Fold unary plus and minus applied to int and long literals.

    `+5` becomes `5` and `-0x10` becomes the single literal `-0x10`. The
    operand must be a bare literal token; `-(5)` and `-x` are left alone.
    Unary nodes are visited children first, so `- -5` folds all the way
    down to `5` in one run.
    """

    def transform(self, root):
        self.changes = 0
        for path, node in ast.walk(root, ast.Kind.UNARY):
            operand = node.operand
            if not is_integer_or_long_literal(operand):
                continue

            if node.op is ast.UnaryOperator.PLUS:
                replacement = operand
            elif node.op is ast.UnaryOperator.MINUS:
                replacement = negate(operand)
                replacement.position = node.position
            else:
                continue

            logger.debug("%s: %s -> %s", node.position, node.unparse(), replacement.unparse())
            root = ast.replace(root, path, replacement)
            self.changes += 1
        return root


def run_transforms(root, transformers=None):
    """Run a sequence of passes over one tree.

    Args:
        root: (ast.Node) Tree to rewrite in place
        transformers: (list[Transformer] | None) Passes to run in order,
            defaults to just `NegativeLiteralTransformer`

    Returns:
        (ast.Node) Root of the rewritten tree

    Raises:
        TransformError: If a pass cannot complete; the tree may be partially
            rewritten
    """
    if transformers is None:
        transformers = [NegativeLiteralTransformer()]

    total = 0
    for transformer in transformers:
        root = transformer.transform(root)
        logger.debug("%s made %d changes", transformer.name, transformer.changes)
        total += transformer.changes
    logger.info("Ran %d transforms, %d changes", len(transformers), total)
    return root
