"""Error classes and helpers"""

__all__ = ["DeobError", "ParseError", "TransformError", "MalformedLiteralError"]


class DeobError(Exception):
    """Base for errors reported by deobast.

    Args:
        message: (str) Error description
        position: (SourcePosition | None) Source location of the problem

    Attributes:
        message: (str) Error description
        position: (SourcePosition | None) Source location of the problem
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)

    def diagnostic(self):
        """Format as a `file:line:col: message` line."""
        where = str(self.position) if self.position is not None else ""
        if where:
            return f"{where}: {self.message}"
        return self.message


class ParseError(DeobError):
    """Source text could not be parsed."""


class TransformError(DeobError):
    """A tree pass could not complete."""


class MalformedLiteralError(TransformError):
    """Literal token cannot be interpreted as a number of its kind.

    This means the tree was built from a token the parser should never
    have produced, so the running pass is aborted.
    """
