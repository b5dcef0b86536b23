"""
deobast: tree passes for Java source normalization

Parses a subset of Java into a tree of `deobast.ast` nodes, rewrites it with
passes such as `NegativeLiteralTransformer`, and prints it back as source.
"""

__version__ = "0.1.0"


from . import ast
from ._error import *
from ._literal import *
from ._parse import *
from ._transform import *
