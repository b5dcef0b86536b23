"""Tree nodes for the Java source subset handled by deobast."""

from ._node import *
from ._expr import *
from ._path import *
