"""Path addressing for in-place tree rewrites.

A path is a tuple of child indices leading from a root node down to one of
its descendants; the empty path names the root itself. Since nodes carry no
parent pointers, a rewrite replaces the node found at a path by assigning
into the `kids` slot of the node one step above it.
"""

__all__ = ["walk", "node_at", "replace"]

from collections.abc import Iterator

from ._node import Kind, Node


def walk(root: Node, kind: Kind | None = None) -> Iterator[tuple[tuple[int, ...], Node]]:
    """Visit nodes in post-order, yielding `(path, node)` pairs.

    Children are visited before their parent, and a parent reads its `kids`
    only as it reaches each one. Replacing the node just yielded (through
    `replace`) is therefore safe while iterating: the parent is yielded
    afterwards holding the replacement.

    Args:
        root: (Node) Tree to visit
        kind: (Kind | None) Only yield nodes of this kind

    Yields:
        (tuple[tuple[int, ...], Node]) Path from root and the node there
    """
    yield from _walk(root, (), kind)


def _walk(node, path, kind):
    for index in range(len(node.kids)):
        yield from _walk(node.kids[index], path + (index,), kind)
    if kind is None or node.kind is kind:
        yield path, node


def node_at(root: Node, path: tuple[int, ...]) -> Node:
    """Follow a path down from root."""
    node = root
    for index in path:
        node = node.kids[index]
    return node


def replace(root: Node, path: tuple[int, ...], new: Node) -> Node:
    """Substitute the node at path with `new`.

    Args:
        root: (Node) Tree to modify in place
        path: (tuple[int, ...]) Location of the node to replace
        new: (Node) Replacement subtree

    Returns:
        (Node) The root of the tree, which is `new` when path is empty
    """
    if not path:
        return new
    parent = node_at(root, path[:-1])
    parent.kids[path[-1]] = new
    return root
