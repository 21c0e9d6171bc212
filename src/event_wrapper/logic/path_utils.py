"""
Dotted-path assignment into nested dicts.

``set_path(tree, 'a.b.c', 1)`` turns ``{}`` into ``{'a': {'b': {'c': 1}}}``.
Intermediate levels are created on demand; a path that would have to descend
through a non-dict value, or that contains an empty segment, raises
``PathAssignmentError`` and leaves the already built part of the tree as is.
"""

from typing import Any, Dict, List

PATH_SEPARATOR = '.'


class PathAssignmentError(ValueError):
    """Raised when a dotted path cannot be assigned into a tree."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


def split_path(path: str) -> List[str]:
    segments = path.split(PATH_SEPARATOR)
    if not path or any(not segment for segment in segments):
        raise PathAssignmentError(f"Invalid path '{path}': empty segment", path)
    return segments


def set_path(tree: Dict[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """
    Assign ``value`` at the dotted ``path`` inside ``tree``.

    Args:
        tree: Dict owned by the caller, mutated in place
        path: Dotted path, one nesting level per segment
        value: Value stored at the leaf

    Returns:
        The same ``tree`` for chaining
    """
    segments = split_path(path)
    node = tree
    for segment in segments[:-1]:
        child = node.get(segment)
        if child is None:
            child = node[segment] = {}
        elif not isinstance(child, dict):
            raise PathAssignmentError(
                f"Invalid path '{path}': '{segment}' already holds a {type(child).__name__}",
                path,
            )
        node = child
    node[segments[-1]] = value
    return tree
