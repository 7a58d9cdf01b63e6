"""Dot-path access to nested parameter dictionaries."""

from typing import Any, Iterable, Mapping, Optional, Union

from ..routing import DistrictValue


def get_path(obj: Optional[Mapping[str, Any]], path: str, default: Any = None) -> Any:
    """Read a value by dot-path, returning ``default`` if any segment is missing."""
    node: Any = obj
    for segment in path.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return default
        node = node[segment]
    return node


def set_path(obj: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Assign a value by dot-path, creating intermediate dictionaries.

    A non-dict value sitting on the path is replaced by a dict.

    Returns:
        The same ``obj``, for chaining
    """
    segments = path.split(".")
    node = obj
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value
    return obj


def apply_district_values(
    target: dict[str, Any],
    values: Iterable[Union[DistrictValue, tuple[str, Any]]],
) -> dict[str, Any]:
    """Apply routed district values to a parameter tree one path at a time."""
    for item in values:
        if isinstance(item, DistrictValue):
            set_path(target, item.path, item.value)
        else:
            path, value = item
            set_path(target, path, value)
    return target
