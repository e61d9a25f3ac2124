"""Dotted-key access into nested configuration mappings."""

from typing import Any, Mapping, MutableMapping

_MISSING = object()


def _split_key(key: str) -> list:
    parts = key.split(".")
    if any(not part for part in parts):
        raise ValueError(f"Invalid nested key: {key!r}")
    return parts


def get_nested(mapping: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """
    Look up a dotted key such as ``"SYS.sitename"``.

    Returns ``default`` when any segment is missing or an intermediate value
    is not a mapping.
    """
    current: Any = mapping
    for part in _split_key(key):
        if not isinstance(current, Mapping):
            return default
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return default
    return current


def set_nested(mapping: MutableMapping[str, Any], key: str, value: Any) -> None:
    """
    Assign ``value`` at a dotted key, creating intermediate mappings.

    Raises:
        TypeError: If an intermediate value exists and is not a mapping.
    """
    parts = _split_key(key)
    current = mapping
    for depth, part in enumerate(parts[:-1]):
        child = current.get(part)
        if child is None:
            child = {}
            current[part] = child
        elif not isinstance(child, MutableMapping):
            prefix = ".".join(parts[: depth + 1])
            raise TypeError(f"Cannot set {key!r}: {prefix!r} holds a {type(child).__name__}")
        current = child
    current[parts[-1]] = value
